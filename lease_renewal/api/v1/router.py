"""API v1 router configuration."""

from fastapi import APIRouter

from lease_renewal.api.v1.endpoints import admin, health, leases, renewals

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    leases.router,
    prefix="/leases",
    tags=["leases"],
)

api_router.include_router(
    renewals.router,
    tags=["renewals"],
)

api_router.include_router(
    admin.router,
    prefix="/admin",
    tags=["admin"],
)
