"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from lease_renewal import __version__
from lease_renewal.api.v1.router import api_router
from lease_renewal.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI application
app = FastAPI(
    title="Lease Renewal Policy Engine API",
    description="API for evaluating payment histories and renewing leases",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Lease Renewal Policy Engine API",
        "version": __version__,
        "docs": "/api/docs",
    }
