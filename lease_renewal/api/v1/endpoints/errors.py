"""Translation of renewal engine failures into HTTP errors."""

from fastapi import HTTPException, status

from lease_renewal.core.enums import ErrorCode
from lease_renewal.core.exceptions import (
    AuthorizationError,
    CollaboratorError,
    RenewalError,
    RuleValidationError,
)


def to_http_exception(error: RenewalError) -> HTTPException:
    """
    Map a renewal error onto an HTTP status.

    The response detail always carries the numeric code and kind name so
    clients can branch on the specific failure.
    """
    if isinstance(error, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, RuleValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, CollaboratorError):
        if error.code == ErrorCode.UPDATE_FAILED:
            status_code = status.HTTP_502_BAD_GATEWAY
        else:
            status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_409_CONFLICT

    return HTTPException(
        status_code=status_code,
        detail={
            "code": error.code.value,
            "error": error.code.name,
            "detail": error.message,
        },
    )
