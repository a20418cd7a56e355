"""Core enums for type safety across the application."""

from enum import Enum, IntEnum


class ErrorCode(IntEnum):
    """Numeric failure kinds callers branch on."""

    NOT_AUTHORIZED = 100
    INVALID_LEASE_ID = 101
    NO_PAYMENT_HISTORY = 102
    THRESHOLD_FAILED = 103
    INVALID_RULES = 104
    RENEWAL_IN_PROGRESS = 105
    PERIOD_MISMATCH = 106
    CALCULATION_OVERFLOW = 107
    ORACLE_NOT_VERIFIED = 108
    GRACE_PERIOD_EXCEEDED = 109
    MIN_PAYMENTS_NOT_MET = 110
    INVALID_THRESHOLD = 111
    INVALID_PERIOD = 112
    LEASE_NOT_FOUND = 113
    UPDATE_FAILED = 114


class RenewalState(str, Enum):
    """Renewal lifecycle states of a lease."""

    UNINITIALIZED = "Uninitialized"
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
