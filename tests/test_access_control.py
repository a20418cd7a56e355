"""
Tests for oracle-gated policy administration.

Covers:
1. Oracle identity check
2. Oracle hand-over (NOT_AUTHORIZED for strangers)
3. Default threshold / period validation (ORACLE_NOT_VERIFIED first)
4. Unbounded grace period ceiling
"""
import pytest

from lease_renewal.core.enums import ErrorCode
from lease_renewal.core.exceptions import AuthorizationError, RuleValidationError
from lease_renewal.services.access_control import AccessController

ORACLE = "ST1TEST"
STRANGER = "ST2FAKE"


@pytest.fixture
def access(policy):
    return AccessController(policy)


class TestAuthorization:
    """Tests for is_authorized and set_oracle."""

    def test_oracle_is_authorized(self, access):
        assert access.is_authorized(ORACLE) is True
        assert access.is_authorized(STRANGER) is False

    def test_set_oracle_hands_over_role(self, access, policy):
        access.set_oracle(ORACLE, STRANGER)

        assert policy.oracle_principal == STRANGER
        assert access.is_authorized(STRANGER) is True
        assert access.is_authorized(ORACLE) is False

    def test_set_oracle_rejects_stranger(self, access, policy):
        with pytest.raises(AuthorizationError) as exc:
            access.set_oracle(STRANGER, STRANGER)

        assert exc.value.code == ErrorCode.NOT_AUTHORIZED
        assert policy.oracle_principal == ORACLE


class TestPolicySetters:
    """Tests for default threshold, period, and grace period setters."""

    def test_sets_default_threshold(self, access, policy):
        access.set_default_threshold(ORACLE, 80)
        assert policy.default_threshold == 80

    def test_accepts_threshold_boundary(self, access, policy):
        access.set_default_threshold(ORACLE, 100)
        assert policy.default_threshold == 100

    @pytest.mark.parametrize("value", [0, -5, 101])
    def test_rejects_invalid_default_threshold(self, access, policy, value):
        with pytest.raises(RuleValidationError) as exc:
            access.set_default_threshold(ORACLE, value)

        assert exc.value.code == ErrorCode.INVALID_THRESHOLD
        assert policy.default_threshold == 90

    def test_threshold_checks_oracle_before_range(self, access):
        with pytest.raises(AuthorizationError) as exc:
            access.set_default_threshold(STRANGER, 101)

        assert exc.value.code == ErrorCode.ORACLE_NOT_VERIFIED

    def test_sets_default_period(self, access, policy):
        access.set_default_period(ORACLE, 24)
        assert policy.default_period == 24

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_invalid_default_period(self, access, policy, value):
        with pytest.raises(RuleValidationError) as exc:
            access.set_default_period(ORACLE, value)

        assert exc.value.code == ErrorCode.INVALID_PERIOD
        assert policy.default_period == 12

    def test_period_requires_oracle(self, access, policy):
        with pytest.raises(AuthorizationError) as exc:
            access.set_default_period(STRANGER, 24)

        assert exc.value.code == ErrorCode.ORACLE_NOT_VERIFIED
        assert policy.default_period == 12

    @pytest.mark.parametrize("value", [0, 45, -3])
    def test_grace_period_accepts_any_value(self, access, policy, value):
        access.set_grace_period(ORACLE, value)
        assert policy.grace_period == value

    def test_grace_period_requires_oracle(self, access, policy):
        with pytest.raises(AuthorizationError) as exc:
            access.set_grace_period(STRANGER, 10)

        assert exc.value.code == ErrorCode.ORACLE_NOT_VERIFIED
        assert policy.grace_period == 30
