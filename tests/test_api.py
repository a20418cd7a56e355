"""Tests for the HTTP surface."""
import logging

import anyio
import anyio.to_thread
import httpx
import pytest
from fastapi.testclient import TestClient

from lease_renewal.deps import RenewalHost, get_host
from lease_renewal.main import app

ORACLE = "ST1TEST"


@pytest.fixture
def host(policy):
    return RenewalHost.create(policy=policy, height=100)


@pytest.fixture
def client(host):
    app.dependency_overrides[get_host] = lambda: host
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def seed(client, lease_id=1, on_time=13, late=0, term=12):
    body = [{"amount": "100", "timestamp": i, "onTime": True} for i in range(on_time)]
    body += [{"amount": "100", "timestamp": on_time + i, "onTime": False} for i in range(late)]
    assert client.post(f"/api/v1/leases/{lease_id}/payments", json=body).status_code == 201
    assert client.put(f"/api/v1/leases/{lease_id}/term", json={"term": term}).status_code == 200


class TestLeaseEndpoints:
    """Tests for rule, payment, and term endpoints."""

    def test_set_and_get_rules(self, client):
        rules = {"threshold": 85, "period": 10, "durationExtension": 12, "minPayments": 5, "graceDays": 20}

        response = client.put("/api/v1/leases/1/rules", json=rules)
        assert response.status_code == 200
        assert response.json() == {"leaseId": 1, **rules}

        assert client.get("/api/v1/leases/1/rules").json() == {"leaseId": 1, **rules}

    def test_invalid_rules_report_code(self, client):
        rules = {"threshold": 101, "period": 10, "durationExtension": 12, "minPayments": 5, "graceDays": 20}

        response = client.put("/api/v1/leases/1/rules", json=rules)

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == 111
        assert response.json()["detail"]["error"] == "INVALID_THRESHOLD"

    def test_rejected_rules_not_logged_as_errors(self, client, caplog):
        """A caller-side validation failure is not a server error."""
        rules = {"threshold": 101, "period": 10, "durationExtension": 12, "minPayments": 5, "graceDays": 20}

        with caplog.at_level(logging.DEBUG, logger="lease_renewal.api.v1.endpoints.leases"):
            response = client.put("/api/v1/leases/1/rules", json=rules)

        assert response.status_code == 400
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_missing_rules_404(self, client):
        assert client.get("/api/v1/leases/9/rules").status_code == 404

    def test_payment_history(self, client):
        seed(client, on_time=2, late=1)

        payments = client.get("/api/v1/leases/1/payments").json()["payments"]
        assert [p["onTime"] for p in payments] == [True, True, False]

    def test_unknown_payment_history(self, client):
        response = client.get("/api/v1/leases/5/payments")
        assert response.status_code == 404
        assert response.json()["detail"]["code"] == 102


class TestRenewalEndpoints:
    """Tests for renewal, evaluation, and status endpoints."""

    def test_renew(self, client):
        seed(client)

        response = client.post("/api/v1/leases/1/renewals")

        assert response.status_code == 201
        assert response.json() == {"leaseId": 1, "newTerm": 24}
        assert client.get("/api/v1/leases/1/term").json()["term"] == 24

        status = client.get("/api/v1/leases/1/status").json()
        assert status["state"] == "Active"
        assert status["extensions"] == 1
        assert status["nextEligible"] == 112

        evaluations = client.get("/api/v1/leases/1/evaluations").json()
        assert evaluations[0]["evaluationId"] == 0
        assert evaluations[0]["metThreshold"] is True
        assert client.get("/api/v1/leases/1/evaluations/0").json()["ratio"] == 100
        assert client.get("/api/v1/evaluations/count").json() == {"count": 1}

    def test_threshold_failure(self, client):
        seed(client, on_time=0, late=2)

        response = client.post("/api/v1/leases/1/renewals")

        assert response.status_code == 409
        assert response.json()["detail"]["code"] == 103

    def test_renewal_window(self, client):
        seed(client)
        client.post("/api/v1/leases/1/renewals")

        response = client.post("/api/v1/leases/1/renewals")
        assert response.status_code == 409
        assert response.json()["detail"]["error"] == "GRACE_PERIOD_EXCEEDED"

        client.post("/api/v1/admin/clock/advance", json={"blocks": 12}, headers={"X-Caller": ORACLE})
        assert client.post("/api/v1/leases/1/renewals").json()["newTerm"] == 36

    def test_unknown_lease(self, client):
        response = client.post("/api/v1/leases/3/renewals")
        assert response.status_code == 404
        assert response.json()["detail"]["code"] == 102

    def test_manual_evaluation_requires_oracle(self, client):
        response = client.post("/api/v1/leases/1/evaluations", headers={"X-Caller": "ST2FAKE"})

        assert response.status_code == 403
        assert response.json()["detail"]["code"] == 108

    def test_manual_evaluation(self, client):
        seed(client, lease_id=1)
        seed(client, lease_id=2, on_time=0, late=2)

        renewed = client.post("/api/v1/leases/1/evaluations", headers={"X-Caller": ORACLE})
        not_renewed = client.post("/api/v1/leases/2/evaluations", headers={"X-Caller": ORACLE})

        assert renewed.json() == {"leaseId": 1, "renewed": True}
        assert not_renewed.status_code == 200
        assert not_renewed.json() == {"leaseId": 2, "renewed": False}

    def test_missing_status_404(self, client):
        assert client.get("/api/v1/leases/1/status").status_code == 404
        assert client.get("/api/v1/leases/1/evaluations/0").status_code == 404


class TestAdminEndpoints:
    """Tests for oracle-gated policy administration."""

    def test_get_policy(self, client):
        policy = client.get("/api/v1/admin/policy").json()

        assert policy["oraclePrincipal"] == ORACLE
        assert policy["defaultThreshold"] == 90
        assert policy["gracePeriod"] == 30

    def test_set_default_threshold(self, client):
        response = client.put(
            "/api/v1/admin/default-threshold", json={"threshold": 80}, headers={"X-Caller": ORACLE}
        )
        assert response.status_code == 200
        assert response.json()["defaultThreshold"] == 80

    def test_invalid_default_period(self, client):
        response = client.put(
            "/api/v1/admin/default-period", json={"period": 0}, headers={"X-Caller": ORACLE}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == 112

    def test_set_oracle_requires_oracle(self, client):
        response = client.put(
            "/api/v1/admin/oracle", json={"oracle": "ST2FAKE"}, headers={"X-Caller": "ST2FAKE"}
        )
        assert response.status_code == 403
        assert response.json()["detail"]["code"] == 100

    def test_set_grace_period(self, client):
        response = client.put(
            "/api/v1/admin/grace-period", json={"gracePeriod": 5}, headers={"X-Caller": ORACLE}
        )
        assert response.json()["gracePeriod"] == 5

    def test_clock_advance_requires_oracle(self, client):
        response = client.post("/api/v1/admin/clock/advance", json={"blocks": 3})
        assert response.status_code == 403

    def test_health(self, client):
        assert client.get("/api/v1/health").json()["status"] == "healthy"


class TestConcurrentRequests:
    """Requests queued on the host lock must not starve the worker threads."""

    def test_more_requests_than_worker_threads(self, host):
        """Six concurrent requests complete with only two worker threads."""
        app.dependency_overrides[get_host] = lambda: host
        statuses = []

        async def fetch(client):
            response = await client.get("/api/v1/evaluations/count")
            statuses.append((response.status_code, response.json()["count"]))

        async def run():
            anyio.to_thread.current_default_thread_limiter().total_tokens = 2
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                with anyio.fail_after(10):
                    async with anyio.create_task_group() as tg:
                        for _ in range(6):
                            tg.start_soon(fetch, client)

        try:
            anyio.run(run)
        finally:
            app.dependency_overrides.clear()

        assert statuses == [(200, 0)] * 6
