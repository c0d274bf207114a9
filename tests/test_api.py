"""Integration tests for the FastAPI application.

Uses ``httpx.AsyncClient`` (via ``pytest-asyncio``) with a mocked source so
no Supabase calls are made.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from omegaconf import DictConfig, OmegaConf

from motor_billing.api.middleware import REQUEST_ID_HEADER
from motor_billing.core.demo_data import DEMO_POLICIES

# ---------------------------------------------------------------------------
# App fixtures
# ---------------------------------------------------------------------------


def _bare_app(cfg: DictConfig, source: Any) -> FastAPI:
    from motor_billing.api.routes.billing import router as billing_router

    app = FastAPI(title="test")
    app.state.cfg = cfg
    app.state.source = source
    app.include_router(billing_router, prefix="/api/v1")
    return app


@pytest.fixture()
def app(test_cfg: DictConfig, mock_source: MagicMock) -> FastAPI:
    return _bare_app(test_cfg, mock_source)


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def unconfigured_client(test_cfg: DictConfig) -> AsyncClient:
    transport = ASGITransport(app=_bare_app(test_cfg, None))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ═══════════════════════════════════════════════════════════════════════
# Tests
# ═══════════════════════════════════════════════════════════════════════


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "source": "supabase", "configured": True}

    @pytest.mark.asyncio
    async def test_health_unconfigured(self, unconfigured_client: AsyncClient) -> None:
        resp = await unconfigured_client.get("/api/v1/health")
        assert resp.json()["configured"] is False

    @pytest.mark.asyncio
    async def test_health_answers_during_slow_fetch(
        self,
        client: AsyncClient,
        mock_source: MagicMock,
        policy_row: dict[str, Any],
    ) -> None:
        fetch_started = threading.Event()
        release = threading.Event()
        fetch_done = threading.Event()

        def slow_fetch(limit: int) -> list[dict[str, Any]]:
            fetch_started.set()
            release.wait(timeout=5)
            fetch_done.set()
            return [policy_row]

        mock_source.fetch_policy_rows.side_effect = slow_fetch

        dashboard = asyncio.create_task(client.get("/api/v1/dashboard"))
        assert await asyncio.to_thread(fetch_started.wait, 5)

        health = await client.get("/api/v1/health")
        assert health.status_code == 200
        assert not fetch_done.is_set()

        release.set()
        resp = await dashboard
        assert resp.status_code == 200
        assert resp.json()["policies"][0]["id"] == "7c1e"


class TestReadEndpoints:
    @pytest.mark.asyncio
    async def test_policies(self, client: AsyncClient, mock_source: MagicMock) -> None:
        resp = await client.get("/api/v1/policies")
        assert resp.status_code == 200
        body = resp.json()
        assert body["warning"] is None
        assert body["policies"][0]["policy_number"] == "DXB-MTR-2025-0142"
        mock_source.fetch_policy_rows.assert_called_with(200)

    @pytest.mark.asyncio
    async def test_invoices_are_linked(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/invoices")
        line = resp.json()["invoices"][0]
        assert line["invoice_number"] == "INV-UAE-2101"
        assert line["policy_number"] == "DXB-MTR-2025-0142"
        assert line["insured_name"] == "Al Noor Logistics LLC"
        assert line["status"] == "paid"

    @pytest.mark.asyncio
    async def test_dashboard(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/dashboard")
        assert resp.status_code == 200
        stats = resp.json()["stats"]
        assert stats == {
            "total_premium": 14200.0,
            "total_outstanding": 0.0,
            "total_collected": 7100.0,
            "active_policies": 1,
            "overdue_invoices": 0,
        }

    @pytest.mark.asyncio
    async def test_reports(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/reports")
        report = resp.json()["report"]
        assert report["total_policies"] == 1
        assert report["aging"] == {"pending": 0, "paid": 1, "overdue": 0}
        assert report["overdue_rate"] == 0

    @pytest.mark.asyncio
    async def test_unconfigured_serves_demo_data(self, unconfigured_client: AsyncClient) -> None:
        resp = await unconfigured_client.get("/api/v1/dashboard")
        assert resp.status_code == 200
        body = resp.json()
        assert body["warning"] == "Supabase not configured. Showing demo data."
        assert len(body["policies"]) == len(DEMO_POLICIES)
        assert body["stats"]["overdue_invoices"] == 1

    @pytest.mark.asyncio
    async def test_backend_error_serves_demo_data(
        self, client: AsyncClient, mock_source: MagicMock
    ) -> None:
        mock_source.fetch_policy_rows.side_effect = RuntimeError("boom")
        resp = await client.get("/api/v1/policies")
        assert resp.status_code == 200
        body = resp.json()
        assert body["warning"].startswith("Supabase error: boom")
        assert body["policies"][0]["id"] == "pol-1"


class TestCreatePolicy:
    @pytest.mark.asyncio
    async def test_create(
        self, client: AsyncClient, new_policy_payload: dict[str, Any]
    ) -> None:
        resp = await client.post("/api/v1/policies", json=new_policy_payload)
        assert resp.status_code == 201
        body = resp.json()
        assert body["policy"]["id"] == "new-pol"
        assert body["invoice"]["policy_id"] == "new-pol"
        assert body["invoice"]["amount"] == 14200.0

    @pytest.mark.asyncio
    async def test_invalid_payload_returns_422(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/policies", json={"policy_number": "X"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_unconfigured_returns_503(
        self, unconfigured_client: AsyncClient, new_policy_payload: dict[str, Any]
    ) -> None:
        resp = await unconfigured_client.post("/api/v1/policies", json=new_policy_payload)
        assert resp.status_code == 503

    @pytest.mark.asyncio
    async def test_backend_error_returns_500(
        self,
        client: AsyncClient,
        mock_source: MagicMock,
        new_policy_payload: dict[str, Any],
    ) -> None:
        mock_source.insert_policy.side_effect = RuntimeError("duplicate key value")
        resp = await client.post("/api/v1/policies", json=new_policy_payload)
        assert resp.status_code == 500
        assert "duplicate key value" in resp.json()["detail"]


class TestCreateApp:
    @pytest.mark.asyncio
    async def test_demo_source_app(self, test_cfg: DictConfig) -> None:
        from motor_billing.api.app import create_app

        cfg = OmegaConf.merge(test_cfg, {"source": {"type": "demo"}})
        app = create_app(cfg)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/v1/dashboard")
        assert resp.status_code == 200
        assert resp.json()["warning"] is None
        assert resp.json()["stats"]["active_policies"] == 2

    def test_missing_credentials_leave_source_unset(self, test_cfg: DictConfig) -> None:
        from motor_billing.api.app import create_app

        cfg = OmegaConf.merge(test_cfg, {"source": {"url": "", "key": ""}})
        app = create_app(cfg)
        assert app.state.source is None


class TestMiddleware:
    @pytest.fixture()
    def demo_app(self, test_cfg: DictConfig) -> FastAPI:
        from motor_billing.api.app import create_app

        app = create_app(OmegaConf.merge(test_cfg, {"source": {"type": "demo"}}))

        @app.get("/api/v1/broken")
        async def broken() -> dict:
            raise RuntimeError("ledger offline")

        return app

    @pytest.mark.asyncio
    async def test_unhandled_error_returns_json_500(self, demo_app: FastAPI) -> None:
        transport = ASGITransport(app=demo_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/v1/broken")
        assert resp.status_code == 500
        body = resp.json()
        assert body["detail"] == "Internal server error"
        assert body["error"] == "ledger offline"
        assert body["request_id"] == resp.headers[REQUEST_ID_HEADER]

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, demo_app: FastAPI) -> None:
        transport = ASGITransport(app=demo_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            first = await ac.get("/api/v1/health")
            second = await ac.get("/api/v1/health")
        assert first.headers[REQUEST_ID_HEADER]
        assert first.headers[REQUEST_ID_HEADER] != second.headers[REQUEST_ID_HEADER]

    @pytest.mark.asyncio
    async def test_incoming_request_id_is_echoed(self, demo_app: FastAPI) -> None:
        transport = ASGITransport(app=demo_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/api/v1/broken", headers={REQUEST_ID_HEADER: "dash-42"})
        assert resp.headers[REQUEST_ID_HEADER] == "dash-42"
        assert resp.json()["request_id"] == "dash-42"
