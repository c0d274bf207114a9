"""In-process demo source for running the dashboard without a backend."""

from __future__ import annotations

import uuid
from typing import Any

from loguru import logger
from omegaconf import DictConfig

from motor_billing.core.demo_data import DEMO_INVOICES, DEMO_POLICIES
from motor_billing.sources.base import BaseSource


class DemoSource(BaseSource):
    """Serve the demo dataset as raw rows; inserts live only in memory."""

    def __init__(self, cfg: DictConfig) -> None:
        super().__init__(cfg)
        self._policies: list[dict[str, Any]] = [p.model_dump(mode="json") for p in DEMO_POLICIES]
        self._invoices: list[dict[str, Any]] = [i.model_dump(mode="json") for i in DEMO_INVOICES]
        logger.info(
            "Demo source ready ({p} policies, {i} invoices)",
            p=len(self._policies),
            i=len(self._invoices),
        )

    def fetch_policy_rows(self, limit: int) -> list[dict[str, Any]]:
        return _newest_first(self._policies, "inception_date")[:limit]

    def fetch_invoice_rows(self, limit: int) -> list[dict[str, Any]]:
        return _newest_first(self._invoices, "issue_date")[:limit]

    def insert_policy(self, row: dict[str, Any]) -> dict[str, Any]:
        stored = {**row, "id": f"pol-{uuid.uuid4().hex[:8]}"}
        self._policies.append(stored)
        return dict(stored)

    def insert_invoice(self, row: dict[str, Any]) -> dict[str, Any]:
        stored = {**row, "id": f"inv-{uuid.uuid4().hex[:8]}"}
        self._invoices.append(stored)
        return dict(stored)


def _newest_first(rows: list[dict[str, Any]], key: str) -> list[dict[str, Any]]:
    return sorted((dict(r) for r in rows), key=lambda r: r.get(key) or "", reverse=True)
