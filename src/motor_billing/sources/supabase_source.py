"""Supabase (PostgREST) backed source."""

from __future__ import annotations

from typing import Any

from loguru import logger
from omegaconf import DictConfig
from supabase import Client, create_client

from motor_billing.sources.base import (
    INVOICE_COLUMNS,
    POLICY_COLUMNS,
    BaseSource,
    SourceNotConfiguredError,
)


class SupabaseSource(BaseSource):
    """Read and write billing rows through the ``supabase`` client SDK.

    Parameters
    ----------
    cfg:
        The full Hydra configuration; ``cfg.source`` must provide ``url``,
        ``key``, ``policies_table`` and ``invoices_table``.
    client:
        Optional pre-built client (tests inject a mock here).
    """

    def __init__(self, cfg: DictConfig, client: Client | None = None) -> None:
        super().__init__(cfg)

        url: str = cfg.source.url or ""
        key: str = cfg.source.key or ""
        if client is None and (not url or not key):
            raise SourceNotConfiguredError(
                "Supabase client is not configured. Missing URL or anon key."
            )

        self.client: Client = client if client is not None else create_client(url, key)
        self.policies_table: str = cfg.source.policies_table
        self.invoices_table: str = cfg.source.invoices_table
        logger.info(
            "Supabase source ready (tables: {p}, {i})",
            p=self.policies_table,
            i=self.invoices_table,
        )

    # -----------------------------------------------------------------
    # Reads
    # -----------------------------------------------------------------

    def fetch_policy_rows(self, limit: int) -> list[dict[str, Any]]:
        return self._select(self.policies_table, POLICY_COLUMNS, "inception_date", limit)

    def fetch_invoice_rows(self, limit: int) -> list[dict[str, Any]]:
        return self._select(self.invoices_table, INVOICE_COLUMNS, "issue_date", limit)

    # -----------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------

    def insert_policy(self, row: dict[str, Any]) -> dict[str, Any]:
        return self._insert(self.policies_table, row)

    def insert_invoice(self, row: dict[str, Any]) -> dict[str, Any]:
        return self._insert(self.invoices_table, row)

    # -----------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------

    def _select(
        self,
        table: str,
        columns: tuple[str, ...],
        order_by: str,
        limit: int,
    ) -> list[dict[str, Any]]:
        response = (
            self.client.table(table)
            .select(", ".join(columns))
            .order(order_by, desc=True)
            .limit(limit)
            .execute()
        )
        rows = response.data or []
        logger.debug("Fetched {n} rows from {table}", n=len(rows), table=table)
        return rows

    def _insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        response = self.client.table(table).insert(row).execute()
        if not response.data:
            raise RuntimeError(f"Insert into {table} returned no row")
        stored = response.data[0]
        logger.info("Inserted row {id} into {table}", id=stored.get("id"), table=table)
        return stored
