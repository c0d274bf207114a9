"""Abstract base class that every billing data source must fulfill."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from omegaconf import DictConfig

POLICY_COLUMNS = (
    "id",
    "policy_number",
    "insured_name",
    "vehicle_plate",
    "emirate",
    "inception_date",
    "expiry_date",
    "premium",
    "status",
)

INVOICE_COLUMNS = (
    "id",
    "policy_id",
    "invoice_number",
    "issue_date",
    "due_date",
    "amount",
    "status",
)


class SourceNotConfiguredError(RuntimeError):
    """Raised when a source is selected but its connection settings are missing."""


class BaseSource(ABC):
    """Contract for interchangeable sources of raw policy and invoice rows.

    Sources return raw backend rows (nullable fields, snake_case keys); the
    caller normalizes them.  The active source is selected at runtime via the
    Hydra configuration (``cfg.source.type``).
    """

    def __init__(self, cfg: DictConfig) -> None:
        self.cfg = cfg

    @abstractmethod
    def fetch_policy_rows(self, limit: int) -> list[dict[str, Any]]:
        """Return up to *limit* raw ``policies`` rows, newest first."""
        ...

    @abstractmethod
    def fetch_invoice_rows(self, limit: int) -> list[dict[str, Any]]:
        """Return up to *limit* raw ``invoices`` rows, newest first."""
        ...

    @abstractmethod
    def insert_policy(self, row: dict[str, Any]) -> dict[str, Any]:
        """Insert one ``policies`` row and return it as stored (with ``id``)."""
        ...

    @abstractmethod
    def insert_invoice(self, row: dict[str, Any]) -> dict[str, Any]:
        """Insert one ``invoices`` row and return it as stored (with ``id``)."""
        ...
