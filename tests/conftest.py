"""Shared fixtures for the billing dashboard test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from omegaconf import OmegaConf

from motor_billing.schemas.billing import Invoice, InvoiceStatus, Policy, PolicyStatus
from motor_billing.schemas.create import NewPolicy

# ---------------------------------------------------------------------------
# Raw backend rows
# ---------------------------------------------------------------------------


@pytest.fixture()
def policy_row() -> dict[str, Any]:
    """A complete ``policies`` row as PostgREST returns it."""
    return {
        "id": "7c1e",
        "policy_number": "DXB-MTR-2025-0142",
        "insured_name": "Al Noor Logistics LLC",
        "vehicle_plate": "D 48210",
        "emirate": "Dubai",
        "inception_date": "2025-03-01",
        "expiry_date": "2026-02-28",
        "premium": 14200,
        "status": "active",
    }


@pytest.fixture()
def invoice_row() -> dict[str, Any]:
    """A complete ``invoices`` row referencing :func:`policy_row`."""
    return {
        "id": "a9f2",
        "policy_id": "7c1e",
        "invoice_number": "INV-UAE-2101",
        "issue_date": "2025-03-01",
        "due_date": "2025-03-31",
        "amount": "7100.00",
        "status": "paid",
    }


# ---------------------------------------------------------------------------
# Normalized collections
# ---------------------------------------------------------------------------


@pytest.fixture()
def policies() -> list[Policy]:
    return [
        Policy(id="p1", policy_number="P-1", premium=12500, status=PolicyStatus.ACTIVE),
        Policy(id="p2", policy_number="P-2", premium=8000, status=PolicyStatus.CANCELLED),
        Policy(id="p3", policy_number="P-3", premium=4000.5, status=PolicyStatus.EXPIRED),
        Policy(id="p4", policy_number="P-4", premium=3000, status=PolicyStatus.ACTIVE),
    ]


@pytest.fixture()
def invoices() -> list[Invoice]:
    return [
        Invoice(id="i1", policy_id="p1", amount=6250, status=InvoiceStatus.PAID),
        Invoice(id="i2", policy_id="p1", amount=6250, status=InvoiceStatus.PENDING),
        Invoice(id="i3", policy_id="p4", amount=9450, status=InvoiceStatus.OVERDUE),
        Invoice(id="i4", policy_id="missing", amount=100.25, status=InvoiceStatus.OVERDUE),
    ]


# ---------------------------------------------------------------------------
# Create payload
# ---------------------------------------------------------------------------


@pytest.fixture()
def new_policy_payload() -> dict[str, Any]:
    return {
        "policy_number": "DXB-MTR-2025-0142",
        "insured_name": "Al Noor Logistics LLC",
        "vehicle_plate": "D 48210",
        "emirate": "Dubai",
        "inception_date": "2025-03-01",
        "expiry_date": "2026-02-28",
        "premium": 14200.0,
        "invoice_number": "INV-UAE-2101",
        "issue_date": "2025-03-01",
        "due_date": "2025-03-31",
    }


@pytest.fixture()
def new_policy(new_policy_payload: dict[str, Any]) -> NewPolicy:
    return NewPolicy(**new_policy_payload)


# ---------------------------------------------------------------------------
# Hydra config fixture (test overrides)
# ---------------------------------------------------------------------------


@pytest.fixture()
def test_cfg() -> Any:
    """Return a minimal OmegaConf DictConfig with test overrides."""
    cfg_dict = {
        "source": {
            "type": "supabase",
            "url": "https://example.supabase.co",
            "key": "test-anon-key",
            "policies_table": "policies",
            "invoices_table": "invoices",
            "row_limit": 200,
        },
        "logging": {
            "level": "WARNING",
            "colored": False,
            "format": "pretty",
        },
        "server": {
            "host": "127.0.0.1",
            "port": 8000,
            "debug": False,
            "cors_origins": ["http://localhost:8501"],
        },
    }
    return OmegaConf.create(cfg_dict)


# ---------------------------------------------------------------------------
# Mock source
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_source(policy_row: dict[str, Any], invoice_row: dict[str, Any]) -> MagicMock:
    """A source whose reads return one policy and one invoice row."""
    source = MagicMock()
    source.fetch_policy_rows.return_value = [policy_row]
    source.fetch_invoice_rows.return_value = [invoice_row]
    source.insert_policy.side_effect = lambda row: {**row, "id": "new-pol"}
    source.insert_invoice.side_effect = lambda row: {**row, "id": "new-inv"}
    return source
