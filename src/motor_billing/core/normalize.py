"""Raw backend rows → fixed-shape ``Policy`` / ``Invoice`` records.

Both normalizers are total: missing or null fields fall back to display
defaults and unrecognised statuses collapse to the default branch.  They
accept snake_case backend rows, camelCase rows, or already-normalized models,
so applying them twice is a no-op.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from typing import Any

from loguru import logger
from pydantic import BaseModel

from motor_billing.schemas.billing import Invoice, InvoiceStatus, Policy, PolicyStatus

_NOT_AVAILABLE = "N/A"
_DASH = "—"

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_policy(raw: Mapping[str, Any] | BaseModel) -> Policy:
    """Build a :class:`Policy` from a raw ``policies`` row."""
    row = _as_mapping(raw)
    return Policy(
        id=_text(_pick(row, "id"), ""),
        policy_number=_text(_pick(row, "policy_number", "policyNumber"), _NOT_AVAILABLE),
        insured_name=_text(_pick(row, "insured_name", "insuredName"), _DASH),
        vehicle_plate=_text(_pick(row, "vehicle_plate", "vehiclePlate"), _DASH),
        emirate=_text(_pick(row, "emirate"), _DASH),
        inception_date=_iso_date(_pick(row, "inception_date", "inceptionDate")),
        expiry_date=_iso_date(_pick(row, "expiry_date", "expiryDate")),
        premium=_amount(_pick(row, "premium")),
        status=coerce_policy_status(_pick(row, "status")),
    )


def normalize_invoice(raw: Mapping[str, Any] | BaseModel) -> Invoice:
    """Build an :class:`Invoice` from a raw ``invoices`` row."""
    row = _as_mapping(raw)
    return Invoice(
        id=_text(_pick(row, "id"), ""),
        policy_id=_text(_pick(row, "policy_id", "policyId"), ""),
        invoice_number=_text(_pick(row, "invoice_number", "invoiceNumber"), _NOT_AVAILABLE),
        issue_date=_iso_date(_pick(row, "issue_date", "issueDate")),
        due_date=_iso_date(_pick(row, "due_date", "dueDate")),
        amount=_amount(_pick(row, "amount")),
        status=coerce_invoice_status(_pick(row, "status")),
    )


def coerce_policy_status(value: Any) -> PolicyStatus:
    """Exact ``"cancelled"`` / ``"expired"`` are kept; anything else is active."""
    value = _enum_value(value)
    if value == "cancelled":
        return PolicyStatus.CANCELLED
    if value == "expired":
        return PolicyStatus.EXPIRED
    return PolicyStatus.ACTIVE


def coerce_invoice_status(value: Any) -> InvoiceStatus:
    """Exact ``"paid"`` / ``"overdue"`` are kept; anything else is pending."""
    value = _enum_value(value)
    if value == "paid":
        return InvoiceStatus.PAID
    if value == "overdue":
        return InvoiceStatus.OVERDUE
    return InvoiceStatus.PENDING


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _as_mapping(raw: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    if isinstance(raw, BaseModel):
        return raw.model_dump(mode="json")
    return raw


def _pick(row: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-null value among *keys*."""
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def _enum_value(value: Any) -> Any:
    # Already-normalized records carry enum members, not plain strings.
    if isinstance(value, (PolicyStatus, InvoiceStatus)):
        return value.value
    return value


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _iso_date(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _amount(value: Any) -> float:
    """Coerce a numeric column (number or numeric string) to float, else 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        logger.debug("Unparseable amount {value!r}; defaulting to 0", value=value)
        return 0.0

    # Postgres numeric can hold NaN and Infinity.
    if not math.isfinite(result):
        logger.debug("Non-finite amount {value!r}; defaulting to 0", value=value)
        return 0.0
    if result < 0:
        logger.debug("Negative amount {value!r} kept as-is", value=value)
    return result
