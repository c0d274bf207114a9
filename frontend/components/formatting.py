"""Display formatting shared by the dashboard components."""

from __future__ import annotations

from typing import Any

# Badge tone per status value, per record kind.
_POLICY_TONES = {"active": "green", "expired": "gray"}
_INVOICE_TONES = {"paid": "green", "overdue": "red"}


def format_aed(amount: Any) -> str:
    """``12500`` → ``"AED 12,500.00"``."""
    try:
        value = float(amount)
    except (TypeError, ValueError):
        value = 0.0
    return f"AED {value:,.2f}"


def status_badge(value: str, kind: str) -> str:
    """HTML badge for a policy or invoice status."""
    if kind == "policy":
        tone = _POLICY_TONES.get(value, "red")
    else:
        tone = _INVOICE_TONES.get(value, "amber")
    return f'<span class="status-badge badge-{tone}">{value.upper()}</span>'


def dash_if_empty(value: Any) -> str:
    return str(value) if value else "—"
