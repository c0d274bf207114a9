"""Policy and invoice tables rendered as styled HTML."""

from __future__ import annotations

import html
from typing import Any

import pandas as pd
import streamlit as st

from components.formatting import dash_if_empty, format_aed, status_badge


def render_policy_table(policies: list[dict[str, Any]], *, limit: int | None = None) -> None:
    """Render policies: number, insured, vehicle, emirate, premium, status."""
    if not policies:
        st.caption("No policies found.")
        return

    rows = [
        {
            "Policy #": _esc(p.get("policy_number")),
            "Insured": _esc(p.get("insured_name")),
            "Vehicle": _esc(p.get("vehicle_plate")),
            "Emirate": _esc(p.get("emirate")),
            "Inception / Expiry": (
                f"{_esc(dash_if_empty(p.get('inception_date')))} → "
                f"{_esc(dash_if_empty(p.get('expiry_date')))}"
            ),
            "Premium": format_aed(p.get("premium")),
            "Status": status_badge(str(p.get("status", "")), "policy"),
        }
        for p in policies[:limit]
    ]
    _render_html(pd.DataFrame(rows))


def render_invoice_table(invoices: list[dict[str, Any]], *, limit: int | None = None) -> None:
    """Render invoice lines (already joined to their policy by the API)."""
    if not invoices:
        st.caption("No invoices found.")
        return

    rows = [
        {
            "Invoice #": _esc(i.get("invoice_number")),
            "Policy #": _esc(i.get("policy_number", "—")),
            "Insured": _esc(i.get("insured_name", "—")),
            "Issued": _esc(dash_if_empty(i.get("issue_date"))),
            "Due": _esc(dash_if_empty(i.get("due_date"))),
            "Amount": format_aed(i.get("amount")),
            "Status": status_badge(str(i.get("status", "")), "invoice"),
        }
        for i in invoices[:limit]
    ]
    _render_html(pd.DataFrame(rows))


def _esc(value: Any) -> str:
    return html.escape("" if value is None else str(value))


def _render_html(df: pd.DataFrame) -> None:
    # Cells are pre-escaped so the status badge markup survives.
    table = df.to_html(index=False, escape=False, classes="billing-table", border=0)
    st.markdown(table, unsafe_allow_html=True)
