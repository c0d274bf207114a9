"""Streamlit frontend — Motor Billing UAE dashboard.

Run with::

    streamlit run frontend/app.py --server.port 8501
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import streamlit as st
from api_client import APIError, BillingAPIClient
from components.kpi_cards import render_kpi_cards, render_report_panels
from components.policy_form import render_policy_form
from components.tables import render_invoice_table, render_policy_table
from styles import inject_global_styles, render_header

# Rows shown in the dashboard's "recent" lists
_RECENT_ROWS = 5

st.set_page_config(
    page_title="Motor Billing UAE",
    page_icon="🚗",
    layout="wide",
    initial_sidebar_state="expanded",
)

inject_global_styles()

client = BillingAPIClient()

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _fetch(call: Callable[[], dict[str, Any]], what: str) -> dict[str, Any] | None:
    """Run an API call, showing any failure or demo-data warning in the page."""
    with st.spinner(f"Loading {what}…"):
        try:
            data = call()
        except APIError as exc:
            st.error(f"Could not load {what}: {exc}")
            return None

    if data.get("warning"):
        st.warning(data["warning"])
    return data


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def dashboard_page() -> None:
    render_header("Motor Billing Dashboard", "Premium written, collections and overdue exposure")
    data = _fetch(client.dashboard, "dashboard")
    if data is None:
        return

    render_kpi_cards(data["stats"])
    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### Recent Policies")
        render_policy_table(data["policies"], limit=_RECENT_ROWS)
    with col2:
        st.markdown("### Recent Invoices")
        render_invoice_table(data["invoices"], limit=_RECENT_ROWS)


def policies_page() -> None:
    render_header("Policies", "Full portfolio view with premium, plate and emirate details")
    data = _fetch(client.policies, "policies")
    if data is None:
        return
    st.caption(f"{len(data['policies'])} policies")
    render_policy_table(data["policies"])


def invoices_page() -> None:
    render_header("Invoices", "Accounts receivable ledger linked to motor policies")
    data = _fetch(client.invoices, "invoices")
    if data is None:
        return
    st.caption(f"{len(data['invoices'])} invoices")
    render_invoice_table(data["invoices"])


def reports_page() -> None:
    render_header("Reports", "Book performance, premium vs collection, and invoice aging")
    data = _fetch(client.reports, "reports")
    if data is None:
        return
    report = data["report"]
    st.caption(f"{report['total_policies']} policies · {report['total_invoices']} invoices")
    render_report_panels(report)


def new_policy_page() -> None:
    render_header("New Policy", "Register a motor policy and raise its first invoice")
    payload = render_policy_form()
    if payload is None:
        return

    with st.spinner("Saving policy…"):
        try:
            created = client.create_policy(payload)
        except APIError as exc:
            st.error(f"Policy was not created: {exc}")
            return

    policy = created["policy"]
    invoice = created["invoice"]
    st.success(
        f"Created policy {policy['policy_number']} with invoice {invoice['invoice_number']}."
    )


PAGES: dict[str, Callable[[], None]] = {
    "Dashboard": dashboard_page,
    "Policies": policies_page,
    "Invoices": invoices_page,
    "Reports": reports_page,
    "New Policy": new_policy_page,
}

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

with st.sidebar:
    st.markdown("### 🚗 Motor Billing UAE")
    page = st.radio("Navigate", options=list(PAGES), key="nav_page", label_visibility="collapsed")

    st.divider()
    st.markdown("**API Status**")
    try:
        health = client.health_check()
    except APIError as exc:
        st.error(f"API error: {exc}")
    else:
        if health.get("configured"):
            st.success(f"Connected — source: `{health.get('source', '?')}`")
        else:
            st.warning("Backend not configured — showing demo data")

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

PAGES[page]()
