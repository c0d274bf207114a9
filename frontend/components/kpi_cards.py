"""KPI cards and report panels."""

from __future__ import annotations

from typing import Any

import streamlit as st

from components.formatting import format_aed


def render_kpi_cards(stats: dict[str, Any]) -> None:
    """Render the five billing KPIs as a row of cards.

    Parameters
    ----------
    stats:
        The ``BillingStats`` dict returned by the API.
    """
    cards = [
        ("Premium Written", format_aed(stats.get("total_premium", 0))),
        ("Collected", format_aed(stats.get("total_collected", 0))),
        ("Outstanding", format_aed(stats.get("total_outstanding", 0))),
        ("Active Policies", str(stats.get("active_policies", 0))),
        ("Overdue Invoices", str(stats.get("overdue_invoices", 0))),
    ]
    for col, (label, value) in zip(st.columns(len(cards)), cards):
        with col:
            _card(label, value)


def render_report_panels(report: dict[str, Any]) -> None:
    """Premium vs collections, invoice aging and portfolio snapshot."""
    stats = report.get("stats", {})
    aging = report.get("aging", {})
    overdue_rate = report.get("overdue_rate")

    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("#### Premium vs Collections")
        st.caption("Written premium against collected cash.")
        _card("Total Premium", format_aed(stats.get("total_premium", 0)))
        _card("Collected", format_aed(stats.get("total_collected", 0)))
        _card("Outstanding", format_aed(stats.get("total_outstanding", 0)))

    with col2:
        st.markdown("#### Invoice Aging Snapshot")
        st.caption("Distribution by status as a quick aging proxy.")
        _card("Pending", f"{aging.get('pending', 0)} invoices")
        _card("Paid", f"{aging.get('paid', 0)} invoices")
        _card("Overdue", f"{aging.get('overdue', 0)} invoices")

    with col3:
        st.markdown("#### Portfolio Snapshot")
        st.caption("Composition of the motor book.")
        _card("Total Policies", str(report.get("total_policies", 0)))
        _card("Active Policies", str(stats.get("active_policies", 0)))
        _card("Overdue Rate", "—" if overdue_rate is None else f"{overdue_rate}%")


def _card(label: str, value: str) -> None:
    st.markdown(
        f"""
        <div class="kpi-card" style="margin-bottom:0.6rem;">
            <div class="label">{label}</div>
            <div class="value">{value}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
