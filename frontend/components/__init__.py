"""Streamlit frontend components."""

from components.kpi_cards import render_kpi_cards, render_report_panels
from components.policy_form import render_policy_form
from components.tables import render_invoice_table, render_policy_table

__all__ = [
    "render_invoice_table",
    "render_kpi_cards",
    "render_policy_form",
    "render_policy_table",
    "render_report_panels",
]
