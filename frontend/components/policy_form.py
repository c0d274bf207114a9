"""New policy form — policy details plus its first invoice."""

from __future__ import annotations

from datetime import date, timedelta

import streamlit as st

EMIRATES = [
    "Dubai",
    "Abu Dhabi",
    "Sharjah",
    "Ajman",
    "Umm Al Quwain",
    "Ras Al Khaimah",
    "Fujairah",
]


def render_policy_form() -> dict | None:
    """Render the create-policy form and return the API payload or ``None``.

    Returns
    -------
    dict | None
        The ``NewPolicy`` payload, or ``None`` if the form was not submitted
        or failed client-side checks.
    """
    today = date.today()

    with st.form("new_policy", clear_on_submit=False):
        st.markdown("##### Policy")
        col1, col2 = st.columns(2)
        with col1:
            policy_number = st.text_input("Policy Number", placeholder="DXB-MTR-2025-0142")
            insured_name = st.text_input("Insured Name")
            vehicle_plate = st.text_input("Vehicle Plate", placeholder="D 12345")
            emirate = st.selectbox("Emirate", options=EMIRATES)
        with col2:
            inception_date = st.date_input("Inception Date", value=today)
            expiry_date = st.date_input(
                "Expiry Date", value=today + timedelta(days=364)
            )
            premium = st.number_input(
                "Premium (AED)", min_value=0.0, value=0.0, step=100.0, format="%.2f"
            )
            status = st.selectbox("Policy Status", options=["active", "cancelled", "expired"])

        st.markdown("##### First Invoice")
        col3, col4 = st.columns(2)
        with col3:
            invoice_number = st.text_input("Invoice Number", placeholder="INV-UAE-2101")
            issue_date = st.date_input("Issue Date", value=today)
            due_date = st.date_input("Due Date", value=today + timedelta(days=30))
        with col4:
            invoice_amount = st.number_input(
                "Invoice Amount (AED, 0 = premium)",
                min_value=0.0,
                value=0.0,
                step=100.0,
                format="%.2f",
            )
            invoice_status = st.selectbox(
                "Invoice Status", options=["pending", "paid", "overdue"]
            )

        submitted = st.form_submit_button("Create Policy", type="primary", use_container_width=True)

    if not submitted:
        return None

    errors = []
    if not policy_number.strip():
        errors.append("Policy Number is required.")
    if not insured_name.strip():
        errors.append("Insured Name is required.")
    if not invoice_number.strip():
        errors.append("Invoice Number is required.")
    if premium <= 0:
        errors.append("Premium must be greater than AED 0.")
    if expiry_date < inception_date:
        errors.append("Expiry Date cannot be before Inception Date.")
    if due_date < issue_date:
        errors.append("Due Date cannot be before Issue Date.")

    if errors:
        for e in errors:
            st.error(e)
        return None

    return {
        "policy_number": policy_number.strip(),
        "insured_name": insured_name.strip(),
        "vehicle_plate": vehicle_plate.strip() or None,
        "emirate": emirate,
        "inception_date": str(inception_date),
        "expiry_date": str(expiry_date),
        "premium": float(premium),
        "status": status,
        "invoice_number": invoice_number.strip(),
        "issue_date": str(issue_date),
        "due_date": str(due_date),
        "invoice_amount": float(invoice_amount) if invoice_amount > 0 else None,
        "invoice_status": invoice_status,
    }
