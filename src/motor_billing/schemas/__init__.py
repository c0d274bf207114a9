"""Pydantic schemas for the billing dashboard."""

from motor_billing.schemas.billing import (
    BillingStats,
    Invoice,
    InvoiceAging,
    InvoiceLine,
    InvoiceStatus,
    Policy,
    PolicyStatus,
    PortfolioReport,
)
from motor_billing.schemas.create import CreatedPolicy, NewPolicy

__all__ = [
    "BillingStats",
    "CreatedPolicy",
    "Invoice",
    "InvoiceAging",
    "InvoiceLine",
    "InvoiceStatus",
    "NewPolicy",
    "Policy",
    "PolicyStatus",
    "PortfolioReport",
]
