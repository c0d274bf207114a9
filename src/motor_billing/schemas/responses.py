"""Response envelopes returned by the billing API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from motor_billing.schemas.billing import BillingStats, InvoiceLine, Policy, PortfolioReport


class _WithWarning(BaseModel):
    warning: Optional[str] = Field(
        default=None, description="Set when demo data was substituted for live data"
    )


class PolicyListResponse(_WithWarning):
    policies: list[Policy]


class InvoiceListResponse(_WithWarning):
    invoices: list[InvoiceLine]


class DashboardResponse(_WithWarning):
    stats: BillingStats
    policies: list[Policy]
    invoices: list[InvoiceLine]


class ReportResponse(_WithWarning):
    report: PortfolioReport
