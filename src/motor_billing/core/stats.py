"""Billing aggregations over normalized policy and invoice collections.

Every function here is a pure linear scan: no I/O, no state between calls,
and empty inputs produce zeroed results.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

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


def compute_billing_stats(
    policies: Iterable[Policy],
    invoices: Iterable[Invoice],
) -> BillingStats:
    """Compute the dashboard KPIs.

    Policies and invoices are aggregated independently; they are never
    joined on ``policy_id``, so ``total_collected + total_outstanding`` need
    not equal ``total_premium``.

    Parameters
    ----------
    policies:
        Normalized policies (any status).
    invoices:
        Normalized invoices (any status).

    Returns
    -------
    BillingStats
        Premium written, collected and outstanding amounts plus the active
        policy and overdue invoice counts.
    """
    policies = list(policies)
    invoices = list(invoices)

    total_premium = sum(p.premium for p in policies)
    total_collected = sum(i.amount for i in invoices if i.status == InvoiceStatus.PAID)
    total_outstanding = sum(i.amount for i in invoices if i.status != InvoiceStatus.PAID)
    active_policies = sum(1 for p in policies if p.status == PolicyStatus.ACTIVE)
    overdue_invoices = sum(1 for i in invoices if i.status == InvoiceStatus.OVERDUE)

    return BillingStats(
        total_premium=float(total_premium),
        total_outstanding=float(total_outstanding),
        total_collected=float(total_collected),
        active_policies=active_policies,
        overdue_invoices=overdue_invoices,
    )


def compute_invoice_aging(invoices: Iterable[Invoice]) -> InvoiceAging:
    """Count invoices per status."""
    counts = {status: 0 for status in InvoiceStatus}
    for invoice in invoices:
        counts[invoice.status] += 1
    return InvoiceAging(
        pending=counts[InvoiceStatus.PENDING],
        paid=counts[InvoiceStatus.PAID],
        overdue=counts[InvoiceStatus.OVERDUE],
    )


def build_portfolio_report(
    policies: Sequence[Policy],
    invoices: Sequence[Invoice],
) -> PortfolioReport:
    """Stats, aging breakdown and overdue rate for the reports view."""
    aging = compute_invoice_aging(invoices)
    total_invoices = len(invoices)
    overdue_rate = None
    if total_invoices:
        overdue_rate = round(aging.overdue / total_invoices * 100)

    return PortfolioReport(
        stats=compute_billing_stats(policies, invoices),
        aging=aging,
        total_policies=len(policies),
        total_invoices=total_invoices,
        overdue_rate=overdue_rate,
    )


def link_invoices(
    invoices: Iterable[Invoice],
    policies: Iterable[Policy],
) -> list[InvoiceLine]:
    """Attach each invoice's policy number and insured name for display.

    Invoices whose ``policy_id`` matches no policy get ``"—"`` for both.
    """
    by_id = {p.id: p for p in policies}
    lines: list[InvoiceLine] = []
    for invoice in invoices:
        policy = by_id.get(invoice.policy_id)
        lines.append(
            InvoiceLine(
                **invoice.model_dump(),
                policy_number=policy.policy_number if policy else "—",
                insured_name=policy.insured_name if policy else "—",
            )
        )
    return lines
