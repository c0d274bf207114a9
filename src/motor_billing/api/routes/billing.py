"""Billing dashboard API routes.

Endpoints
---------
GET  /api/v1/health
    Health check with the configured source type.

GET  /api/v1/policies
    Normalized policies.

GET  /api/v1/invoices
    Normalized invoices joined to their policy's display fields.

GET  /api/v1/dashboard
    KPIs plus policies and invoices in one payload.

GET  /api/v1/reports
    Portfolio report: KPIs, invoice aging and overdue rate.

POST /api/v1/policies
    Create a policy and its first invoice.

Every read runs a fresh load → normalize → aggregate cycle; nothing is cached
between requests.
"""

from __future__ import annotations

import traceback

from fastapi import APIRouter, HTTPException, Request, status
from loguru import logger

from motor_billing.core.create import create_policy_with_invoice
from motor_billing.core.loader import BillingSnapshot, load_billing_data
from motor_billing.core.stats import build_portfolio_report, compute_billing_stats, link_invoices
from motor_billing.schemas.create import CreatedPolicy, NewPolicy
from motor_billing.schemas.responses import (
    DashboardResponse,
    InvoiceListResponse,
    PolicyListResponse,
    ReportResponse,
)

router = APIRouter()


def _load(request: Request) -> BillingSnapshot:
    cfg = request.app.state.cfg
    return load_billing_data(request.app.state.source, int(cfg.source.row_limit))


# ---------------------------------------------------------------------------
# GET /health
# ---------------------------------------------------------------------------

@router.get(
    "/health",
    summary="Health check",
    description="Returns service health and whether a live backend is configured.",
)
async def health(request: Request) -> dict:
    return {
        "status": "healthy",
        "source": request.app.state.cfg.source.type,
        "configured": request.app.state.source is not None,
    }


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

@router.get("/policies", response_model=PolicyListResponse, summary="List policies")
def list_policies(request: Request) -> PolicyListResponse:
    snapshot = _load(request)
    return PolicyListResponse(policies=snapshot.policies, warning=snapshot.warning)


@router.get("/invoices", response_model=InvoiceListResponse, summary="List invoices")
def list_invoices(request: Request) -> InvoiceListResponse:
    snapshot = _load(request)
    return InvoiceListResponse(
        invoices=link_invoices(snapshot.invoices, snapshot.policies),
        warning=snapshot.warning,
    )


@router.get("/dashboard", response_model=DashboardResponse, summary="Dashboard KPIs and lists")
def dashboard(request: Request) -> DashboardResponse:
    snapshot = _load(request)
    return DashboardResponse(
        stats=compute_billing_stats(snapshot.policies, snapshot.invoices),
        policies=snapshot.policies,
        invoices=link_invoices(snapshot.invoices, snapshot.policies),
        warning=snapshot.warning,
    )


@router.get("/reports", response_model=ReportResponse, summary="Portfolio report")
def reports(request: Request) -> ReportResponse:
    snapshot = _load(request)
    return ReportResponse(
        report=build_portfolio_report(snapshot.policies, snapshot.invoices),
        warning=snapshot.warning,
    )


# ---------------------------------------------------------------------------
# POST /policies
# ---------------------------------------------------------------------------

@router.post(
    "/policies",
    response_model=CreatedPolicy,
    status_code=status.HTTP_201_CREATED,
    summary="Create a policy",
    description="Insert a policy and its first invoice into the configured backend.",
)
def create_policy(new_policy: NewPolicy, request: Request) -> CreatedPolicy:
    source = request.app.state.source
    if source is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Backend not configured; policies cannot be created.",
        )

    try:
        return create_policy_with_invoice(source, new_policy)
    except Exception as exc:
        logger.error(
            "Backend error creating policy {num}: {err}\n{tb}",
            num=new_policy.policy_number,
            err=exc,
            tb=traceback.format_exc(),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Backend error: {exc}",
        ) from exc
