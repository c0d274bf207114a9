"""Pydantic models for policies, invoices and derived billing figures."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PolicyStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"


class Policy(BaseModel):
    """One underwritten motor insurance contract, normalized for display."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque backend identifier")
    policy_number: str = Field(default="N/A", description="Display policy number")
    insured_name: str = Field(default="—", description="Name of the insured party")
    vehicle_plate: str = Field(default="—", description="Registration plate")
    emirate: str = Field(default="—", description="Emirate of registration")
    inception_date: str = Field(default="", description="Cover start (ISO-8601)")
    expiry_date: str = Field(default="", description="Cover end (ISO-8601)")
    premium: float = Field(default=0.0, description="Written premium in AED")
    status: PolicyStatus = Field(default=PolicyStatus.ACTIVE)


class Invoice(BaseModel):
    """One billing event tied to a policy."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque backend identifier")
    policy_id: str = Field(default="", description="Reference to Policy.id")
    invoice_number: str = Field(default="N/A", description="Display invoice number")
    issue_date: str = Field(default="", description="Issue date (ISO-8601)")
    due_date: str = Field(default="", description="Due date (ISO-8601)")
    amount: float = Field(default=0.0, description="Invoiced amount in AED")
    status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)


class InvoiceLine(Invoice):
    """An invoice joined to its policy's display fields."""

    policy_number: str = Field(default="—", description="Policy number, or '—' if unmatched")
    insured_name: str = Field(default="—", description="Insured name, or '—' if unmatched")


class BillingStats(BaseModel):
    """Dashboard KPIs derived from the current policy and invoice collections."""

    total_premium: float = Field(default=0.0, description="Sum of premium over all policies")
    total_outstanding: float = Field(default=0.0, description="Sum of unpaid invoice amounts")
    total_collected: float = Field(default=0.0, description="Sum of paid invoice amounts")
    active_policies: int = Field(default=0, ge=0)
    overdue_invoices: int = Field(default=0, ge=0)


class InvoiceAging(BaseModel):
    """Invoice counts per status, used as a quick aging proxy."""

    pending: int = Field(default=0, ge=0)
    paid: int = Field(default=0, ge=0)
    overdue: int = Field(default=0, ge=0)


class PortfolioReport(BaseModel):
    stats: BillingStats
    aging: InvoiceAging
    total_policies: int = Field(default=0, ge=0)
    total_invoices: int = Field(default=0, ge=0)
    overdue_rate: Optional[int] = Field(
        default=None, description="Overdue invoices as a rounded percentage; null without invoices"
    )
