"""Pydantic models for the create-policy flow."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from motor_billing.schemas.billing import Invoice, InvoiceStatus, Policy, PolicyStatus


class NewPolicy(BaseModel):
    """Incoming policy + first invoice payload, validated at the API boundary."""

    policy_number: str = Field(..., min_length=1, description="Display policy number")
    insured_name: str = Field(..., min_length=1, description="Name of the insured party")
    vehicle_plate: Optional[str] = Field(default=None, description="Registration plate")
    emirate: Optional[str] = Field(default=None, description="Emirate of registration")
    inception_date: date = Field(..., description="Cover start date")
    expiry_date: date = Field(..., description="Cover end date")
    premium: float = Field(..., gt=0, description="Written premium in AED")
    status: PolicyStatus = Field(default=PolicyStatus.ACTIVE)

    invoice_number: str = Field(..., min_length=1, description="First invoice number")
    issue_date: date = Field(..., description="Invoice issue date")
    due_date: date = Field(..., description="Invoice due date")
    invoice_amount: Optional[float] = Field(
        default=None, gt=0, description="Invoice amount in AED; defaults to the premium"
    )
    invoice_status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "policy_number": "DXB-MTR-2025-0142",
                "insured_name": "Al Noor Logistics LLC",
                "vehicle_plate": "D 48210",
                "emirate": "Dubai",
                "inception_date": "2025-03-01",
                "expiry_date": "2026-02-28",
                "premium": 14200.00,
                "invoice_number": "INV-UAE-2101",
                "issue_date": "2025-03-01",
                "due_date": "2025-03-31",
            }
        ]
    }}

    @field_validator("policy_number", "insured_name", "invoice_number")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("vehicle_plate", "emirate")
    @classmethod
    def _blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @model_validator(mode="after")
    def _check_dates(self) -> NewPolicy:
        if self.expiry_date < self.inception_date:
            raise ValueError("expiry_date must not be before inception_date")
        if self.due_date < self.issue_date:
            raise ValueError("due_date must not be before issue_date")
        return self

    # -----------------------------------------------------------------
    # Backend row builders
    # -----------------------------------------------------------------

    def policy_row(self) -> dict[str, Any]:
        """Row for the ``policies`` table."""
        return {
            "policy_number": self.policy_number,
            "insured_name": self.insured_name,
            "vehicle_plate": self.vehicle_plate,
            "emirate": self.emirate,
            "inception_date": self.inception_date.isoformat(),
            "expiry_date": self.expiry_date.isoformat(),
            "premium": self.premium,
            "status": self.status.value,
        }

    def invoice_row(self, policy_id: str) -> dict[str, Any]:
        """Row for the ``invoices`` table, linked to *policy_id*."""
        amount = self.invoice_amount if self.invoice_amount is not None else self.premium
        return {
            "policy_id": policy_id,
            "invoice_number": self.invoice_number,
            "issue_date": self.issue_date.isoformat(),
            "due_date": self.due_date.isoformat(),
            "amount": amount,
            "status": self.invoice_status.value,
        }


class CreatedPolicy(BaseModel):
    """The stored policy and invoice as echoed back by the backend."""

    policy: Policy
    invoice: Invoice
