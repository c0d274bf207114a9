"""Static demo dataset shown when the backend is unavailable."""

from __future__ import annotations

from motor_billing.schemas.billing import Invoice, InvoiceStatus, Policy, PolicyStatus

DEMO_POLICIES: tuple[Policy, ...] = (
    Policy(
        id="pol-1",
        policy_number="DXB-MTR-2025-0101",
        insured_name="Emirates Auto Brokers LLC",
        vehicle_plate="D 12345",
        emirate="Dubai",
        inception_date="2025-01-01",
        expiry_date="2025-12-31",
        premium=12500,
        status=PolicyStatus.ACTIVE,
    ),
    Policy(
        id="pol-2",
        policy_number="AUH-MTR-2024-2201",
        insured_name="Gulf Motor Leasing FZ-LLC",
        vehicle_plate="AD 90876",
        emirate="Abu Dhabi",
        inception_date="2024-06-15",
        expiry_date="2025-06-14",
        premium=18900,
        status=PolicyStatus.ACTIVE,
    ),
    Policy(
        id="pol-3",
        policy_number="SHJ-MTR-2024-0912",
        insured_name="Sharjah Cargo Transport",
        vehicle_plate="S 55432",
        emirate="Sharjah",
        inception_date="2024-01-10",
        expiry_date="2025-01-09",
        premium=9800,
        status=PolicyStatus.EXPIRED,
    ),
)

DEMO_INVOICES: tuple[Invoice, ...] = (
    Invoice(
        id="inv-1",
        policy_id="pol-1",
        invoice_number="INV-UAE-2001",
        issue_date="2025-01-05",
        due_date="2025-01-20",
        amount=6250,
        status=InvoiceStatus.PENDING,
    ),
    Invoice(
        id="inv-2",
        policy_id="pol-1",
        invoice_number="INV-UAE-2002",
        issue_date="2024-12-10",
        due_date="2024-12-25",
        amount=6250,
        status=InvoiceStatus.PAID,
    ),
    Invoice(
        id="inv-3",
        policy_id="pol-2",
        invoice_number="INV-UAE-2003",
        issue_date="2024-12-01",
        due_date="2024-12-20",
        amount=9450,
        status=InvoiceStatus.OVERDUE,
    ),
)
