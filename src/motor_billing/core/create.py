"""Create a policy together with its first invoice."""

from __future__ import annotations

from loguru import logger

from motor_billing.core.normalize import normalize_invoice, normalize_policy
from motor_billing.schemas.create import CreatedPolicy, NewPolicy
from motor_billing.sources.base import BaseSource


def create_policy_with_invoice(source: BaseSource, new_policy: NewPolicy) -> CreatedPolicy:
    """Insert the policy, then an invoice referencing the stored policy ``id``.

    Errors from the source propagate to the caller; if the invoice insert
    fails the policy row has already been written.
    """
    logger.info("Creating policy {num}", num=new_policy.policy_number)

    stored_policy = source.insert_policy(new_policy.policy_row())
    policy = normalize_policy(stored_policy)
    if not policy.id:
        raise RuntimeError(f"Backend returned policy {new_policy.policy_number} without an id")

    stored_invoice = source.insert_invoice(new_policy.invoice_row(policy.id))
    invoice = normalize_invoice(stored_invoice)

    logger.info(
        "Created policy {num} ({pid}) with invoice {inv}",
        num=policy.policy_number,
        pid=policy.id,
        inv=invoice.invoice_number,
    )
    return CreatedPolicy(policy=policy, invoice=invoice)
