"""Fetch → normalize with demo-data fallback.

The loader is the only place that knows about failure: it turns a missing
source, a raised exception or an empty result into demo data plus a
human-readable warning, so the normalizer and aggregator always receive
well-formed collections.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from loguru import logger

from motor_billing.core.demo_data import DEMO_INVOICES, DEMO_POLICIES
from motor_billing.core.normalize import normalize_invoice, normalize_policy
from motor_billing.schemas.billing import Invoice, Policy
from motor_billing.sources.base import BaseSource

T = TypeVar("T")

NOT_CONFIGURED_WARNING = "Supabase not configured. Showing demo data."


@dataclass(frozen=True)
class FetchError:
    """Why a fetch fell back to its default."""

    label: str
    message: str
    empty: bool = False


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    data: list[T]
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BillingSnapshot:
    """One fetch cycle's worth of normalized data."""

    policies: list[Policy] = field(default_factory=list)
    invoices: list[Invoice] = field(default_factory=list)
    warning: Optional[str] = None


def fetch_with_fallback(
    fetch: Callable[[], Iterable[T]],
    default: Iterable[T],
    label: str,
) -> FetchResult[T]:
    """Run *fetch*; substitute *default* if it raises or returns nothing."""
    try:
        data = list(fetch())
    except Exception as exc:
        message = str(exc) or type(exc).__name__
        logger.warning("Fetching {label} failed: {err}", label=label, err=message)
        return FetchResult(list(default), FetchError(label, message))

    if not data:
        logger.info("No {label} returned; using fallback", label=label)
        return FetchResult(list(default), FetchError(label, f"No {label} found", empty=True))

    return FetchResult(data)


def load_billing_data(source: BaseSource | None, limit: int) -> BillingSnapshot:
    """Load policies and invoices from *source*, falling back to demo data.

    Parameters
    ----------
    source:
        The configured source, or ``None`` when no backend is configured.
    limit:
        Maximum rows per table.

    Returns
    -------
    BillingSnapshot
        Normalized policies and invoices, with ``warning`` set whenever demo
        data was substituted.
    """
    if source is None:
        return BillingSnapshot(list(DEMO_POLICIES), list(DEMO_INVOICES), NOT_CONFIGURED_WARNING)

    policies = fetch_with_fallback(
        lambda: [normalize_policy(row) for row in source.fetch_policy_rows(limit)],
        DEMO_POLICIES,
        "policies",
    )
    # A failed policies fetch already means demo data for both tables.
    if _failed(policies):
        return _error_snapshot(policies.error)

    invoices = fetch_with_fallback(
        lambda: [normalize_invoice(row) for row in source.fetch_invoice_rows(limit)],
        DEMO_INVOICES,
        "invoices",
    )
    if _failed(invoices):
        return _error_snapshot(invoices.error)

    empty = [r.error.label for r in (invoices, policies) if r.error is not None]
    warning = None
    if empty:
        warning = f"No {' or '.join(empty)} found. Showing demo data."

    logger.debug(
        "Loaded {p} policies and {i} invoices",
        p=len(policies.data),
        i=len(invoices.data),
    )
    return BillingSnapshot(policies.data, invoices.data, warning)


def _failed(result: FetchResult) -> bool:
    return result.error is not None and not result.error.empty


def _error_snapshot(error: FetchError) -> BillingSnapshot:
    return BillingSnapshot(
        list(DEMO_POLICIES),
        list(DEMO_INVOICES),
        f"Supabase error: {error.message}. Showing demo data.",
    )
