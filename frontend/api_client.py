"""Thin HTTP client for the Motor Billing REST API."""

from __future__ import annotations

import os
from typing import Any

import requests


class BillingAPIClient:
    """Wrapper around ``requests`` for the billing backend.

    Parameters
    ----------
    base_url:
        Root URL of the FastAPI backend (e.g. ``http://localhost:8000``).
        Falls back to the ``API_BASE_URL`` env-var, then ``http://localhost:8000``.
    timeout:
        Request timeout in seconds.
    max_retries:
        Number of attempts on connection / 5xx errors.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int = 15,
        max_retries: int = 2,
    ) -> None:
        self.base_url = (base_url or os.getenv("API_BASE_URL", "http://localhost:8000")).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries

    # -----------------------------------------------------------------
    # Endpoints
    # -----------------------------------------------------------------

    def health_check(self) -> dict[str, Any]:
        return self._request("GET", "/api/v1/health")

    def dashboard(self) -> dict[str, Any]:
        return self._request("GET", "/api/v1/dashboard")

    def policies(self) -> dict[str, Any]:
        return self._request("GET", "/api/v1/policies")

    def invoices(self) -> dict[str, Any]:
        return self._request("GET", "/api/v1/invoices")

    def reports(self) -> dict[str, Any]:
        return self._request("GET", "/api/v1/reports")

    def create_policy(self, payload: dict[str, Any]) -> dict[str, Any]:
        """``POST /api/v1/policies`` — create a policy and its first invoice.

        Not retried: a repeated POST could insert the policy twice.
        """
        return self._request("POST", "/api/v1/policies", retries=1, json=payload)

    # -----------------------------------------------------------------
    # Internal
    # -----------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        retries: int | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        attempts = retries or self.max_retries
        last_exc: Exception | None = None

        for _ in range(attempts):
            try:
                resp = requests.request(method, url, timeout=self.timeout, **kwargs)
                resp.raise_for_status()
                return resp.json()
            except (requests.ConnectionError, requests.Timeout) as exc:
                last_exc = exc
            except requests.HTTPError as exc:
                response = exc.response
                # 4xx will not improve on retry
                if response is not None and response.status_code < 500:
                    raise APIError(
                        f"HTTP {response.status_code}: {_error_detail(response)}",
                        status_code=response.status_code,
                    ) from exc
                last_exc = exc

        raise APIError(f"Request to {url} failed after {attempts} attempts: {last_exc}")


class APIError(Exception):
    """Raised when the backend returns an error or is unreachable."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_detail(resp: requests.Response) -> str:
    """Flatten FastAPI's ``detail`` (string or list of validation errors)."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text

    detail = body.get("detail", resp.text) if isinstance(body, dict) else resp.text
    if isinstance(detail, list):
        return "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', [])[1:])}: {err.get('msg', '')}"
            for err in detail
            if isinstance(err, dict)
        )
    return str(detail)
