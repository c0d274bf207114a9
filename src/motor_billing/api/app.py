"""FastAPI application factory.

``create_app`` builds a fully configured ``FastAPI`` instance with:

* CORS middleware (the Streamlit dashboard runs on another port)
* Request-logging / exception-handling middleware
* Billing routes
* The configured data source, or ``None`` when the backend is not configured
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from motor_billing.api.middleware import ExceptionHandlerMiddleware, RequestLoggingMiddleware
from motor_billing.api.routes.billing import router as billing_router
from motor_billing.logging.setup import setup_logging
from motor_billing.sources.base import SourceNotConfiguredError
from motor_billing.sources.factory import create_source

if TYPE_CHECKING:
    from omegaconf import DictConfig

    from motor_billing.sources.base import BaseSource


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.source is None:
        logger.warning("No backend configured — every response will carry demo data")
    logger.info("Application startup complete")
    yield
    logger.info("Application shutting down")


def _build_source(cfg: DictConfig) -> BaseSource | None:
    try:
        return create_source(cfg)
    except SourceNotConfiguredError as exc:
        logger.warning("Source '{type}' unavailable: {err}", type=cfg.source.type, err=exc)
        return None


def create_app(cfg: DictConfig) -> FastAPI:
    """Build and return a fully configured :class:`FastAPI` application.

    Parameters
    ----------
    cfg:
        The merged Hydra configuration.

    Returns
    -------
    FastAPI
        Ready-to-run application instance.
    """
    setup_logging(cfg.logging)

    app = FastAPI(
        title="Motor Billing UAE",
        description="Policies, invoices and billing KPIs for a UAE motor insurance broker",
        version="1.0.0",
        lifespan=_lifespan,
    )
    app.state.cfg = cfg
    app.state.source = _build_source(cfg)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last runs first.
    app.add_middleware(ExceptionHandlerMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(billing_router, prefix="/api/v1")

    return app
