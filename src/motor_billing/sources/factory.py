"""Source factory — instantiate the configured data source from Hydra config."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from omegaconf import DictConfig

    from motor_billing.sources.base import BaseSource

SOURCE_TYPES = ["supabase", "demo"]


def create_source(cfg: DictConfig) -> BaseSource:
    """Create and return the source specified by ``cfg.source.type``.

    Uses lazy imports so the Supabase SDK is only loaded when selected.

    Parameters
    ----------
    cfg:
        The full Hydra configuration.

    Returns
    -------
    BaseSource
        An initialized source ready to serve rows.

    Raises
    ------
    SourceNotConfiguredError
        If the Supabase source is selected without a URL or key.
    ValueError
        If the source type is not recognised.
    """
    source_type: str = cfg.source.type
    logger.info("Creating source: {type}", type=source_type)

    if source_type == "supabase":
        from motor_billing.sources.supabase_source import SupabaseSource

        return SupabaseSource(cfg)

    if source_type == "demo":
        from motor_billing.sources.demo_source import DemoSource

        return DemoSource(cfg)

    raise ValueError(
        f"Unknown source type '{source_type}'. "
        f"Expected one of: {', '.join(SOURCE_TYPES)}."
    )
