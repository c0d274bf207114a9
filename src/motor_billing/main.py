"""Billing API server entry point.

Loads configuration with Hydra and serves the FastAPI application via
uvicorn.

Usage::

    poetry run python -m motor_billing.main                # Supabase source
    poetry run python -m motor_billing.main source=demo    # no backend needed
"""

from __future__ import annotations

import os

import hydra
import uvicorn
from dotenv import load_dotenv
from loguru import logger
from omegaconf import DictConfig

from motor_billing.api.app import create_app

# .env must be loaded before Hydra resolves ${oc.env:...}
load_dotenv()


@hydra.main(version_base=None, config_path="../../conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """Bootstrap the application from Hydra config and run uvicorn."""
    # Hydra switches into outputs/<date>/<time>/; return to the project root.
    os.chdir(hydra.utils.get_original_cwd())

    app = create_app(cfg)

    host: str = cfg.server.host
    port: int = cfg.server.port
    debug: bool = cfg.server.debug

    logger.info(
        "Starting server on {host}:{port} (source={source}, debug={debug})",
        host=host,
        port=port,
        source=cfg.source.type,
        debug=debug,
    )

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    main()
