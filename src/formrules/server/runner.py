"""Uvicorn launcher."""

from __future__ import annotations

import logging

from formrules.config import Config, load_config

logger = logging.getLogger(__name__)


def run_server(config: Config | None = None) -> None:
    """Start the HTTP API server with uvicorn."""
    import uvicorn

    if config is None:
        config = load_config()

    logger.info(f"Serving formrules API on {config.host}:{config.port}")
    uvicorn.run(
        "formrules.server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
