"""Logging configuration for silero-stream."""

from __future__ import annotations

import logging

# per-frame detector transitions log at DEBUG under this name
APP_LOGGER = "silero_stream"


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger(APP_LOGGER).setLevel(level)
    for name in ("uvicorn.access", "onnxruntime", "asyncio"):
        logging.getLogger(name).setLevel(logging.WARNING if not debug else logging.DEBUG)
