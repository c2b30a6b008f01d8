"""Entry point: load the scorer once, wire adapters and serve the WebSocket transport."""

from __future__ import annotations

import logging

import uvicorn

from silero_stream.adapters.onnx_silero_scorer import load_silero_scorer
from silero_stream.adapters.websocket_server import create_app
from silero_stream.config.logging_config import setup_logging
from silero_stream.config.settings import Settings

log = logging.getLogger(__name__)


def main(settings: Settings | None = None) -> None:
    if settings is None:
        settings = Settings.from_args()

    setup_logging(settings.debug)

    detector = settings.detector
    log.info(
        "Detector: %d Hz, threshold %.2f, context %s",
        detector.sample_rate,
        detector.activation_threshold,
        "on" if detector.context else "off",
    )

    scorer = load_silero_scorer(settings.model.model_path)
    app = create_app(scorer, settings)

    log.info("VAD WebSocket server on ws://%s:%d", settings.server.host, settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)


if __name__ == "__main__":
    main()
