"""WebSocket transport: one StreamDetector per connection, one reply per frame."""

from __future__ import annotations

import itertools
import json
import logging
import time
from typing import Any

import numpy as np
from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from silero_stream.adapters.logging_event_sink import LoggingEventSink
from silero_stream.config.settings import Settings
from silero_stream.domain.stream_detector import StreamDetector
from silero_stream.errors import InferenceError, VADError
from silero_stream.ports.speech_scorer import ISpeechScorer

log = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def parse_frame(payload: str | bytes) -> np.ndarray:
    """Decode one inbound message (a JSON array of numbers, as text or UTF-8 bytes) into a frame."""
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise VADError("Binary message is not UTF-8 encoded JSON") from e
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise VADError(f"Invalid JSON: {e.msg}") from e
    if not isinstance(data, list):
        raise VADError("Expected a JSON array of samples")
    if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in data):
        raise VADError("Frame samples must be numbers")
    return np.asarray(data, dtype=np.float32)


def create_app(scorer: ISpeechScorer, settings: Settings) -> FastAPI:
    app = FastAPI(title="silero-stream")
    connection_ids = itertools.count(1)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket("/")
    async def detect(websocket: WebSocket) -> None:
        await websocket.accept()
        stream_id = f"conn-{next(connection_ids)}"
        log.info("WebSocket connection established (%s)", stream_id)

        detector = StreamDetector(
            scorer=scorer,
            config=settings.detector,
            event_sink=LoggingEventSink(settings.detector.sample_rate, stream_id),
        )

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))
                # text and binary frames carry the same JSON array
                if message.get("text") is not None:
                    payload = message["text"]
                else:
                    payload = message.get("bytes") or b""
                reply = await handle_message(detector, payload)
                await websocket.send_json(reply)
        except WebSocketDisconnect:
            log.info("WebSocket connection closed (%s)", stream_id)

    return app


async def handle_message(detector: StreamDetector, payload: str | bytes) -> dict[str, Any]:
    try:
        frame = parse_frame(payload)
        probability = await detector.process_audio(frame)
    except InferenceError as e:
        log.error("VAD inference error: %s", e)
        return {"error": "inference failed", "timestampMs": _now_ms()}
    except VADError as e:
        log.warning("Rejected frame: %s", e)
        return {"error": str(e), "timestampMs": _now_ms()}

    return {
        "probability": probability,
        "speaking": detector.is_speaking,
        "timestampMs": _now_ms(),
        "totalBufferedSamples": detector.get_total_buffer_size(),
    }
