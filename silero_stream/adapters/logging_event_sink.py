"""Event sink adapter that reports speech boundaries to the log."""

from __future__ import annotations

import logging

from silero_stream.domain.events import SpeechEnded, SpeechStarted
from silero_stream.ports.event_sink import ISpeechEventSink

log = logging.getLogger(__name__)


class LoggingEventSink(ISpeechEventSink):
    def __init__(self, sample_rate: int, stream_id: str = "-") -> None:
        self._sample_rate = sample_rate
        self._stream_id = stream_id

    def on_speech_started(self, event: SpeechStarted) -> None:
        log.info(
            "[%s] SPEECH STARTED (%.0fms padding)",
            self._stream_id,
            self._ms(event.padding_buffer),
        )

    def on_speech_ended(self, event: SpeechEnded) -> None:
        log.info(
            "[%s] SPEECH ENDED (%.0fms captured)",
            self._stream_id,
            self._ms(event.full_buffer),
        )

    def _ms(self, samples) -> float:
        return len(samples) / self._sample_rate * 1000
