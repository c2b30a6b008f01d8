"""Per-stream speech detector: hysteresis state machine over frame probabilities."""

from __future__ import annotations

import logging

import numpy as np

from silero_stream.config.settings import DetectorConfig
from silero_stream.domain.audio_buffer import AudioBuffer
from silero_stream.domain.context_window import ContextWindow
from silero_stream.domain.events import SpeechEnded, SpeechEvent, SpeechStarted
from silero_stream.domain.speech_state import SpeechState
from silero_stream.errors import FrameSizeError, InferenceError
from silero_stream.ports.event_sink import ISpeechEventSink
from silero_stream.ports.speech_scorer import ISpeechScorer

log = logging.getLogger(__name__)


class StreamDetector:
    """Turns a stream of fixed-size frames into SPEECH_STARTED / SPEECH_ENDED events.

    One instance per audio stream. ``process_audio`` must not be called again
    for the same stream until the previous call has completed.
    """

    def __init__(
        self,
        scorer: ISpeechScorer,
        config: DetectorConfig,
        event_sink: ISpeechEventSink | None = None,
    ) -> None:
        self._scorer = scorer
        self._config = config
        self._sink = event_sink

        self._window_size = config.window_size_samples
        self._ms_per_chunk = config.ms_per_chunk
        self._context = ContextWindow(
            size=config.context_size,
            enabled=config.context,
        )
        self._padding_buffer = AudioBuffer(
            max_duration_ms=config.prefix_padding_duration_ms,
            sample_rate=config.sample_rate,
        )
        self._speech_buffer = AudioBuffer(
            max_duration_ms=config.max_buffered_speech_ms,
            sample_rate=config.sample_rate,
        )

        self.state = SpeechState.NOT_SPEAKING
        self._speech_duration_ms = 0.0
        self._silence_duration_ms = 0.0
        self.last_event: SpeechEvent | None = None

    @property
    def is_speaking(self) -> bool:
        return self.state == SpeechState.SPEAKING

    @property
    def ms_per_chunk(self) -> float:
        return self._ms_per_chunk

    @property
    def speech_duration_ms(self) -> float:
        return self._speech_duration_ms

    @property
    def silence_duration_ms(self) -> float:
        return self._silence_duration_ms

    @property
    def context_samples(self) -> np.ndarray:
        return self._context.samples

    @property
    def padding_audio(self) -> np.ndarray:
        return self._padding_buffer.get_audio()

    @property
    def speech_audio(self) -> np.ndarray:
        return self._speech_buffer.get_audio()

    async def process_audio(self, frame: np.ndarray) -> float:
        """Score one frame, update speech state and return its probability.

        The context window and the padding/speech buffers take the frame before
        the scorer runs, and keep it if the scorer then raises InferenceError.
        Duration counters and the speaking state only change on success.
        """
        frame = np.asarray(frame, dtype=np.float32)
        if frame.ndim != 1:
            raise FrameSizeError(f"Expected a one-dimensional frame, got shape {frame.shape}")
        if len(frame) != self._window_size:
            raise FrameSizeError(f"Expected {self._window_size} samples, got {len(frame)}")

        self.last_event = None
        model_input = self._context.build(frame)

        if self.state == SpeechState.NOT_SPEAKING:
            self._padding_buffer.add(frame)
        else:
            self._speech_buffer.add(frame)

        try:
            probability = await self._scorer.score(
                model_input,
                self._scorer.zero_state(),
                self._config.sample_rate,
            )
        except Exception as e:
            raise InferenceError(f"Speech scoring failed: {e}") from e

        probability = float(probability)
        self._update_state(probability)
        return probability

    def reset_context(self) -> None:
        self._context.reset()

    def get_expected_chunk_size(self) -> int:
        return self._window_size

    def get_total_buffer_size(self) -> int:
        return self._window_size + self._context.size

    # -- State machine --

    def _update_state(self, probability: float) -> None:
        if probability > self._config.activation_threshold:
            self._speech_duration_ms += self._ms_per_chunk
            self._silence_duration_ms = 0.0
            if (
                self.state == SpeechState.NOT_SPEAKING
                and self._speech_duration_ms >= self._config.min_speech_duration_ms
            ):
                self._start_speech()
        else:
            self._silence_duration_ms += self._ms_per_chunk
            self._speech_duration_ms = 0.0
            if (
                self.state == SpeechState.SPEAKING
                and self._silence_duration_ms >= self._config.min_silence_duration_ms
            ):
                self._end_speech()

    def _start_speech(self) -> None:
        event = SpeechStarted(padding_buffer=self._padding_buffer.get_audio())
        log.debug(
            "Speech started after %.0fms (%d padding samples)",
            self._speech_duration_ms,
            len(event.padding_buffer),
        )
        self._emit(event)
        self.state = SpeechState.SPEAKING

    def _end_speech(self) -> None:
        full_buffer = np.concatenate(
            (self._padding_buffer.get_audio(), self._speech_buffer.get_audio())
        )
        event = SpeechEnded(full_buffer=full_buffer)
        log.debug(
            "Speech ended after %.0fms of silence (%d samples)",
            self._silence_duration_ms,
            len(full_buffer),
        )
        self._emit(event)
        self.state = SpeechState.NOT_SPEAKING
        self._padding_buffer.clear()
        self._speech_buffer.clear()

    def _emit(self, event: SpeechEvent) -> None:
        self.last_event = event
        if self._sink is None:
            return
        if isinstance(event, SpeechStarted):
            self._sink.on_speech_started(event)
        else:
            self._sink.on_speech_ended(event)
