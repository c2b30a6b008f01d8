"""Settings dataclass with nested sub-configs for silero-stream."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field

from silero_stream.errors import InvalidConfigError, UnsupportedSampleRateError

# Silero expects 256 samples at 8 kHz and 512 at 16 kHz (32ms either way)
WINDOW_SIZE_SAMPLES: dict[int, int] = {8000: 256, 16000: 512}
CONTEXT_SIZE_SAMPLES: dict[int, int] = {8000: 32, 16000: 64}


@dataclass(frozen=True)
class DetectorConfig:
    sample_rate: int = 8000
    min_speech_duration_ms: float = 50.0
    min_silence_duration_ms: float = 500.0
    prefix_padding_duration_ms: float = 500.0
    max_buffered_speech_ms: float = 5000.0
    activation_threshold: float = 0.4
    context: bool = True

    def __post_init__(self) -> None:
        if self.sample_rate not in WINDOW_SIZE_SAMPLES:
            raise UnsupportedSampleRateError(
                f"Unsupported sample rate {self.sample_rate}, "
                f"expected one of {sorted(WINDOW_SIZE_SAMPLES)}"
            )
        for name in (
            "min_speech_duration_ms",
            "min_silence_duration_ms",
            "prefix_padding_duration_ms",
            "max_buffered_speech_ms",
        ):
            if getattr(self, name) < 0:
                raise InvalidConfigError(f"{name} must be non-negative")
        if not 0.0 <= self.activation_threshold <= 1.0:
            raise InvalidConfigError("activation_threshold must be within [0, 1]")

    @property
    def window_size_samples(self) -> int:
        return WINDOW_SIZE_SAMPLES[self.sample_rate]

    @property
    def context_size(self) -> int:
        return CONTEXT_SIZE_SAMPLES[self.sample_rate] if self.context else 0

    @property
    def ms_per_chunk(self) -> float:
        return self.window_size_samples / self.sample_rate * 1000


@dataclass(frozen=True)
class ModelConfig:
    model_path: str | None = None


@dataclass(frozen=True)
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3000


@dataclass(frozen=True)
class Settings:
    detector: DetectorConfig = field(default_factory=DetectorConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    debug: bool = False

    @classmethod
    def from_args(cls, argv: list[str] | None = None) -> Settings:
        parser = argparse.ArgumentParser(description="Streaming Silero voice activity detector")
        parser.add_argument(
            "--sample-rate",
            type=int,
            choices=sorted(WINDOW_SIZE_SAMPLES),
            default=DetectorConfig.sample_rate,
            help="Audio sample rate in Hz (default: %(default)s)",
        )
        parser.add_argument(
            "--min-speech-ms",
            type=float,
            default=DetectorConfig.min_speech_duration_ms,
            help="Speech needed to confirm onset (default: %(default)s)",
        )
        parser.add_argument(
            "--min-silence-ms",
            type=float,
            default=DetectorConfig.min_silence_duration_ms,
            help="Silence needed to confirm end of speech (default: %(default)s)",
        )
        parser.add_argument(
            "--prefix-padding-ms",
            type=float,
            default=DetectorConfig.prefix_padding_duration_ms,
            help="Audio kept before speech onset (default: %(default)s)",
        )
        parser.add_argument(
            "--max-speech-ms",
            type=float,
            default=DetectorConfig.max_buffered_speech_ms,
            help="Maximum speech audio kept in memory (default: %(default)s)",
        )
        parser.add_argument(
            "--threshold",
            type=float,
            default=DetectorConfig.activation_threshold,
            help="Speech probability threshold (default: %(default)s)",
        )
        parser.add_argument(
            "--no-context",
            action="store_true",
            help="Do not prepend trailing samples of the previous frame",
        )
        parser.add_argument("--host", default=None, help="Bind address")
        parser.add_argument("--port", type=int, default=None, help="Bind port")
        parser.add_argument("--model", default=None, help="Path to silero_vad.onnx")
        parser.add_argument("--debug", action="store_true")

        args = parser.parse_args(argv)

        port = args.port
        if port is None:
            port = int(os.environ.get("VAD_PORT", ServerConfig.port))

        return cls(
            detector=DetectorConfig(
                sample_rate=args.sample_rate,
                min_speech_duration_ms=args.min_speech_ms,
                min_silence_duration_ms=args.min_silence_ms,
                prefix_padding_duration_ms=args.prefix_padding_ms,
                max_buffered_speech_ms=args.max_speech_ms,
                activation_threshold=args.threshold,
                context=not args.no_context,
            ),
            model=ModelConfig(
                model_path=args.model or os.environ.get("SILERO_VAD_MODEL"),
            ),
            server=ServerConfig(
                host=args.host or os.environ.get("VAD_HOST", ServerConfig.host),
                port=port,
            ),
            debug=args.debug,
        )

    @classmethod
    def default(cls) -> Settings:
        return cls()
