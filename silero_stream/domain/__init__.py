"""Domain layer: state machine, stream detector, audio buffer, context window."""

from silero_stream.domain.audio_buffer import AudioBuffer
from silero_stream.domain.context_window import ContextWindow
from silero_stream.domain.events import SpeechEnded, SpeechEvent, SpeechStarted
from silero_stream.domain.speech_state import SpeechState
from silero_stream.domain.stream_detector import StreamDetector

__all__ = [
    "AudioBuffer",
    "ContextWindow",
    "SpeechEnded",
    "SpeechEvent",
    "SpeechStarted",
    "SpeechState",
    "StreamDetector",
]
