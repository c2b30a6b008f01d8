"""Port interfaces (ABCs) for the hexagonal architecture."""

from silero_stream.ports.event_sink import ISpeechEventSink
from silero_stream.ports.speech_scorer import ISpeechScorer

__all__ = [
    "ISpeechEventSink",
    "ISpeechScorer",
]
