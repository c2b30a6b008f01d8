"""Speech state machine states."""

from __future__ import annotations

from enum import Enum


class SpeechState(Enum):
    NOT_SPEAKING = "not_speaking"
    SPEAKING = "speaking"
