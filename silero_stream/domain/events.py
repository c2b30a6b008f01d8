"""Speech boundary events delivered to an event sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

import numpy as np


@dataclass(frozen=True)
class SpeechStarted:
    """Speech onset confirmed; carries the audio captured before it."""

    event_type: ClassVar[str] = "SPEECH_STARTED"
    padding_buffer: np.ndarray = field(repr=False)


@dataclass(frozen=True)
class SpeechEnded:
    """Speech end confirmed; carries padding followed by the captured speech."""

    event_type: ClassVar[str] = "SPEECH_ENDED"
    full_buffer: np.ndarray = field(repr=False)


SpeechEvent = Union[SpeechStarted, SpeechEnded]
