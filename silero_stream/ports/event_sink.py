from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from silero_stream.domain.events import SpeechEnded, SpeechStarted


class ISpeechEventSink(ABC):
    @abstractmethod
    def on_speech_started(self, event: SpeechStarted) -> None: ...

    @abstractmethod
    def on_speech_ended(self, event: SpeechEnded) -> None: ...
