from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class ISpeechScorer(ABC):
    @abstractmethod
    async def score(self, input_buffer: np.ndarray, state: np.ndarray, sample_rate: int) -> float:
        """Returns the speech probability of one model input, in [0, 1]."""

    @abstractmethod
    def zero_state(self) -> np.ndarray:
        """Returns a fresh all-zero recurrent state for one call."""
