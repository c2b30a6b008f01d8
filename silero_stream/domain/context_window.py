"""Rolling context window prepended to each model input."""

from __future__ import annotations

import numpy as np


class ContextWindow:
    """Keeps the trailing samples of the last model input.

    When disabled the window has size zero and frames pass through unchanged.
    """

    def __init__(self, size: int, enabled: bool = True) -> None:
        self._enabled = enabled
        self._context = np.zeros(size if enabled else 0, dtype=np.float32)

    @property
    def size(self) -> int:
        return len(self._context)

    @property
    def samples(self) -> np.ndarray:
        return self._context.copy()

    def build(self, frame: np.ndarray) -> np.ndarray:
        """Return ``context + frame`` and keep its tail as the next context."""
        if not self._enabled:
            return frame
        model_input = np.concatenate((self._context, frame)).astype(np.float32, copy=False)
        self._context[:] = model_input[-self.size :]
        return model_input

    def reset(self) -> None:
        self._context.fill(0.0)
