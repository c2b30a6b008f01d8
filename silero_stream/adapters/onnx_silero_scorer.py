"""Silero VAD scorer using ONNX runtime (no torch dependency)."""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

import numpy as np
import onnxruntime

from silero_stream.errors import UnsupportedModelError
from silero_stream.ports.speech_scorer import ISpeechScorer

log = logging.getLogger(__name__)

STATE_SHAPE = (2, 1, 128)
REQUIRED_INPUTS = frozenset({"input", "state", "sr"})


class OnnxSileroScorer(ISpeechScorer):
    """Silero v5 model shared by every stream in the process.

    Each call receives its own recurrent state, so the session holds nothing
    per stream and concurrent calls from different streams are safe.
    """

    def __init__(self, session: onnxruntime.InferenceSession) -> None:
        self._session = session

    def zero_state(self) -> np.ndarray:
        return np.zeros(STATE_SHAPE, dtype=np.float32)

    async def score(self, input_buffer: np.ndarray, state: np.ndarray, sample_rate: int) -> float:
        return await asyncio.to_thread(self._run, input_buffer, state, sample_rate)

    def _run(self, input_buffer: np.ndarray, state: np.ndarray, sample_rate: int) -> float:
        ort_inputs = {
            "input": np.asarray(input_buffer, dtype=np.float32).reshape(1, -1),
            "state": state,
            "sr": np.array(sample_rate, dtype=np.int64),
        }
        out, _state = self._session.run(None, ort_inputs)
        return float(out[0][0])


def load_silero_scorer(model_path: str | None = None) -> OnnxSileroScorer:
    """Load the ONNX session once; the returned scorer is meant to be shared."""
    path = find_silero_vad_model(model_path)
    log.info("Loading Silero VAD from: %s", path)
    opts = onnxruntime.SessionOptions()
    opts.inter_op_num_threads = 1
    opts.intra_op_num_threads = 1
    session = onnxruntime.InferenceSession(path, sess_options=opts)

    input_names = {i.name for i in session.get_inputs()}
    if not REQUIRED_INPUTS <= input_names:
        raise UnsupportedModelError(
            f"{path} takes inputs {sorted(input_names)}, expected {sorted(REQUIRED_INPUTS)} "
            "(Silero VAD v5 with a combined 'state' tensor)"
        )
    return OnnxSileroScorer(session)


def find_silero_vad_model(model_path: str | None = None) -> str:
    """Locate silero_vad.onnx: explicit path, $SILERO_VAD_MODEL, then a search under sys.prefix."""
    candidate = model_path or os.environ.get("SILERO_VAD_MODEL")
    if candidate:
        if os.path.exists(candidate):
            return candidate
        raise FileNotFoundError(f"Silero VAD model not found at {candidate}")

    venv = Path(sys.prefix)
    for p in venv.rglob("silero_vad.onnx"):
        return str(p)

    raise FileNotFoundError("silero_vad.onnx not found. Pass --model or set SILERO_VAD_MODEL.")
