"""Tests for ContextWindow."""

import numpy as np

from silero_stream.domain.context_window import ContextWindow


class TestContextWindow:
    def test_starts_zeroed(self):
        window = ContextWindow(size=32)
        assert window.size == 32
        np.testing.assert_array_equal(window.samples, np.zeros(32))

    def test_build_prepends_context(self):
        window = ContextWindow(size=32)
        frame = np.full(256, 0.5, dtype=np.float32)
        model_input = window.build(frame)
        assert len(model_input) == 288
        np.testing.assert_array_equal(model_input[:32], np.zeros(32))
        np.testing.assert_array_equal(model_input[32:], frame)

    def test_keeps_tail_of_last_input(self):
        window = ContextWindow(size=4)
        window.build(np.arange(8, dtype=np.float32))
        np.testing.assert_array_equal(window.samples, [4, 5, 6, 7])

        model_input = window.build(np.arange(10, 18, dtype=np.float32))
        np.testing.assert_array_equal(model_input[:4], [4, 5, 6, 7])
        np.testing.assert_array_equal(window.samples, [14, 15, 16, 17])

    def test_disabled_passes_frame_through(self):
        window = ContextWindow(size=32, enabled=False)
        frame = np.ones(256, dtype=np.float32)
        assert window.build(frame) is frame
        assert window.size == 0

    def test_reset_zeroes_context(self):
        window = ContextWindow(size=4)
        window.build(np.ones(8, dtype=np.float32))
        window.reset()
        np.testing.assert_array_equal(window.samples, np.zeros(4))

    def test_reset_when_disabled_is_noop(self):
        window = ContextWindow(size=4, enabled=False)
        window.reset()
        assert window.size == 0
