"""Custom exceptions for the streaming detector."""


class VADError(Exception):
    """Base class for detector errors reported per stream or per frame."""


class InvalidConfigError(VADError, ValueError):
    """Raised when detector settings are out of range."""


class UnsupportedSampleRateError(InvalidConfigError):
    """Raised when the sample rate has no known frame size."""


class FrameSizeError(VADError, ValueError):
    """Raised when a frame does not have the expected number of samples."""


class InferenceError(VADError, RuntimeError):
    """Raised when the speech scorer fails on a frame."""


class UnsupportedModelError(VADError):
    """Raised when the ONNX model does not take the Silero v5 inputs."""
