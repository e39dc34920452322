"""Exceptions raised by the audio codecs."""

from __future__ import annotations


class CodecError(Exception):
    """Base class for every codec failure."""


class ModelNotFoundError(CodecError):
    """A neural model directory or file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = str(path)
        super().__init__(f"ONNX model not found at path: {self.path}")


class InferenceError(CodecError):
    """Running a neural model failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ONNX inference error: {detail}")


class UnsupportedSampleRateError(CodecError):
    """The codec cannot handle the requested sample rate."""

    def __init__(self, sample_rate: int) -> None:
        self.sample_rate = sample_rate
        super().__init__(f"Unsupported sample rate: {sample_rate}")


class EncodingError(CodecError):
    """Encoding PCM samples failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Encoding error: {detail}")


class DecodingError(CodecError):
    """Decoding encoded bytes failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Decoding error: {detail}")