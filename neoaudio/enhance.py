"""Post-decode audio enhancement: bandwidth extension, stereo widening, separation."""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Optional

from .errors import DecodingError, EncodingError, UnsupportedSampleRateError

_log = logging.getLogger(__name__)


class EnhancementType(enum.Enum):
    """Kinds of enhancement pass."""

    BANDWIDTH_EXTENSION = "BandwidthExtension"
    STEREO_WIDENING = "StereoWidening"
    DENOISE = "Denoise"
    DECLIP = "Declip"


@dataclass
class EnhanceConfig:
    """Parameters of an enhancement pass."""

    sample_rate: int = 44100
    channels: int = 2
    intensity: float = 0.5


class AudioEnhancer(ABC):
    """Interface for processors applied to decoded samples."""

    enhancement_type: ClassVar[EnhancementType]
    name: ClassVar[str]

    @abstractmethod
    def enhance(self, samples: Iterable[float], config: EnhanceConfig) -> list[float]:
        """Return the enhanced samples."""


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


class BandwidthExtender(AudioEnhancer):
    """Upsamples audio to a target rate by linear interpolation."""

    enhancement_type = EnhancementType.BANDWIDTH_EXTENSION
    name = "Bandwidth Extension (DSP)"

    def __init__(self, target_rate: int) -> None:
        self.target_rate = target_rate

    def enhance(self, samples: Iterable[float], config: EnhanceConfig) -> list[float]:
        """Upsample to ``target_rate``; input already at or above it passes through."""
        source = list(samples)
        if config.sample_rate >= self.target_rate:
            return source
        if config.sample_rate <= 0:
            raise UnsupportedSampleRateError(config.sample_rate)

        ratio = self.target_rate / config.sample_rate
        new_len = int(len(source) * ratio)
        output: list[float] = []
        for i in range(new_len):
            src_pos = i / ratio
            idx = int(src_pos)
            frac = src_pos - idx
            if idx + 1 < len(source):
                output.append(source[idx] * (1.0 - frac) + source[idx + 1] * frac)
            elif idx < len(source):
                output.append(source[idx])

        _log.debug(
            "Bandwidth extension applied: %d Hz -> %d Hz, %d -> %d samples",
            config.sample_rate,
            self.target_rate,
            len(source),
            len(output),
        )
        return output


class StereoWidener(AudioEnhancer):
    """Widens the stereo image with mid/side processing."""

    enhancement_type = EnhancementType.STEREO_WIDENING
    name = "Stereo Widener (Mid/Side)"

    @staticmethod
    def widen(samples: Iterable[float], width: float) -> list[float]:
        """Scale the side signal of interleaved stereo samples by ``width``.

        A width of 0 collapses to mono, 1 leaves the signal unchanged and 2 is
        extra wide. Results are clamped to [-1, 1].
        """
        source = list(samples)
        if len(source) % 2:
            raise DecodingError(
                "Stereo widening requires even number of samples (interleaved stereo)"
            )

        output: list[float] = []
        for left, right in zip(source[0::2], source[1::2]):
            mid = (left + right) * 0.5
            side = (left - right) * 0.5 * width
            output.append(_clamp(mid + side))
            output.append(_clamp(mid - side))

        _log.debug("Stereo widening applied: width=%s, frames=%d", width, len(source) // 2)
        return output

    def enhance(self, samples: Iterable[float], config: EnhanceConfig) -> list[float]:
        """Widen 2-channel audio by ``1 + intensity``."""
        if config.channels != 2:
            raise DecodingError("Stereo widening requires 2-channel audio")
        return self.widen(samples, config.intensity + 1.0)


class SourceSeparator:
    """Splits a mix into stems; needs a Demucs model that is not integrated."""

    def __init__(self, model_path: Optional[str] = None) -> None:
        self.model_path = model_path

    def separate(
        self, samples: Iterable[float], sample_rate: int, channels: int
    ) -> list[tuple[str, list[float]]]:
        """Always raises EncodingError: model-based separation is unavailable."""
        if self.model_path is None:
            raise EncodingError(
                "No Demucs model path provided. Download with "
                "`neo model download demucs` first."
            )
        _log.warning(
            "Source separation via ONNX is not available (model path: %s)",
            self.model_path,
        )
        raise EncodingError(
            "ONNX-based source separation not yet implemented. Use the "
            "`neo_neural.separator` module for Demucs separation."
        )


def default_enhancement_pipeline() -> list[AudioEnhancer]:
    """Enhancers applied in order after decoding."""
    return [BandwidthExtender(44100), StereoWidener()]