"""Residual layer: the difference between original and lossy-decoded audio.

Adding the residual back to the lossy reconstruction restores the original
signal, so ``original == decoded + residual``.
"""

from __future__ import annotations

from collections.abc import Sequence


def _check_lengths(first: Sequence[float], second: Sequence[float], what: str) -> None:
    if len(first) != len(second):
        raise ValueError(
            f"PCM lengths must match for {what} ({len(first)} != {len(second)})"
        )


def compute_residual(original: Sequence[float], decoded: Sequence[float]) -> list[float]:
    """Return ``original - decoded`` sample by sample.

    Raises ValueError if the two signals differ in length.
    """
    _check_lengths(original, decoded, "residual computation")
    return [o - d for o, d in zip(original, decoded)]


def reconstruct(decoded: Sequence[float], residual: Sequence[float]) -> list[float]:
    """Return ``decoded + residual`` sample by sample.

    Raises ValueError if the two signals differ in length.
    """
    _check_lengths(decoded, residual, "reconstruction")
    return [d + r for d, r in zip(decoded, residual)]