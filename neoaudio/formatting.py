"""Small text formatting helpers for reports."""

from __future__ import annotations

_KIB = 1024
_MIB = _KIB * 1024
_GIB = _MIB * 1024


def human_size(num_bytes: int) -> str:
    """Format a byte count with binary units (B, KiB, MiB, GiB)."""
    if num_bytes >= _GIB:
        return f"{num_bytes / _GIB:.2f} GiB"
    if num_bytes >= _MIB:
        return f"{num_bytes / _MIB:.2f} MiB"
    if num_bytes >= _KIB:
        return f"{num_bytes / _KIB:.2f} KiB"
    return f"{num_bytes} B"


def hex_encode(data: bytes) -> str:
    """Encode bytes as a lowercase hex string."""
    return bytes(data).hex()