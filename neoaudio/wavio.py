"""Reading and writing WAV files as interleaved float samples."""

from __future__ import annotations

import os
import struct
import sys
from array import array
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Union

PathLike = Union[str, "os.PathLike[str]"]

_WAVE_FORMAT_PCM = 0x0001
_WAVE_FORMAT_IEEE_FLOAT = 0x0003
_WAVE_FORMAT_EXTENSIBLE = 0xFFFE


class _SampleFormat(Enum):
    INT = "int"
    FLOAT = "float"


class _Format(NamedTuple):
    sample_format: _SampleFormat
    channels: int
    sample_rate: int
    bits_per_sample: int


@dataclass
class StemPayload:
    """Audio read from a WAV file, as interleaved float samples."""

    samples: list[float] = field(repr=False)
    channels: int
    sample_rate: int
    bit_depth: int
    sample_count: int

    def duration_secs(self) -> float:
        """Duration in seconds; zero when the sample rate is zero."""
        if self.sample_rate == 0:
            return 0.0
        return self.sample_count / self.sample_rate


def _native_array(typecode: str, raw: bytes) -> array:
    values = array(typecode)
    values.frombytes(raw)
    if sys.byteorder == "big":
        values.byteswap()
    return values


def _le_bytes(values: array) -> bytes:
    if sys.byteorder == "big":
        values = array(values.typecode, values)
        values.byteswap()
    return values.tobytes()


def _parse_fmt(body: bytes) -> _Format:
    if len(body) < 16:
        raise ValueError("WAV fmt chunk is too short")
    tag, channels, sample_rate, _byte_rate, _block_align, bits = struct.unpack_from(
        "<HHIIHH", body
    )
    if tag == _WAVE_FORMAT_EXTENSIBLE:
        if len(body) < 26:
            raise ValueError("WAV extensible fmt chunk is too short")
        (tag,) = struct.unpack_from("<H", body, 24)

    if channels < 1:
        raise ValueError("WAV file declares no channels")
    if tag == _WAVE_FORMAT_PCM:
        if bits not in (8, 16, 24, 32):
            raise ValueError(f"Unsupported integer bit depth: {bits}")
        return _Format(_SampleFormat.INT, channels, sample_rate, bits)
    if tag == _WAVE_FORMAT_IEEE_FLOAT:
        if bits != 32:
            raise ValueError(f"Unsupported float bit depth: {bits}")
        return _Format(_SampleFormat.FLOAT, channels, sample_rate, bits)
    raise ValueError(f"Unsupported WAV format tag: 0x{tag:04x}")


def _iter_chunks(data: bytes) -> Iterable[tuple[bytes, bytes]]:
    pos = 12
    while pos + 8 <= len(data):
        chunk_id = data[pos : pos + 4]
        (size,) = struct.unpack_from("<I", data, pos + 4)
        yield chunk_id, data[pos + 8 : pos + 8 + size]
        pos += 8 + size + (size & 1)


def _decode_samples(payload: bytes, fmt: _Format) -> list[float]:
    width = fmt.bits_per_sample // 8
    payload = payload[: len(payload) - len(payload) % width]

    if fmt.sample_format is _SampleFormat.FLOAT:
        return _native_array("f", payload).tolist()

    scale = float(1 << (fmt.bits_per_sample - 1))
    if width == 1:
        return [(byte - 128) / scale for byte in payload]
    if width == 2:
        ints: Iterable[int] = _native_array("h", payload)
    elif width == 4:
        ints = _native_array("i", payload)
    else:
        ints = (
            int.from_bytes(payload[pos : pos + 3], "little", signed=True)
            for pos in range(0, len(payload), 3)
        )
    return [value / scale for value in ints]


def read_wav(path: PathLike) -> StemPayload:
    """Read a WAV file, converting integer samples to floats in [-1, 1).

    Raises OSError if the file cannot be read and ValueError if it is not a
    supported WAV file.
    """
    data = Path(path).read_bytes()
    if len(data) < 12 or data[:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise ValueError(f"Not a RIFF/WAVE file: {path}")

    fmt: _Format | None = None
    payload: bytes | None = None
    for chunk_id, body in _iter_chunks(data):
        if chunk_id == b"fmt ":
            fmt = _parse_fmt(body)
        elif chunk_id == b"data" and payload is None:
            payload = body

    if fmt is None:
        raise ValueError(f"WAV file has no fmt chunk: {path}")
    if payload is None:
        raise ValueError(f"WAV file has no data chunk: {path}")

    samples = _decode_samples(payload, fmt)
    return StemPayload(
        samples=samples,
        channels=fmt.channels,
        sample_rate=fmt.sample_rate,
        bit_depth=fmt.bits_per_sample,
        sample_count=len(samples) // fmt.channels,
    )


def _encode_int_samples(samples: Iterable[float], bits: int) -> bytes:
    scale = float(1 << (bits - 1))
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    ints = []
    for sample in samples:
        value = int(max(-1.0, min(1.0, sample)) * scale)
        if not low <= value <= high:
            raise ValueError(f"Sample {sample} is too wide for {bits}-bit output")
        ints.append(value)
    if bits == 16:
        return _le_bytes(array("h", ints))
    return b"".join(value.to_bytes(3, "little", signed=True) for value in ints)


def write_wav(
    path: PathLike,
    samples: Iterable[float],
    channels: int,
    sample_rate: int,
    bit_depth: int,
) -> None:
    """Write interleaved float samples to a WAV file.

    A bit depth of 32 or more is written as 32-bit float; anything lower is
    written as integers of at least 16 bits, with samples clamped to [-1, 1].
    """
    if channels < 1:
        raise ValueError("WAV output needs at least one channel")

    if bit_depth >= 32:
        tag, bits = _WAVE_FORMAT_IEEE_FLOAT, 32
        payload = _le_bytes(array("f", samples))
    else:
        tag, bits = _WAVE_FORMAT_PCM, max(bit_depth, 16)
        if bits not in (16, 24):
            raise ValueError(f"Unsupported output bit depth: {bits}")
        payload = _encode_int_samples(samples, bits)

    block_align = channels * bits // 8
    fmt_body = struct.pack(
        "<HHIIHH", tag, channels, sample_rate, sample_rate * block_align, block_align, bits
    )
    if tag == _WAVE_FORMAT_IEEE_FLOAT:
        fmt_body += struct.pack("<H", 0)

    chunks = b"".join(
        [
            b"WAVE",
            b"fmt ",
            struct.pack("<I", len(fmt_body)),
            fmt_body,
            b"data",
            struct.pack("<I", len(payload)),
            payload,
            b"\x00" if len(payload) & 1 else b"",
        ]
    )
    with open(path, "wb") as handle:
        handle.write(b"RIFF")
        handle.write(struct.pack("<I", len(chunks)))
        handle.write(chunks)