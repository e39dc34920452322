import math
import struct
import wave
from array import array

import pytest

from neoaudio.wavio import StemPayload, read_wav, write_wav


def generate_sine_wave(sample_rate, frequency, duration_secs):
    count = int(sample_rate * duration_secs)
    return [
        math.sin(2.0 * math.pi * frequency * (i / sample_rate)) for i in range(count)
    ]


def _as_f32(values):
    return array("f", values).tolist()


def _write_raw_pcm(path, raw, channels, sample_rate, bits):
    block_align = channels * bits // 8
    fmt = struct.pack(
        "<HHIIHH", 1, channels, sample_rate, sample_rate * block_align, block_align, bits
    )
    body = b"WAVE" + b"fmt " + struct.pack("<I", len(fmt)) + fmt
    body += b"data" + struct.pack("<I", len(raw)) + raw
    path.write_bytes(b"RIFF" + struct.pack("<I", len(body)) + body)


def test_float_round_trip_one_second_sine(tmp_path):
    original = generate_sine_wave(44100, 440.0, 1.0)
    path = tmp_path / "sine.wav"
    write_wav(path, original, 1, 44100, 32)

    payload = read_wav(path)
    assert payload.channels == 1
    assert payload.sample_rate == 44100
    assert payload.bit_depth == 32
    assert payload.sample_count == 44100
    assert len(payload.samples) == len(original)
    assert all(abs(o - d) < 1e-6 for o, d in zip(original, payload.samples))


def test_float_round_trip_is_exact_for_f32_values(tmp_path):
    original = _as_f32([0.0, 0.5, -0.5, 1.0, -1.0, 0.12345679])
    path = tmp_path / "exact.wav"
    write_wav(path, original, 2, 48000, 32)
    payload = read_wav(path)
    assert payload.samples == original
    assert payload.sample_count == 3


def test_sixteen_bit_output_values(tmp_path):
    path = tmp_path / "int16.wav"
    write_wav(path, [0.5, -0.5, 0.0, -1.0], 1, 22050, 16)
    with wave.open(str(path), "rb") as handle:
        assert handle.getsampwidth() == 2
        assert handle.getframerate() == 22050
        frames = handle.readframes(handle.getnframes())
    assert list(struct.unpack("<4h", frames)) == [16384, -16384, 0, -32768]


def test_sixteen_bit_round_trip(tmp_path):
    path = tmp_path / "int16.wav"
    write_wav(path, [0.5, -0.25, 0.0], 1, 44100, 16)
    payload = read_wav(path)
    assert payload.bit_depth == 16
    assert payload.samples == [0.5, -0.25, 0.0]


def test_eight_bit_depth_is_written_as_sixteen(tmp_path):
    path = tmp_path / "widened.wav"
    write_wav(path, [0.25], 1, 8000, 8)
    with wave.open(str(path), "rb") as handle:
        assert handle.getsampwidth() == 2


def test_twenty_four_bit_round_trip(tmp_path):
    path = tmp_path / "int24.wav"
    write_wav(path, [0.5, -0.5, 0.25, -1.0], 2, 96000, 24)
    payload = read_wav(path)
    assert payload.bit_depth == 24
    assert payload.channels == 2
    assert payload.sample_count == 2
    assert payload.samples == [0.5, -0.5, 0.25, -1.0]


def test_full_scale_positive_sample_is_too_wide(tmp_path):
    with pytest.raises(ValueError, match="too wide"):
        write_wav(tmp_path / "clip.wav", [1.0], 1, 44100, 16)


def test_out_of_range_samples_are_clamped(tmp_path):
    path = tmp_path / "clamp.wav"
    write_wav(path, [-3.0], 1, 44100, 16)
    assert read_wav(path).samples == [-1.0]


def test_read_eight_bit_unsigned(tmp_path):
    path = tmp_path / "u8.wav"
    _write_raw_pcm(path, bytes([128, 192, 0]), 1, 8000, 8)
    payload = read_wav(path)
    assert payload.bit_depth == 8
    assert payload.samples == [0.0, 0.5, -1.0]


def test_read_stereo_sixteen_bit_counts_frames(tmp_path):
    path = tmp_path / "stereo.wav"
    _write_raw_pcm(path, struct.pack("<4h", 16384, -16384, 8192, 0), 2, 44100, 16)
    payload = read_wav(path)
    assert payload.sample_count == 2
    assert payload.samples == [0.5, -0.5, 0.25, 0.0]
    assert payload.duration_secs() == pytest.approx(2 / 44100)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_wav(tmp_path / "missing.wav")


def test_read_rejects_non_wav(tmp_path):
    path = tmp_path / "junk.wav"
    path.write_bytes(b"this is not audio at all")
    with pytest.raises(ValueError, match="RIFF"):
        read_wav(path)


def test_zero_channels_rejected(tmp_path):
    with pytest.raises(ValueError):
        write_wav(tmp_path / "none.wav", [], 0, 44100, 16)


def test_duration_secs():
    payload = StemPayload(samples=[], channels=1, sample_rate=44100, bit_depth=16,
                          sample_count=22050)
    assert payload.duration_secs() == 0.5


def test_duration_secs_zero_rate():
    payload = StemPayload(samples=[], channels=1, sample_rate=0, bit_depth=16,
                          sample_count=100)
    assert payload.duration_secs() == 0.0