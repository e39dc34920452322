# neoaudio

Supporting pieces for NEO, an audio format built around separate stems.
The package uses only the standard library and needs Python 3.10 or later.

It provides:

- `neoaudio.errors`: the codec exception hierarchy;
- `neoaudio.residual`: residual computation for lossless reconstruction on
  top of a lossy signal;
- `neoaudio.enhance`: simple DSP enhancers (bandwidth extension by linear
  interpolation, mid/side stereo widening) and a source separator slot;
- `neoaudio.wavio`: reading and writing WAV files as interleaved floats;
- `neoaudio.labels`: choosing a stem label for each input file;
- `neoaudio.report`: text summaries of JSON metadata documents;
- `neoaudio.formatting`: byte sizes and hex digests for reports.

## Errors

Every codec failure derives from `CodecError`:

| Class | Message |
| --- | --- |
| `ModelNotFoundError(path)` | `ONNX model not found at path: ...` |
| `InferenceError(detail)` | `ONNX inference error: ...` |
| `UnsupportedSampleRateError(sample_rate)` | `Unsupported sample rate: ...` |
| `EncodingError(detail)` | `Encoding error: ...` |
| `DecodingError(detail)` | `Decoding error: ...` |

Each keeps its argument as an attribute (`path`, `detail` or `sample_rate`).

## Residuals

```python
from neoaudio.residual import compute_residual, reconstruct

original = [0.5, -0.3, 0.8]
lossy = [0.48, -0.32, 0.79]
residual = compute_residual(original, lossy)   # original - lossy
restored = reconstruct(lossy, residual)        # lossy + residual
```

Both functions raise `ValueError` when the two sequences differ in length.

## Enhancement

```python
from neoaudio.enhance import (
    BandwidthExtender,
    EnhanceConfig,
    StereoWidener,
    default_enhancement_pipeline,
)

config = EnhanceConfig(sample_rate=22050, channels=1, intensity=1.0)
BandwidthExtender(44100).enhance([0.0, 1.0, 0.0, -1.0], config)
# [0.0, 0.5, 1.0, 0.5, 0.0, -0.5, -1.0, -1.0]

wide = StereoWidener.widen([0.5, -0.5, 0.3, 0.1], 2.0)

for enhancer in default_enhancement_pipeline():
    print(enhancer.name, enhancer.enhancement_type)
```

- `EnhanceConfig` defaults to 44100 Hz, 2 channels and intensity 0.5.
- `BandwidthExtender.enhance` returns the input unchanged when its sample rate
  is already at or above the target, and raises `UnsupportedSampleRateError`
  for a non-positive source rate.
- `StereoWidener.widen` takes interleaved stereo samples; a width of 0.0
  collapses to mono, 1.0 leaves the signal unchanged and larger values widen
  it. Output is clamped to [-1, 1]. An odd number of samples raises
  `DecodingError`. `StereoWidener.enhance` widens by `1 + intensity` and
  raises `DecodingError` unless the config has 2 channels.
- `default_enhancement_pipeline()` returns a `BandwidthExtender(44100)`
  followed by a `StereoWidener`.
- `SourceSeparator(model_path).separate(...)` always raises `EncodingError`:
  model-based separation is not available.

`EnhancementType` lists `BANDWIDTH_EXTENSION`, `STEREO_WIDENING`, `DENOISE`
and `DECLIP`; only the first two have enhancers.

## WAV files

```python
from neoaudio.wavio import read_wav, write_wav

payload = read_wav("vocals.wav")
print(payload.channels, payload.sample_rate, payload.bit_depth,
      payload.sample_count, payload.duration_secs())

write_wav("copy.wav", payload.samples, payload.channels,
          payload.sample_rate, payload.bit_depth)
```

`read_wav` accepts 8, 16, 24 and 32-bit integer PCM and 32-bit float data
(including the extensible format header) and returns a `StemPayload` whose
samples are floats; integers are scaled into [-1, 1). Files that are not a
supported WAV raise `ValueError`.

`write_wav` writes 32-bit float data when `bit_depth` is 32 or more, and
otherwise integer data of at least 16 bits (16 or 24), clamping samples to
[-1, 1]. Other depths and a channel count below one raise `ValueError`.

## Stem labels

```python
from neoaudio.labels import resolve_stem_labels

resolve_stem_labels(["vocals.wav", "drums.wav"])          # ["vocals", "drums"]
resolve_stem_labels(["a.wav", "b.wav"], "lead, kit")      # ["lead", "kit"]
```

Without explicit labels each file name without its extension is used, or
`"mix"` for a path with no file name. With explicit labels their count must
match the number of inputs, otherwise `ValueError` is raised.

## Reports

```python
from neoaudio.formatting import hex_encode, human_size
from neoaudio.report import (
    edit_history_listing,
    edit_history_summary,
    pretty_lines,
    spatial_summary,
)

human_size(512)          # "512 B"
human_size(2048)         # "2.00 KiB"
hex_encode(b"\x01\xab")  # "01ab"

pretty_lines('{"b": 1, "a": 2}')
# ['{', '  "a": 2,', '  "b": 1', '}']

history = '{"commits": [{"hash": "0123456789abcdef", "message": "trim"}]}'
edit_history_summary(history)
# ['Commits: 1', '  01234567 trim']
```

- `pretty_lines` returns text that is not valid JSON as a single line.
- `spatial_summary` reports the object count, each object's `stem_id` and
  keyframe count, and the room type with its reverb time.
- `edit_history_summary(text, limit=5)` lists the newest `limit` commits with
  hashes cut to 8 characters and notes how many more there are.
- `edit_history_listing` lists every commit, newest first, with the hash cut
  to 12 characters, the message, the operation count and the timestamp.

The summaries return an empty list for invalid JSON.

## What the package does not do

The package has no audio codecs: it does not encode or decode PCM, DAC,
FLAC or Opus data, and it offers no way to pick a codec by name. It does
not read or write the NEO container file itself, has no command-line
program, and does not mix stems or play audio. The error classes, WAV I/O,
labels and report helpers are the pieces such tools are built from.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.