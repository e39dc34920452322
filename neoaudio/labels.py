"""Working out stem labels for the files being encoded."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

_FALLBACK_LABEL = "mix"


def _label_from_path(path: PathLike) -> str:
    name = Path(path).stem
    return name or _FALLBACK_LABEL


def resolve_stem_labels(
    inputs: Sequence[PathLike], stems: Optional[str] = None
) -> list[str]:
    """Return one label per input file.

    With ``stems`` given, it is split on commas and each label is trimmed; the
    number of labels must equal the number of inputs, otherwise ValueError is
    raised. Without it, each label is the input's file name without its
    extension, or ``"mix"`` when the path has no file name.
    """
    if stems is None:
        return [_label_from_path(path) for path in inputs]

    labels = [part.strip() for part in stems.split(",")]
    if len(labels) != len(inputs):
        raise ValueError(
            f"Number of stem labels ({len(labels)}) does not match number of "
            f"input files ({len(inputs)})"
        )
    return labels