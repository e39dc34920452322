"""Text summaries of the JSON chunks stored in a container."""

from __future__ import annotations

import json
import math
from typing import Any, Optional


def _parse(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except (ValueError, TypeError):
        return None


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_list(value: Any) -> Optional[list]:
    return value if isinstance(value, list) else None


def _as_unsigned(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return None


def _field(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def _format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def _short(text: str, width: int) -> str:
    return text[:width] if len(text) > width else text


def pretty_lines(text: str) -> list[str]:
    """Pretty-print a JSON document as lines with sorted keys and 2-space indent.

    Text that is not valid JSON comes back unchanged as a single line.
    """
    parsed = _parse(text)
    if parsed is None and text.strip() != "null":
        return [text]
    pretty = json.dumps(parsed, indent=2, sort_keys=True, ensure_ascii=False)
    return pretty.splitlines()


def spatial_summary(text: str) -> list[str]:
    """Summarise a spatial scene: object count, per-object keyframes and the room.

    Invalid JSON gives an empty list.
    """
    parsed = _parse(text)
    lines: list[str] = []
    objects = _as_list(_field(parsed, "objects"))
    if objects is not None:
        lines.append(f"Objects: {len(objects)}")
        for obj in objects:
            stem_id = _as_unsigned(_field(obj, "stem_id"))
            if stem_id is None:
                continue
            keyframes = _as_list(_field(obj, "keyframes"))
            count = len(keyframes) if keyframes is not None else 0
            lines.append(f"  stem_id={stem_id} keyframes={count}")

    if isinstance(parsed, dict) and "room" in parsed:
        room = parsed["room"]
        room_type = _as_str(_field(room, "type"))
        if room_type is not None:
            reverb = _as_float(_field(room, "reverb_time"))
            reverb_text = _format_number(reverb if reverb is not None else 0.0)
            lines.append(f"Room: {room_type} (reverb_time: {reverb_text})")
    return lines


def edit_history_summary(text: str, limit: int = 5) -> list[str]:
    """Summarise an edit history: the commit count and the newest ``limit`` commits.

    Each commit line holds the hash cut to 8 characters and the message. Invalid
    JSON, or a document without a commit list, gives an empty list.
    """
    commits = _as_list(_field(_parse(text), "commits"))
    if commits is None:
        return []
    lines = [f"Commits: {len(commits)}"]
    for commit in list(reversed(commits))[: max(limit, 0)]:
        commit_hash = _as_str(_field(commit, "hash")) or "?"
        message = _as_str(_field(commit, "message")) or ""
        lines.append(f"  {_short(commit_hash, 8)} {message}")
    if len(commits) > limit:
        lines.append(f"  ... and {len(commits) - limit} more")
    return lines


def edit_history_listing(text: str) -> list[str]:
    """List every commit of an edit history, newest first.

    Each line holds the hash cut to 12 characters, the message, the number of
    operations and the timestamp. Invalid JSON, or a document without a commit
    list, gives an empty list.
    """
    commits = _as_list(_field(_parse(text), "commits"))
    if commits is None:
        return []
    lines = [f"Total commits: {len(commits)}"]
    for commit in reversed(commits):
        commit_hash = _as_str(_field(commit, "hash")) or "?"
        message = _as_str(_field(commit, "message")) or ""
        timestamp = _as_str(_field(commit, "timestamp")) or ""
        ops = _as_list(_field(commit, "ops"))
        op_count = len(ops) if ops is not None else 0
        lines.append(f"{_short(commit_hash, 12)} {message} ({op_count} ops) {timestamp}")
    return lines