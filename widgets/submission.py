from __future__ import annotations

import re

_SEGMENT_RE = re.compile(r"\[([^\]]*)\]")


def split_name(name: str, prefix: str) -> list[str] | None:
    """``prefix[a][b][c]`` -> ``["a", "b", "c"]``; None when the name is not under prefix."""
    if not name.startswith(prefix):
        return None
    rest = name[len(prefix):]
    segments = _SEGMENT_RE.findall(rest)
    if not segments or "".join(f"[{segment}]" for segment in segments) != rest:
        return None
    return segments


def parse_submission(data, prefix: str) -> dict:
    """Nest bracketed form names under ``prefix`` into dicts, in post order.

    ``data`` is a QueryDict or any mapping; for repeated names the last value
    wins.
    """
    parsed: dict = {}
    for name in data.keys():
        segments = split_name(name, prefix)
        if not segments:
            continue
        value = data.get(name)
        node = parsed
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = node[segment] = {}
            node = child
        node[segments[-1]] = value
    return parsed
