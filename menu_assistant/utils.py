from __future__ import annotations

import json
import re
import sys
from typing import Any, Iterable


_NON_ALNUM_SPACE_RE = re.compile(r"[^a-z0-9\s]")


def normalize_text(s: Any) -> str:
    """
    Normalize text for matching:
    - lowercase
    - drop every character that is not a-z, 0-9 or whitespace
    - trim leading/trailing whitespace

    Total: None and non-string values are accepted.
    """
    if s is None:
        return ""
    s = str(s).lower()
    s = _NON_ALNUM_SPACE_RE.sub("", s)
    return s.strip()


def contains_any(text: str, needles: Iterable[str]) -> bool:
    return any(n in text for n in needles)


def _trace(enabled: bool, event: str, payload: dict) -> None:
    """
    Lightweight structured tracing to stderr.
    No-op when disabled.
    """
    if not enabled:
        return
    print(
        f"[trace] {event} {json.dumps(payload, ensure_ascii=False, default=str)}",
        file=sys.stderr,
    )
