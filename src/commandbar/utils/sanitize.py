from __future__ import annotations

from typing import Final

_CONTROL_CHARS: Final[frozenset[str]] = frozenset(
    chr(code) for code in range(0x00, 0x20) if chr(code) not in {"\t", "\n"}
)

MAX_LOGGED_TEXT: Final[int] = 120


def sanitize_log_message(value: str, *, limit: int | None = MAX_LOGGED_TEXT) -> str:
    """Normalise text destined for logs by stripping control characters and CR sequences.

    Queries and item titles come straight from user input, so they are also
    truncated to ``limit`` characters (``None`` disables truncation).
    """

    normalised = value.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = "".join(ch for ch in normalised if ch not in _CONTROL_CHARS)
    if limit is not None and len(cleaned) > limit:
        return cleaned[:limit] + "…"
    return cleaned


__all__ = ["MAX_LOGGED_TEXT", "sanitize_log_message"]
