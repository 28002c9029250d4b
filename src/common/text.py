"""Plain-text helpers."""

import re

_WHITESPACE_RE = re.compile(r"\s+")

TRUNCATION_MARKER = "..."


def normalize_whitespace(text: str | None) -> str:
    """Collapse every whitespace run to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate_text(text: str, max_chars: int) -> str:
    """Cut text to max_chars, appending a truncation marker when it was cut."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER
