"""Data models for the extract_article stage."""

from dataclasses import dataclass

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


@dataclass(frozen=True)
class ExtractionConfig:
    """Thresholds for the selector and paragraph heuristics."""
    min_content_length: int = 500
    min_paragraph_length: int = 50


@dataclass(frozen=True)
class ContentSelector:
    """A named content-container selector, expressed as XPath."""
    name: str
    xpath: str
