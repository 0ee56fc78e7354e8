"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class AnchorOccurrence:
    """One ``<a href="...">...</a>`` match: its href and display text."""

    href: str
    text: str


@dataclass(frozen=True)
class Article:
    """The title and ``<p>...</p>`` blocks found in a page, in document order."""

    title: Optional[str] = None
    paragraphs: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Paragraph blocks joined by a blank line."""
        return "\n\n".join(self.paragraphs).strip()

    @property
    def is_empty(self) -> bool:
        return not self.paragraphs
