"""Article extraction: turns raw page text into an :class:`Article`.

This is a heuristic over regular expressions (see
:mod:`tarsier.scraper.patterns`), not a DOM walk.  Deeply nested or
malformed markup is out of scope and simply yields fewer paragraphs.
"""

from __future__ import annotations

import html as html_lib
from typing import Optional, Tuple

from tarsier.scraper.models import Article
from tarsier.scraper.patterns import PARAGRAPH_RULE, TITLE_RULE


def extract_title(html: str) -> Optional[str]:
    """Return the text of the first ``<title>`` tag, or ``None`` if absent or blank."""
    match = TITLE_RULE.search(html)
    if match is None:
        return None
    title = html_lib.unescape(match.group(1)).strip()
    return title or None


def extract_paragraphs(html: str) -> Tuple[str, ...]:
    """Return every ``<p>...</p>`` block of *html* in document order."""
    return tuple(PARAGRAPH_RULE.findall(html))


def extract_article(html: str) -> Article:
    """Extract the title and paragraph blocks of *html*.

    A page without paragraphs gives an empty :class:`Article`; deciding
    whether that is an error is left to the caller.
    """
    return Article(title=extract_title(html), paragraphs=extract_paragraphs(html))
