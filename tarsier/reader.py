"""Article reading pipeline.

``read_article`` runs one request from URL to formatted paragraphs:

    fetch → [pick random link → fetch] → extract → sanitize → format
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from tarsier.errors import NoArticleFoundError
from tarsier.scraper.extractor import extract_article
from tarsier.scraper.fetcher import fetch_url
from tarsier.scraper.formatter import format_article
from tarsier.scraper.links import sample_link
from tarsier.scraper.models import RawPage
from tarsier.scraper.sanitizer import ARTICLE_POLICY, sanitize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A page ready for rendering."""

    url: str
    title: Optional[str] = None
    paragraphs: Tuple[str, ...] = field(default_factory=tuple)


def read_article(
    url: str,
    *,
    random_link: bool = False,
    rng: Optional[random.Random] = None,
    fetch: Callable[[str], RawPage] = fetch_url,
    on_follow: Optional[Callable[[str], None]] = None,
) -> Document:
    """Fetch *url* and return its article as terminal markup.

    Args:
        url: Page to read; a missing scheme defaults to ``https``.
        random_link: Read a randomly chosen link of the page instead.
        rng: Link chooser passed to :func:`~tarsier.scraper.links.sample_link`.
        fetch: Fetch function, :func:`~tarsier.scraper.fetcher.fetch_url`
            unless overridden.
        on_follow: Called with the chosen href before it is fetched.

    Raises:
        InvalidURLError, TransportError: From the fetch.
        NoLinksFoundError: In random-link mode, when the page has no links.
        NoArticleFoundError: When the page has no paragraphs.
    """
    page = fetch(url)

    if random_link:
        link = sample_link(page.html, rng=rng)
        logger.info("following random link %s from %s", link, page.url)
        if on_follow is not None:
            on_follow(link)
        page = fetch(link)

    article = extract_article(page.html)
    if article.is_empty:
        raise NoArticleFoundError(f"no article found at {page.url}")

    logger.info("extracted %d paragraphs from %s", len(article.paragraphs), page.url)
    html = sanitize(article.text, ARTICLE_POLICY)

    return Document(
        url=page.url,
        title=article.title,
        paragraphs=tuple(format_article(html)),
    )
