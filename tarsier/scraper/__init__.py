"""Scraper package: fetch, article extraction, sanitization and formatting."""

from tarsier.scraper.extractor import extract_article
from tarsier.scraper.fetcher import fetch_url, normalize_url
from tarsier.scraper.formatter import format_article, format_paragraph
from tarsier.scraper.links import find_anchors, sample_link
from tarsier.scraper.models import AnchorOccurrence, Article, RawPage
from tarsier.scraper.sanitizer import ARTICLE_POLICY, LINK_POLICY, sanitize

__all__ = [
    "fetch_url",
    "normalize_url",
    "extract_article",
    "sanitize",
    "ARTICLE_POLICY",
    "LINK_POLICY",
    "find_anchors",
    "sample_link",
    "format_paragraph",
    "format_article",
    "RawPage",
    "Article",
    "AnchorOccurrence",
]
