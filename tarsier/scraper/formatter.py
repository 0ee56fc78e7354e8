"""Paragraph formatting: sanitized ``<p>`` blocks to terminal markup."""

from __future__ import annotations

import html as html_lib
from typing import List

from tarsier.scraper.patterns import (
    ANCHOR_FULL_RULE,
    ANCHOR_OPEN_RULE,
    INLINE_TAG_RULE,
    INLINE_TAG_TOKENS,
    LINK_TOKEN,
    PARAGRAPH_RULE,
    PARAGRAPH_TAG_RULE,
    RESET_TOKEN,
)

_FULL_ANCHOR_TEMPLATE = rf"\2 ({LINK_TOKEN}\1{RESET_TOKEN})"
_OPEN_ANCHOR_TEMPLATE = rf"{LINK_TOKEN}\1{RESET_TOKEN}"


def _inline_token(match) -> str:
    if match.group(1):
        return RESET_TOKEN
    return INLINE_TAG_TOKENS[match.group(2).lower()]


def format_paragraph(block: str) -> str:
    """Convert the first ``<p>...</p>`` block in *block* into terminal markup.

    Steps, in this order:

    1. decode HTML entities;
    2. map ``em``/``strong``/``b``/``code`` to color tokens, every closing
       tag to the reset token;
    3. drop the ``<p>`` wrapper;
    4. rewrite full anchors to ``text (<blue>href</>)``, then any leftover
       opening anchor to ``<blue>href</>``.

    Returns an empty string when *block* contains no paragraph.
    """
    match = PARAGRAPH_RULE.search(block)
    if match is None:
        return ""

    content = html_lib.unescape(match.group(1))
    content = INLINE_TAG_RULE.sub(_inline_token, content)
    content = PARAGRAPH_TAG_RULE.sub("", content)
    content = ANCHOR_FULL_RULE.sub(_FULL_ANCHOR_TEMPLATE, content)
    content = ANCHOR_OPEN_RULE.sub(_OPEN_ANCHOR_TEMPLATE, content)
    return content


def format_article(sanitized: str) -> List[str]:
    """Format every paragraph block of a sanitized article."""
    return [format_paragraph(block) for block in PARAGRAPH_RULE.findall(sanitized)]
