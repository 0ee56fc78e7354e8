"""Random outbound link selection."""

from __future__ import annotations

import html as html_lib
import logging
import random
from typing import List, Optional

from tarsier.errors import NoLinksFoundError
from tarsier.scraper.models import AnchorOccurrence
from tarsier.scraper.patterns import ANCHOR_FULL_RULE
from tarsier.scraper.sanitizer import LINK_POLICY, sanitize

logger = logging.getLogger(__name__)


def find_anchors(html: str) -> List[AnchorOccurrence]:
    """Return every ``<a href="...">...</a>`` in *html*, in document order.

    Anchors sharing an href are kept as separate occurrences.
    """
    return [
        AnchorOccurrence(href=html_lib.unescape(m.group(1)), text=m.group(2))
        for m in ANCHOR_FULL_RULE.finditer(html)
    ]


def sample_link(html: str, rng: Optional[random.Random] = None) -> str:
    """Pick one absolute http(s) link of *html* uniformly at random.

    Args:
        html: Raw page markup; it is sanitized with
            :data:`~tarsier.scraper.sanitizer.LINK_POLICY` first.
        rng: Anything with a ``randrange`` method.  Defaults to the
            process-wide :mod:`random` generator.

    Returns:
        The href of the chosen anchor.

    Raises:
        NoLinksFoundError: If the page has no usable anchors.
    """
    anchors = find_anchors(sanitize(html, LINK_POLICY))
    if not anchors:
        raise NoLinksFoundError("did not find any links on the url")

    chooser = rng if rng is not None else random
    choice = anchors[chooser.randrange(len(anchors))]
    logger.debug("picked %s out of %d links", choice.href, len(anchors))
    return choice.href
