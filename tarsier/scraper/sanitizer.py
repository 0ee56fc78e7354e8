"""Allow-list HTML sanitization.

Anything not explicitly permitted by a :class:`Policy` is removed: disallowed
elements are unwrapped (their text stays in place), disallowed attributes are
dropped, and the content of ``script``/``style`` is discarded entirely.
Sanitization never fails; bad input just yields less content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional
from urllib.parse import urlsplit

from bs4 import BeautifulSoup
from bs4.element import PreformattedString


@dataclass(frozen=True)
class Policy:
    """Which elements and attributes survive :func:`sanitize`."""

    elements: FrozenSet[str]
    attributes: Mapping[str, FrozenSet[str]] = field(default_factory=dict)
    # When set, ``href`` values must be absolute URLs using one of these schemes.
    url_schemes: Optional[FrozenSet[str]] = None
    skip_content: FrozenSet[str] = frozenset({"script", "style"})
    # Elements that are unwrapped when none of their attributes survive.
    require_attributes: FrozenSet[str] = frozenset({"a"})


ARTICLE_POLICY = Policy(
    elements=frozenset({"p", "b", "strong", "code", "em", "a"}),
    attributes={"a": frozenset({"href"})},
)

LINK_POLICY = Policy(
    elements=frozenset({"a"}),
    attributes={"a": frozenset({"href"})},
    url_schemes=frozenset({"http", "https"}),
)


def _allowed_url(value: str, schemes: Optional[FrozenSet[str]]) -> bool:
    if schemes is None:
        return True
    parts = urlsplit(value.strip())
    return parts.scheme.lower() in schemes and bool(parts.netloc)


def _clean_attrs(name: str, attrs: dict, policy: Policy) -> dict:
    allowed = policy.attributes.get(name, frozenset())
    cleaned = {}
    for key, value in attrs.items():
        if key not in allowed:
            continue
        if isinstance(value, list):
            value = " ".join(value)
        if key == "href" and not _allowed_url(value, policy.url_schemes):
            continue
        cleaned[key] = value
    return cleaned


def sanitize(html: str, policy: Policy = ARTICLE_POLICY) -> str:
    """Return *html* restricted to what *policy* allows.

    Relative order and text of permitted content are preserved; whitespace
    between elements may be normalized by the parser.
    """
    soup = BeautifulSoup(html, "html.parser")

    for tag in soup.find_all(list(policy.skip_content)):
        tag.decompose()

    # Comments, doctypes, CDATA and processing instructions
    for node in soup.find_all(string=lambda text: isinstance(text, PreformattedString)):
        node.extract()

    for tag in soup.find_all(True):
        name = tag.name.lower()
        if name not in policy.elements:
            tag.unwrap()
            continue
        tag.attrs = _clean_attrs(name, tag.attrs, policy)
        if not tag.attrs and name in policy.require_attributes:
            tag.unwrap()

    return str(soup)
