"""Tests for anchor collection and random link sampling."""

from __future__ import annotations

import random

import pytest

from tarsier.errors import NoLinksFoundError
from tarsier.scraper.links import find_anchors, sample_link
from tarsier.scraper.models import AnchorOccurrence


class _FixedChoice:
    """Stand-in for ``random.Random`` that always picks the same index."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.index


_PAGE = """\
<html><body>
  <nav><a class="nav" href="https://a.test/one">One</a></nav>
  <p>Read <a href="https://b.test/two">two</a> or <a href="/relative">local</a>.</p>
  <footer><a href="https://c.test/three" rel="nofollow">Three</a></footer>
</body></html>
"""


class TestFindAnchors:
    def test_document_order(self) -> None:
        html = '<a href="https://a.test">A</a> <a href="https://b.test">B</a>'
        assert find_anchors(html) == [
            AnchorOccurrence(href="https://a.test", text="A"),
            AnchorOccurrence(href="https://b.test", text="B"),
        ]

    def test_identical_hrefs_are_distinct_occurrences(self) -> None:
        html = '<a href="https://a.test">first</a><a href="https://a.test">second</a>'
        anchors = find_anchors(html)
        assert [a.text for a in anchors] == ["first", "second"]

    def test_href_entities_decoded(self) -> None:
        html = '<a href="https://a.test/?x=1&amp;y=2">q</a>'
        assert find_anchors(html)[0].href == "https://a.test/?x=1&y=2"

    def test_no_anchors(self) -> None:
        assert find_anchors("<p>nothing here</p>") == []


class TestSampleLink:
    def test_single_anchor_always_chosen(self) -> None:
        html = '<a href="https://only.test">t</a>'
        for seed in range(20):
            assert sample_link(html, rng=random.Random(seed)) == "https://only.test"

    def test_default_rng(self) -> None:
        assert sample_link('<a href="https://only.test">t</a>') == "https://only.test"

    def test_zero_anchors_raises(self) -> None:
        with pytest.raises(NoLinksFoundError):
            sample_link("<html><body><p>No links</p></body></html>")

    def test_only_relative_links_raises(self) -> None:
        with pytest.raises(NoLinksFoundError):
            sample_link('<a href="/a">a</a><a href="#top">top</a>')

    def test_injected_chooser_picks_index(self) -> None:
        chooser = _FixedChoice(2)
        assert sample_link(_PAGE, rng=chooser) == "https://c.test/three"
        # The relative link was dropped by the link policy.
        assert chooser.calls == [3]

    def test_first_index(self) -> None:
        assert sample_link(_PAGE, rng=_FixedChoice(0)) == "https://a.test/one"

    def test_choice_covers_all_links(self) -> None:
        rng = random.Random(1234)
        seen = {sample_link(_PAGE, rng=rng) for _ in range(200)}
        assert seen == {"https://a.test/one", "https://b.test/two", "https://c.test/three"}
