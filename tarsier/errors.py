"""Exception hierarchy for the tarsier pipeline.

Only argument- and transport-level problems are faults.  The "no article"
and "no links" outcomes are raised by the pipeline so the CLI can report
them as informational messages.
"""

from __future__ import annotations


class TarsierError(Exception):
    """Base class for every error raised by tarsier."""


class InvalidURLError(TarsierError):
    """The URL could not be parsed or is not an http(s) URL."""


class TransportError(TarsierError):
    """The fetch failed: connection, DNS, protocol or HTTP status error."""


class FetchTimeoutError(TransportError):
    """The fetch did not complete within ``settings.request_timeout``."""


class NoArticleFoundError(TarsierError):
    """The page contains no paragraph blocks."""


class NoLinksFoundError(TarsierError):
    """Random-link mode found no http(s) anchors on the page."""
