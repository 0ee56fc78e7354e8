"""HTTP fetcher: one blocking GET per URL, no retries."""

from __future__ import annotations

import logging
import re

import httpx

from tarsier.config import settings
from tarsier.errors import FetchTimeoutError, InvalidURLError, TransportError
from tarsier.scraper.models import RawPage

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)
_ALLOWED_SCHEMES = ("http", "https")


def normalize_url(site: str) -> str:
    """Return *site* as an absolute http(s) URL.

    A URL given without a scheme (``example.com/post``) is read over
    ``https``.

    Raises:
        InvalidURLError: If *site* is empty, unparseable, uses another scheme
            or has no host.
    """
    site = site.strip()
    if not site:
        raise InvalidURLError("empty url")

    if not _SCHEME_RE.match(site):
        site = f"https://{site}"

    try:
        url = httpx.URL(site)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(f"invalid url {site!r}: {exc}") from exc

    if url.scheme not in _ALLOWED_SCHEMES:
        raise InvalidURLError(f"unsupported url scheme {url.scheme!r} in {site!r}")
    if not url.host:
        raise InvalidURLError(f"missing host in url {site!r}")

    return str(url)


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Raises:
        InvalidURLError: If *url* cannot be normalized.
        FetchTimeoutError: If the request exceeds ``settings.request_timeout``.
        TransportError: On connection, protocol or 4xx/5xx status failures.
    """
    target = normalize_url(url)
    logger.debug("fetching %s", target)

    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=settings.follow_redirects,
        ) as client:
            response = client.get(target)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError(
            f"timed out after {settings.request_timeout}s fetching {target}"
        ) from exc
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            f"{target} returned HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"failed to fetch {target}: {exc}") from exc

    logger.debug("fetched %s (HTTP %d, %d chars)", target, status_code, len(html))
    return RawPage(url=target, html=html, status_code=status_code)
