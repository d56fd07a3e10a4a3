from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse, urlunparse

from sitecrawl.exceptions import CrawlerUrlError

CRAWLABLE_SCHEMES = ("http", "https")
DEFAULT_PORTS = {"http": 80, "https": 443}


def parse_root_url(url: str) -> str:
    """Validate a crawl root and return it in canonical form.

    Raises `CrawlerUrlError` when the string is not an absolute http(s) URL
    with a host component.
    """
    if not isinstance(url, str) or not url.strip():
        raise CrawlerUrlError(str(url), "empty URL")
    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname
        # Accessing .port validates the port component.
        parsed.port
    except ValueError as e:
        raise CrawlerUrlError(url, str(e)) from e
    if parsed.scheme.lower() not in CRAWLABLE_SCHEMES:
        raise CrawlerUrlError(url, f"unsupported scheme {parsed.scheme!r}")
    if not host:
        raise CrawlerUrlError(url, "no host component")
    return canonicalize(url.strip())


def host_of(url: str) -> Optional[str]:
    """Return the lower-cased host of `url`, or None if it has none."""
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def is_same_domain(domain: str, url: str) -> bool:
    """True when the host of `url` is exactly `domain`. Subdomains do not match."""
    host = host_of(url)
    return host is not None and host == domain.lower()


def _normalize_netloc(scheme: str, netloc: str, port: Optional[int]) -> str:
    netloc = netloc.lower()
    # drop the default port for the scheme
    if port is not None and DEFAULT_PORTS.get(scheme) == port:
        return netloc.rsplit(":", 1)[0]
    return netloc.rstrip(":")


def canonicalize(url: str) -> str:
    """Return the dedup key for `url`: fragment dropped, scheme and host lower-cased,
    default port removed, empty path replaced by `/`.
    """
    p = urlparse(url)
    scheme = p.scheme.lower()
    try:
        port = p.port
    except ValueError:
        port = None
    path = p.path
    if not path and p.netloc:
        path = "/"
    netloc = _normalize_netloc(scheme, p.netloc, port)
    return urlunparse(p._replace(scheme=scheme, netloc=netloc, path=path, fragment=""))
