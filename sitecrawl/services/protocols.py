"""Protocol (interface) definitions for the crawl collaborators."""

from typing import Iterator, Protocol

from sitecrawl.domain.http_response import HttpResponse, ProbeResponse


class Fetcher(Protocol):
    """Transport used by workers.

    Both calls raise `HttpFetchError` on network/transport failure.
    """

    def probe(self, url: str) -> ProbeResponse: ...

    def fetch(self, url: str) -> HttpResponse: ...


class LinkSource(Protocol):
    """Turns an HTML body into absolute URLs, lazily and without raising on bad markup."""

    def extract_links(self, base_url: str, html: str) -> Iterator[str]: ...
