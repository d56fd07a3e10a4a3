import threading
from urllib.parse import urldefrag

import pytest

from sitecrawl.domain.http_response import HttpResponse, ProbeResponse
from sitecrawl.exceptions import HttpFetchError


class FakeSite:
    """In-memory stand-in for `HttpService` serving a fixed set of pages."""

    def __init__(self):
        self._lock = threading.Lock()
        self.pages = {}
        self.probe_errors = set()
        self.fetch_errors = set()
        self.probed = []
        self.fetched = []

    def add_page(self, url: str, *links: str, content_type: str = "text/html; charset=utf-8"):
        body = "<html><body>" + "".join(f'<a href="{link}">{link}</a>' for link in links) + "</body></html>"
        self.pages[url] = (content_type, body)

    def add_resource(self, url: str, content_type: str):
        self.pages[url] = (content_type, "")

    def probe(self, url: str) -> ProbeResponse:
        url = urldefrag(url).url
        with self._lock:
            self.probed.append(url)
        if url in self.probe_errors:
            raise HttpFetchError(url, ConnectionError("probe refused"))
        if url not in self.pages:
            return ProbeResponse(404, None)
        return ProbeResponse(200, self.pages[url][0])

    def fetch(self, url: str) -> HttpResponse:
        url = urldefrag(url).url
        with self._lock:
            self.fetched.append(url)
        if url in self.fetch_errors:
            raise HttpFetchError(url, ConnectionError("connection reset"))
        content_type, body = self.pages[url]
        return HttpResponse(200, body, content_type)

    def close(self):
        pass


@pytest.fixture
def fake_site():
    return FakeSite()
