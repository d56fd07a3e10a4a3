import logging
from typing import Optional

import requests

from sitecrawl.domain.http_response import HttpResponse, ProbeResponse
from sitecrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """
    HTTP client wrapper used as the crawl transport.

    One instance (and its `requests.Session`) is shared by every worker. The
    session is injectable so tests can pass a mock instead of patching.
    """

    def __init__(self, user_agent: str, session: Optional[requests.Session] = None, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _headers(self) -> dict:
        return {"User-Agent": self.user_agent}

    def probe(self, url: str) -> ProbeResponse:
        """Issue a HEAD request and return its status and Content-Type."""
        try:
            resp = self.session.head(url, headers=self._headers(), timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e
        return ProbeResponse(resp.status_code, resp.headers.get("Content-Type"))

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text, and Content-Type."""
        try:
            resp = self.session.get(url, headers=self._headers(), timeout=self.timeout)
            text = resp.text
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e
        except (UnicodeDecodeError, LookupError) as e:
            # body could not be decoded with the advertised charset
            raise HttpFetchError(url, e) from e

        if resp.status_code < 200 or resp.status_code >= 300:
            logger.warning("Non-success status for %s: %s", url, resp.status_code)
        return HttpResponse(resp.status_code, text, resp.headers.get("Content-Type"))

    def close(self) -> None:
        self.session.close()
