import logging
from typing import Callable, Iterator, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class LinkExtractor:
    """Pulls `<a href>` targets out of an HTML page."""

    def __init__(self, soup_factory: Optional[Callable[[str], BeautifulSoup]] = None):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract_links(self, base_url: str, html: str) -> Iterator[str]:
        """Yield every link in `html` resolved against `base_url`, in document order.

        The generator is one-shot. Hrefs that cannot be resolved are skipped.
        """
        if not html:
            return
        soup = self._soup_factory(html)
        for a in soup.find_all("a", href=True):
            href = a.get("href").strip()
            if not href:
                continue
            try:
                yield urljoin(base_url, href)
            except ValueError:
                logger.debug("Skipping unresolvable href %r on %s", href, base_url)
