import logging
from typing import Iterator

from sitecrawl.domain.crawl_task import CrawlTask
from sitecrawl.services.protocols import LinkSource
from sitecrawl.utils.url import is_same_domain

logger = logging.getLogger(__name__)


class LinkProcessor:
    """Turns a fetched page into child tasks: extract, keep same-domain links, bump depth."""

    def __init__(self, link_extractor: LinkSource, domain: str):
        self.link_extractor = link_extractor
        self.domain = domain.lower()

    def process(self, task: CrawlTask, html: str) -> Iterator[CrawlTask]:
        """Lazily yield a `CrawlTask` one level below `task` for each same-domain link in `html`.

        Order follows the page's extraction order. No dedup happens here;
        that is the coordinator's job.
        """
        for link_url in self.link_extractor.extract_links(task.url, html):
            if not is_same_domain(self.domain, link_url):
                logger.debug("Skipping (external) %s -> not on %s", link_url, self.domain)
                continue
            yield task.child(link_url)
