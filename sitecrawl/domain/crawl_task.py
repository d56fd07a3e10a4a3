from typing import NamedTuple


class CrawlTask(NamedTuple):
    """A link to crawl and how many hops it sits below the root."""
    depth: int
    url: str

    def child(self, url: str) -> "CrawlTask":
        return CrawlTask(self.depth + 1, url)
