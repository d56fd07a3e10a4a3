import logging

from sitecrawl.utils.url import host_of, is_same_domain

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: the domain constraint and the depth limit.

    Separates policy decisions from crawl orchestration logic. Policy
    rejections are expected and frequent, so they are logged at DEBUG, or
    at INFO when `verbose` is set.
    """

    def __init__(self, domain: str, max_depth: int, verbose: bool = False):
        self.domain = domain.lower()
        self.max_depth = max_depth
        self.verbose = verbose

    def _log(self, msg: str, *args) -> None:
        logger.log(logging.INFO if self.verbose else logging.DEBUG, msg, *args)

    def should_skip_due_to_domain(self, url: str) -> bool:
        """Check if URL should be skipped because its host is not the crawl domain."""
        if is_same_domain(self.domain, url):
            return False
        self._log("Different domain: %s (host %s, crawling %s)", url, host_of(url), self.domain)
        return True

    def should_skip_due_to_depth(self, depth: int) -> bool:
        """Check if a task at `depth` must not be fetched."""
        if depth >= self.max_depth:
            logger.debug("Skipping (max depth %s reached) at depth %s", self.max_depth, depth)
            return True
        return False
