import logging
import threading
from typing import List, Optional

from sitecrawl import config
from sitecrawl.domain.config import CrawlConfig
from sitecrawl.domain.crawl_result import CrawlResult
from sitecrawl.domain.visited_tracker import VisitedTracker
from sitecrawl.services.crawl_context import CrawlContext
from sitecrawl.services.coordinator import Coordinator
from sitecrawl.services.crawl_policy import CrawlPolicy
from sitecrawl.services.http_service import HttpService
from sitecrawl.services.link_extractor import LinkExtractor
from sitecrawl.services.link_processor import LinkProcessor
from sitecrawl.services.worker import CrawlWorker
from sitecrawl.utils.url import host_of, parse_root_url

logger = logging.getLogger(__name__)


class Crawler:
    """Single-domain crawler.

    Construct it with a root URL, adjust `fetcher_count`, `max_depth`,
    `verbose` (and the timing knobs) if needed, then call `start()`. When
    `start()` returns, `visited` holds every canonical page that was approved
    and `result` summarises the run.
    """

    def __init__(
        self,
        root_url: str,
        *,
        http_service: Optional[HttpService] = None,
        link_extractor: Optional[LinkExtractor] = None,
        fetcher_count: Optional[int] = None,
        max_depth: Optional[int] = None,
        verbose: Optional[bool] = None,
        politeness_delay: Optional[float] = None,
        grace_interval: Optional[float] = None,
        poll_interval: Optional[float] = None,
        quiescence: Optional[str] = None,
    ):
        self.root_url = parse_root_url(root_url)
        self.domain = host_of(self.root_url)
        self.http_service = http_service or HttpService(config.USER_AGENT, timeout=config.HTTP_TIMEOUT)
        self.link_extractor = link_extractor or LinkExtractor()

        self.fetcher_count = fetcher_count if fetcher_count is not None else config.FETCHER_COUNT
        self.max_depth = max_depth if max_depth is not None else config.DEFAULT_DEPTH
        self.verbose = verbose if verbose is not None else config.VERBOSE
        self.politeness_delay = politeness_delay if politeness_delay is not None else config.CRAWL_DELAY
        self.grace_interval = grace_interval if grace_interval is not None else config.GRACE_INTERVAL
        self.poll_interval = poll_interval if poll_interval is not None else config.POLL_INTERVAL
        self.quiescence = quiescence or config.QUIESCENCE

        self.visited = VisitedTracker()
        self.result: Optional[CrawlResult] = None
        self._context: Optional[CrawlContext] = None

    def build_config(self) -> CrawlConfig:
        """Freeze the current settings into the config of one run."""
        return CrawlConfig(
            domain=self.domain,
            root_url=self.root_url,
            fetcher_count=self.fetcher_count,
            max_depth=self.max_depth,
            politeness_delay=self.politeness_delay,
            verbose=self.verbose,
            grace_interval=self.grace_interval,
            poll_interval=self.poll_interval,
            quiescence=self.quiescence,
        )

    def start(self, stop_event: Optional[threading.Event] = None) -> None:
        """Crawl to completion. Blocks until the coordinator stops and all workers exit.

        `stop_event`, if given, becomes the run's shutdown flag so the caller
        can cancel the crawl from another thread.
        """
        crawl_config = self.build_config()
        context = CrawlContext(crawl_config, shutdown=stop_event)
        self.visited = VisitedTracker()
        self._context = context

        crawl_policy = CrawlPolicy(crawl_config.domain, crawl_config.max_depth, crawl_config.verbose)
        link_processor = LinkProcessor(self.link_extractor, crawl_config.domain)
        coordinator = Coordinator(context=context, visited=self.visited, crawl_policy=crawl_policy)

        logger.info(
            "Starting crawl of %s (fetchers=%s, max_depth=%s, delay=%ss)",
            crawl_config.root_url,
            crawl_config.fetcher_count,
            crawl_config.max_depth,
            crawl_config.politeness_delay,
        )
        coordinator.submit_root()

        workers: List[CrawlWorker] = [
            CrawlWorker(
                context=context,
                fetcher=self.http_service,
                link_processor=link_processor,
                crawl_policy=crawl_policy,
                name=f"CrawlWorker-{i}",
            )
            for i in range(crawl_config.fetcher_count)
        ]
        for worker in workers:
            worker.start()

        try:
            self.result = coordinator.process_loop()
        finally:
            context.shutdown.set()
            context.close_queues()
            # A worker mid-fetch finishes that fetch before it sees the flag.
            for worker in workers:
                worker.join()
            self._context = None

        logger.info(
            "Crawl of %s finished: %s pages visited, %s dispatched (%s)",
            crawl_config.domain,
            self.result.pages_visited,
            self.result.tasks_dispatched,
            self.result.stop_reason,
        )

    def stop(self) -> None:
        """Ask a running crawl to stop at the next loop boundary."""
        if self._context is not None:
            self._context.shutdown.set()
