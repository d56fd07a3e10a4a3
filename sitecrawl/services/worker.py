import logging
import threading

from sitecrawl.domain.crawl_task import CrawlTask
from sitecrawl.exceptions import HttpFetchError, QueueClosedError
from sitecrawl.services.crawl_context import CrawlContext
from sitecrawl.services.crawl_policy import CrawlPolicy
from sitecrawl.services.link_processor import LinkProcessor
from sitecrawl.services.protocols import Fetcher
from sitecrawl.utils.content_type import is_html

logger = logging.getLogger(__name__)


class CrawlWorker(threading.Thread):
    """Fetcher thread.

    Takes approved tasks off the dispatch queue, fetches HTML pages and
    reports their same-domain links back to the coordinator. Never touches
    the visited set and never retries.
    """

    def __init__(
        self,
        *,
        context: CrawlContext,
        fetcher: Fetcher,
        link_processor: LinkProcessor,
        crawl_policy: CrawlPolicy,
        name: str = "CrawlWorker",
    ):
        super().__init__(name=name, daemon=True)
        self.context = context
        self.fetcher = fetcher
        self.link_processor = link_processor
        self.crawl_policy = crawl_policy
        self.pages_fetched = 0
        self._coordinator_gone = False
        context.dispatch.register_receiver()

    def run(self):
        logger.debug("%s started", self.name)
        try:
            while not self._coordinator_gone:
                try:
                    task = self.context.dispatch.get()
                except QueueClosedError:
                    break
                try:
                    if self.context.is_stopped():
                        logger.debug("%s shutting down.", self.name)
                        break
                    self.process(task)
                except Exception as e:
                    logger.error("Error processing %s: %s", task.url, e, exc_info=True)
                finally:
                    self.context.in_flight.done()
        finally:
            self.context.dispatch.release_receiver()
            logger.debug("%s stopped", self.name)

    def process(self, task: CrawlTask) -> int:
        """Fetch one task and enqueue its discoveries. Returns how many were sent."""
        if self.crawl_policy.should_skip_due_to_depth(task.depth):
            return 0

        try:
            probe = self.fetcher.probe(task.url)
        except HttpFetchError as e:
            logger.warning("Error in getting head of %s: %s", task.url, e)
            return 0

        if not is_html(probe.content_type):
            logger.debug("Not HTML (%s), not expanding %s", probe.content_type, task.url)
            return 0

        try:
            response = self.fetcher.fetch(task.url)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", task.url, e)
            return 0
        self.pages_fetched += 1

        sent = 0
        for child in self.link_processor.process(task, response.text):
            try:
                self.context.discovery.put(child)
                sent += 1
            except QueueClosedError as e:
                if not self._coordinator_gone:
                    logger.warning("Error sending to coordinator: %s", e)
                self._coordinator_gone = True
        logger.debug("%s found %s links on %s", self.name, sent, task.url)
        return sent
