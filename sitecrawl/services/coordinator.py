import logging
import queue
from typing import Callable, Optional

from sitecrawl.domain.config import QUIESCENCE_GRACE
from sitecrawl.domain.crawl_result import (
    STOP_CANCELLED,
    STOP_DISPATCH_CLOSED,
    STOP_QUIESCENT,
    CrawlResult,
)
from sitecrawl.domain.crawl_task import CrawlTask
from sitecrawl.domain.visited_tracker import VisitedTracker
from sitecrawl.exceptions import QueueClosedError
from sitecrawl.services.crawl_context import CrawlContext
from sitecrawl.services.crawl_policy import CrawlPolicy
from sitecrawl.utils.url import canonicalize

logger = logging.getLogger(__name__)


class Coordinator:
    """Single owner of crawl state.

    Reads discoveries, decides which ones are new, in-domain and shallow
    enough, and hands those to the workers. It is also the only component
    that decides the crawl is over. Everything here runs on one thread, so
    the visited set is never locked.
    """

    def __init__(
        self,
        *,
        context: CrawlContext,
        visited: VisitedTracker,
        crawl_policy: Optional[CrawlPolicy] = None,
        sleep: Optional[Callable[[float], object]] = None,
    ):
        self.context = context
        self.config = context.config
        self.visited = visited
        self.crawl_policy = crawl_policy or CrawlPolicy(self.config.domain, self.config.max_depth, self.config.verbose)
        # Waiting on the shutdown flag lets a stop request cut a delay short.
        self._sleep = sleep or context.shutdown.wait
        self._root_submitted = False
        self._dispatched = 0
        self._stop_reason: Optional[str] = None

    def _log(self, msg: str, *args) -> None:
        logger.log(logging.INFO if self.config.verbose else logging.DEBUG, msg, *args)

    def _stop(self, reason: str) -> None:
        self._stop_reason = reason
        self.context.shutdown.set()

    def submit_root(self) -> None:
        """Seed the discovery queue with the root URL at depth 0."""
        if self._root_submitted:
            raise RuntimeError("root already submitted")
        self.context.discovery.put(CrawlTask(0, self.config.root_url))
        self._root_submitted = True

    def process_loop(self) -> CrawlResult:
        """Run until quiescence, a closed dispatch queue, or an external stop."""
        try:
            while not self.context.is_stopped():
                try:
                    task = self.context.discovery.get_nowait()
                except queue.Empty:
                    self._check_quiescence()
                    continue
                except QueueClosedError:
                    logger.info("Discovery queue closed. Shutting down.")
                    self._stop(STOP_CANCELLED)
                    break
                self.handle(task)
        finally:
            self.context.close_queues()

        reason = self._stop_reason or STOP_CANCELLED
        if reason == STOP_CANCELLED:
            logger.info("Crawl of %s cancelled", self.config.domain)
        return CrawlResult(pages_visited=len(self.visited), tasks_dispatched=self._dispatched, stop_reason=reason)

    def handle(self, task: CrawlTask) -> bool:
        """Vet one discovery. Returns True if it was dispatched to a worker."""
        if self.crawl_policy.should_skip_due_to_domain(task.url):
            return False

        key = canonicalize(task.url)
        if not self.visited.mark_if_new(key):
            logger.debug("Already visited %s", task.url)
            return False
        self._log("Visiting: %s %s", task.depth, task.url)

        if self.crawl_policy.should_skip_due_to_depth(task.depth):
            return False

        self.context.in_flight.begin()
        try:
            self.context.dispatch.put(task)
        except QueueClosedError as e:
            self.context.in_flight.done()
            logger.warning("Error sending to worker queue: %s. Quitting.", e)
            self._stop(STOP_DISPATCH_CLOSED)
            return False

        self._dispatched += 1
        # Intentionally slowing down to keep the request rate polite.
        self._sleep(self.config.politeness_delay)
        return True

    def _check_quiescence(self) -> None:
        if self.config.quiescence == QUIESCENCE_GRACE:
            self._check_quiescence_after_grace()
        else:
            self._check_quiescence_in_flight()

    def _check_quiescence_in_flight(self) -> None:
        # Counter first: once it reads zero, every discovery of every finished
        # task is already queued, so an empty discovery queue afterwards is final.
        if self.context.in_flight.is_idle() and self.context.discovery.empty():
            logger.info("No more work to do. Shutting down.")
            self._stop(STOP_QUIESCENT)
            return
        self._sleep(self.config.poll_interval)

    def _check_quiescence_after_grace(self) -> None:
        # Workers might still be busy; give them a chance to report back.
        # A worker still mid-fetch after the grace interval is missed.
        self._sleep(self.config.grace_interval)
        if self.context.discovery.empty() and self.context.dispatch.empty():
            logger.info("No more work to do. Shutting down.")
            self._stop(STOP_QUIESCENT)
