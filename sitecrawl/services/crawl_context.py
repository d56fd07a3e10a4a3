import threading
from typing import Optional

from sitecrawl.domain.config import CrawlConfig
from sitecrawl.domain.in_flight import InFlightCounter
from sitecrawl.services.crawl_queue import CrawlQueue


class CrawlContext:
    """Everything the coordinator and the workers share for one crawl run."""

    def __init__(self, config: CrawlConfig, shutdown: Optional[threading.Event] = None):
        self.config = config
        # workers -> coordinator
        self.discovery = CrawlQueue("discovery")
        # coordinator -> workers
        self.dispatch = CrawlQueue("dispatch")
        self.shutdown = shutdown if shutdown is not None else threading.Event()
        self.in_flight = InFlightCounter()

    def is_stopped(self) -> bool:
        return self.shutdown.is_set()

    def close_queues(self) -> None:
        self.dispatch.close()
        self.discovery.close()
