import logging
import queue
import threading
from typing import Optional

from sitecrawl.domain.crawl_task import CrawlTask
from sitecrawl.exceptions import QueueClosedError

logger = logging.getLogger(__name__)

# Placed on the underlying queue by close(); every receiver that takes it puts
# it back so the other blocked receivers wake up too.
_CLOSED = object()


class CrawlQueue:
    """Unbounded FIFO of `CrawlTask`s that can be closed.

    Wraps `queue.Queue` with the disconnect semantics the crawl needs:
    sending to a closed queue raises `QueueClosedError`, and receivers blocked
    in `get()` wake up once the queue is closed and drained. A queue also
    closes itself when the last registered receiver releases it.
    """

    def __init__(self, name: str):
        self.name = name
        self._queue: "queue.Queue" = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._receivers = 0

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def put(self, task: CrawlTask) -> None:
        with self._lock:
            if self._closed:
                raise QueueClosedError(self.name)
            self._queue.put(task)

    def get(self, timeout: Optional[float] = None) -> CrawlTask:
        """Blocking receive.

        Raises `queue.Empty` if `timeout` elapses, `QueueClosedError` once the
        queue is closed and every task sent before the close was received.
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise QueueClosedError(self.name)
        return item

    def get_nowait(self) -> CrawlTask:
        """Non-blocking receive; raises `queue.Empty` when nothing is waiting."""
        item = self._queue.get_nowait()
        if item is _CLOSED:
            self._queue.put(_CLOSED)
            raise QueueClosedError(self.name)
        return item

    def empty(self) -> bool:
        return self._queue.empty()

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)
        logger.debug("Queue %s closed", self.name)

    def register_receiver(self) -> None:
        with self._lock:
            self._receivers += 1

    def release_receiver(self) -> None:
        with self._lock:
            self._receivers -= 1
            last = self._receivers <= 0
        if last:
            logger.debug("Last receiver of %s gone", self.name)
            self.close()
