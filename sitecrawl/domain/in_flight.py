import threading


class InFlightCounter:
    """Counts dispatched tasks that a worker has not finished yet.

    A task counts as finished only after every discovery it produced is on
    the discovery queue, so zero in-flight tasks plus an empty discovery
    queue means no work is left anywhere.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._count = 0

    def begin(self) -> None:
        with self._lock:
            self._count += 1

    def done(self) -> None:
        with self._lock:
            if self._count == 0:
                raise RuntimeError("done() called more times than begin()")
            self._count -= 1

    def is_idle(self) -> bool:
        with self._lock:
            return self._count == 0

    @property
    def count(self) -> int:
        with self._lock:
            return self._count
