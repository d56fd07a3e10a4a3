"""Custom exceptions for SiteCrawl."""


class CrawlerUrlError(ValueError):
    """Raised when the root URL of a crawl cannot be used."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid root URL {url!r}: {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class QueueClosedError(Exception):
    """Raised when sending to, or receiving from, a queue whose other side is gone."""

    def __init__(self, queue_name: str):
        self.queue_name = queue_name
        super().__init__(f"Queue '{queue_name}' is closed")
