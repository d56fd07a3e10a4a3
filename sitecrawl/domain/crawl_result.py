"""Crawl result data model."""
from typing import NamedTuple

STOP_QUIESCENT = "quiescent"
STOP_DISPATCH_CLOSED = "dispatch_closed"
STOP_CANCELLED = "cancelled"


class CrawlResult(NamedTuple):
    """Summary of a finished crawl.

    The visited set itself stays on the crawler; this only carries counters
    and the reason the coordinator stopped.
    """
    pages_visited: int
    """Number of canonical pages approved (marked visited)"""

    tasks_dispatched: int
    """Number of tasks handed to workers for fetching"""

    stop_reason: str
    """Why the coordinator stopped: quiescent, dispatch_closed or cancelled"""
