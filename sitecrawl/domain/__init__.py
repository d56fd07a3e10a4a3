"""Domain objects for SiteCrawl - explicit re-exports to satisfy linters."""
from .crawl_task import CrawlTask as CrawlTask
from .config import CrawlConfig as CrawlConfig
from .crawl_result import CrawlResult as CrawlResult
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["CrawlTask", "CrawlConfig", "CrawlResult", "VisitedTracker"]
