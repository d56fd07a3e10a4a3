from __future__ import annotations

from dataclasses import dataclass

QUIESCENCE_IN_FLIGHT = "in_flight"
QUIESCENCE_GRACE = "grace"
QUIESCENCE_MODES = (QUIESCENCE_IN_FLIGHT, QUIESCENCE_GRACE)


@dataclass(frozen=True)
class CrawlConfig:
    """Settings for one crawl run.

    Built by `Crawler.start()` from the crawler's mutable fields and shared,
    read-only, by the coordinator and every worker.
    """

    domain: str
    root_url: str
    fetcher_count: int = 2
    max_depth: int = 2
    politeness_delay: float = 0.25
    verbose: bool = True
    grace_interval: float = 2.0
    poll_interval: float = 0.05
    quiescence: str = QUIESCENCE_IN_FLIGHT

    def __post_init__(self):
        if not self.domain:
            raise ValueError("domain is required")
        if not self.root_url:
            raise ValueError("root_url is required")
        if not isinstance(self.fetcher_count, int) or self.fetcher_count < 1:
            raise ValueError(f"fetcher_count must be a positive integer, got {self.fetcher_count!r}")
        if not isinstance(self.max_depth, int) or self.max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {self.max_depth!r}")
        if self.politeness_delay < 0:
            raise ValueError("politeness_delay must not be negative")
        if self.grace_interval < 0:
            raise ValueError("grace_interval must not be negative")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if self.quiescence not in QUIESCENCE_MODES:
            raise ValueError(f"Unknown quiescence mode: {self.quiescence!r}")
