from dataclasses import dataclass, fields
from typing import Optional

from sitecrawl.domain.config import QUIESCENCE_MODES


@dataclass(frozen=True)
class CrawlOptions:
    """Crawl settings read from a YAML file. Unset fields keep the crawler's defaults."""

    root_url: Optional[str] = None
    fetcher_count: Optional[int] = None
    max_depth: Optional[int] = None
    politeness_delay: Optional[float] = None
    verbose: Optional[bool] = None
    quiescence: Optional[str] = None
    grace_interval: Optional[float] = None

    def crawler_kwargs(self) -> dict:
        """Keyword arguments for `Crawler`, without root_url and unset values."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "root_url" and getattr(self, f.name) is not None
        }


class CrawlConfigParser:
    """Parse a YAML dict into `CrawlOptions`.

    Responsibility: schema/validation for YAML option files.
    It does NOT perform filesystem IO.
    """

    def parse(self, data: dict) -> CrawlOptions:
        if not isinstance(data, dict):
            raise ValueError("crawl options must be a mapping")

        unknown = set(data) - {"root_url", "fetchers", "max_depth", "delay_seconds", "verbose", "quiescence", "grace_seconds"}
        if unknown:
            raise ValueError(f"Unknown crawl option(s): {', '.join(sorted(unknown))}")

        quiescence = data.get("quiescence")
        if quiescence is not None:
            quiescence = str(quiescence).strip().lower()
            if quiescence not in QUIESCENCE_MODES:
                raise ValueError(f"Unknown quiescence mode: {quiescence!r}")

        return CrawlOptions(
            root_url=self._optional(data, "root_url", str),
            fetcher_count=self._optional(data, "fetchers", int),
            max_depth=self._optional(data, "max_depth", int),
            politeness_delay=self._optional(data, "delay_seconds", float),
            verbose=self._optional(data, "verbose", bool),
            quiescence=quiescence,
            grace_interval=self._optional(data, "grace_seconds", float),
        )

    def _optional(self, data: dict, key: str, kind: type):
        value = data.get(key)
        if value is None:
            return None
        if kind is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if kind is int and isinstance(value, bool):
            raise ValueError(f"{key} must be an integer")
        if not isinstance(value, kind):
            raise ValueError(f"{key} must be of type {kind.__name__}, got {type(value).__name__}")
        return value
