from typing import Iterator, Set


class VisitedTracker:
    """
    Tracks which canonical URLs have been approved during a crawl.

    Owned by the coordinator thread alone, so it carries no lock. Entries are
    never removed: the set only grows for the lifetime of one crawl.
    """

    def __init__(self):
        self._visited: Set[str] = set()

    def mark_if_new(self, url: str) -> bool:
        """Mark `url` visited and return True, or return False if it already was."""
        if url in self._visited:
            return False
        self._visited.add(url)
        return True

    def urls(self) -> Set[str]:
        """Return a snapshot copy of the visited URLs."""
        return set(self._visited)

    def __contains__(self, url: object) -> bool:
        return url in self._visited

    def __iter__(self) -> Iterator[str]:
        return iter(self._visited)

    def __len__(self) -> int:
        return len(self._visited)
