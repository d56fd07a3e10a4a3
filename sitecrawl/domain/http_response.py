from typing import NamedTuple, Optional


class ProbeResponse(NamedTuple):
    """Metadata returned by a HEAD probe."""
    status_code: int
    content_type: Optional[str] = None


class HttpResponse(NamedTuple):
    """Response from HTTP fetch operation."""
    status_code: int
    text: str
    content_type: Optional[str] = None
