from typing import Optional

HTML_MIME_TYPES = ("text/html", "application/xhtml+xml")


def mime_type(header: Optional[str]) -> Optional[str]:
    """Return the lower-cased media type of a Content-Type header, parameters dropped."""
    if not header:
        return None
    return header.split(";", 1)[0].strip().lower() or None


def is_html(content_type: Optional[str]) -> bool:
    return mime_type(content_type) in HTML_MIME_TYPES
