"""URL helpers for channel images and episode enclosures.

All functions are pure string operations. Nothing here touches the network.
"""

import re
from urllib.parse import quote, urljoin, urlparse

_ABSOLUTE_HTTP = re.compile(r"^https?:", re.IGNORECASE)


def is_absolute_url(url: str) -> bool:
    """Check whether a URL already starts with an http(s) scheme."""
    return bool(_ABSOLUTE_HTTP.match(url))


def is_valid_base_url(url: str) -> bool:
    """Check that a URL has both a scheme and a host."""
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


def resolve_url(base: str, reference: str) -> str:
    """Resolve a reference against a base URL.

    Absolute http(s) references are returned unchanged.

    Example:
        >>> resolve_url("http://example.com/podcast/", "art.png")
        'http://example.com/podcast/art.png'
    """
    if is_absolute_url(reference):
        return reference
    return urljoin(base, reference)


def enclosure_url(base: str, file_name: str) -> str:
    """Build the public URL of an episode file.

    The file name is percent-encoded before being resolved against the
    enclosures base URL, so spaces and reserved characters survive.

    Example:
        >>> enclosure_url("http://cdn.example.com/eps/", "ep 1.mp3")
        'http://cdn.example.com/eps/ep%201.mp3'
    """
    return urljoin(base, quote(file_name))
