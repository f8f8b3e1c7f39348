"""Origin header parsing."""

from typing import Optional
from urllib.parse import urlsplit


class InvalidOriginError(ValueError):
    """Raised when an Origin value has no usable host component."""


def extract_origin_host(origin: Optional[str]) -> str:
    """
    Extract the host component of an Origin header value.

    Scheme, userinfo and port are discarded. Case is preserved because
    whitelist matching is case-sensitive.

    Args:
        origin: Raw Origin header value, e.g. "http://example.com:8080"

    Returns:
        The hostname, e.g. "example.com" (IPv6 literals keep their brackets)

    Raises:
        InvalidOriginError: If the value cannot be parsed as scheme://authority
    """
    if not origin:
        raise InvalidOriginError("empty origin")

    try:
        parts = urlsplit(origin)
        # Accessing .port validates the port component
        parts.port
    except ValueError as e:
        raise InvalidOriginError(f"unparseable origin {origin!r}: {e}") from e

    if not parts.scheme or not parts.netloc:
        raise InvalidOriginError(f"origin {origin!r} has no scheme or authority")

    authority = parts.netloc.rpartition("@")[2]
    if authority.startswith("["):
        host = authority[:authority.find("]") + 1]
    else:
        host = authority.partition(":")[0]

    if not host:
        raise InvalidOriginError(f"origin {origin!r} has no host")
    return host
