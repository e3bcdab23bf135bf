"""URL and IP address converters."""

from __future__ import annotations

import ipaddress
from urllib.parse import ParseResult, SplitResult, urlparse, urlsplit

from ..errors import InvalidValueError


def parse_url(raw: str, target: type = SplitResult) -> SplitResult | ParseResult:
    """Parse ``raw`` as a URL of the same shape as ``target``.

    ``SplitResult`` targets go through ``urlsplit``, ``ParseResult`` targets
    through ``urlparse``. Control characters and malformed ports or IPv6
    hosts are rejected.
    """
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in raw):
        raise InvalidValueError("control character in URL")
    parse = urlparse if issubclass(target, ParseResult) else urlsplit
    try:
        value = parse(raw)
        # port is validated lazily by urllib
        _ = value.port
    except ValueError as exc:
        raise InvalidValueError("malformed URL") from exc
    return value


def parse_ip(raw: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Parse an IPv4 or IPv6 address literal."""
    try:
        return ipaddress.ip_address(raw)
    except ValueError as exc:
        raise InvalidValueError("not an IP address") from exc


__all__ = ["parse_url", "parse_ip"]
