"""Method-level markers other than the HTTP verb itself."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from retromark.markers.base import MethodMarker

logger = logging.getLogger(__name__)


def parse_header_lines(lines: Iterable[str]) -> tuple[tuple[str, str], ...]:
    """
    "Name: value" lines -> ((name, value), ...)

    Splits on the first colon and trims both sides. A repeated name keeps its
    first position and its last value. Lines without a colon are dropped.
    """
    parsed: dict[str, str] = {}
    for line in lines:
        name, sep, value = line.partition(":")
        if not sep:
            logger.debug("Dropping header line without ':' separator: %r", line)
            continue
        parsed[name.strip()] = value.strip()
    return tuple(parsed.items())


class Headers(MethodMarker):
    """Static headers sent with every call of the decorated method."""

    pairs: tuple[tuple[str, str], ...] = ()

    def __init__(self, *lines: str, **data: Any) -> None:
        if lines:
            data["pairs"] = parse_header_lines(lines)
        super().__init__(**data)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self.pairs)


class Timeout(MethodMarker):
    seconds: int

    def __init__(self, seconds: int, **data: Any) -> None:
        super().__init__(seconds=seconds, **data)


class Cacheable(MethodMarker):
    """Declares the response cacheable for `ttl` seconds. Caching itself happens elsewhere."""

    ttl: int = 60

    def __init__(self, ttl: int = 60, **data: Any) -> None:
        super().__init__(ttl=ttl, **data)


class Streaming(MethodMarker):
    """The response body is handed back as a stream instead of being converted."""


class FormUrlEncoded(MethodMarker):
    pass


class Multipart(MethodMarker):
    pass


class ResponseType(MethodMarker):
    type: Any
    is_array: bool = False

    def __init__(self, type: Any, is_array: bool = False, **data: Any) -> None:
        super().__init__(type=type, is_array=is_array, **data)
