from __future__ import annotations

import logging
from typing import Optional

from ..errors import InvalidBoundary, InvalidRange
from ..logging_utils import log_event

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def byte_length(text: str) -> int:
    return len(text.encode(ENCODING))


def char_to_byte(text: str, count: int) -> int:
    """Byte offset just past the first ``count`` characters of ``text``."""
    if count <= 0:
        return 0
    return byte_length(text[:count])


def _is_continuation(data: bytes, offset: int) -> bool:
    return offset < len(data) and (data[offset] & 0xC0) == 0x80


def resolve_byte_range(
    text: str, start: Optional[int] = None, end: Optional[int] = None
) -> tuple[int, int]:
    """Resolve an optionally-open half-open byte interval over ``text``.

    Raises InvalidRange for a bound outside ``[0, len]`` or a reversed
    interval, and InvalidBoundary for a bound inside a multi-byte character.
    The start bound is checked before the end bound.
    """
    data = text.encode(ENCODING)
    length = len(data)
    lo = 0 if start is None else start
    hi = length if end is None else end
    for offset in (lo, hi):
        if offset < 0 or offset > length:
            log_event(
                logger,
                logging.DEBUG,
                "stylish.slice.rejected",
                reason="range",
                offset=offset,
                length=length,
            )
            raise InvalidRange(
                f"byte offset {offset} outside [0, {length}]",
                offset=offset,
                length=length,
            )
        if _is_continuation(data, offset):
            log_event(
                logger,
                logging.DEBUG,
                "stylish.slice.rejected",
                reason="boundary",
                offset=offset,
                length=length,
            )
            raise InvalidBoundary(
                f"byte offset {offset} is not on a character boundary",
                offset=offset,
                length=length,
            )
    if lo > hi:
        raise InvalidRange(
            f"slice start {lo} is past slice end {hi}", offset=lo, length=length
        )
    return lo, hi


def slice_bytes(text: str, start: int, end: int) -> str:
    """Cut already-resolved byte offsets out of ``text``."""
    return text.encode(ENCODING)[start:end].decode(ENCODING)


def byte_to_char(text: str, offset: int) -> int:
    """Character index of an already-resolved byte offset."""
    return len(text.encode(ENCODING)[:offset].decode(ENCODING))
