"""Parsing of single-range HTTP ``Range`` headers.

Only the ``bytes`` unit is understood. When a header lists several ranges the
first one is served and the rest are ignored, since multipart/byteranges
responses are not produced. Supported forms for that first range::

    bytes=500-999   explicit window
    bytes=500-      from 500 to the last byte
    bytes=-500      the last 500 bytes
"""

from __future__ import annotations

from .exceptions import MalformedRangeError, RangeNotSatisfiableError
from .models import ByteRange

RANGE_UNIT = "bytes"


def _parse_offset(raw: str, header: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise MalformedRangeError(f"invalid range offset in {header!r}")
    return int(raw)


def parse_range_header(header: str, size: int) -> ByteRange:
    """Return the validated window requested by ``header`` for content of ``size`` bytes.

    Raises :class:`MalformedRangeError` for syntactically invalid headers and
    :class:`RangeNotSatisfiableError` for windows outside ``[0, size)``.
    """
    unit, sep, range_set = header.strip().partition("=")
    if not sep or unit.strip().lower() != RANGE_UNIT:
        raise MalformedRangeError(f"unsupported range header {header!r}")

    first = range_set.split(",", 1)[0].strip()
    start_raw, dash, end_raw = first.partition("-")
    if not dash:
        raise MalformedRangeError(f"range without '-' in {header!r}")
    start_raw, end_raw = start_raw.strip(), end_raw.strip()

    if not start_raw:
        # suffix form
        suffix = _parse_offset(end_raw, header)
        if suffix == 0 or size == 0:
            raise RangeNotSatisfiableError(f"range {first!r} not satisfiable", size)
        start, end = max(size - suffix, 0), size - 1
    else:
        start = _parse_offset(start_raw, header)
        end = _parse_offset(end_raw, header) if end_raw else size - 1

    if start >= size or end >= size or start > end:
        raise RangeNotSatisfiableError(f"range {first!r} not satisfiable for {size} bytes", size)
    return ByteRange(start, end)
