"""Page / limit / offset arithmetic for listing rides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .entities import MAX_DB_INT
from .errors import ValidationError

LIMIT_MESSAGE = "Limit must be a positive integer"

RawParam = Union[str, int, None]


@dataclass(frozen=True)
class Page:
    page: int
    limit: int
    offset: int


def _parse_int(value: RawParam) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def resolve_page(
    page: RawParam,
    limit: RawParam,
    *,
    default_limit: int = 5,
    max_limit: int = 100,
) -> Page:
    """Resolve raw query parameters into a ``Page``.

    ``page`` falls back to 1 when absent, malformed or below 1.  ``limit``
    falls back to *default_limit* only when absent; a present limit must
    be a positive integer and is clamped to *max_limit*.  ``page`` is
    clamped so the offset stays within a 64-bit INTEGER.
    """
    page_no = _parse_int(page)
    if page_no is None or page_no < 1:
        page_no = 1

    if limit is None or (isinstance(limit, str) and not limit.strip()):
        size = default_limit
    else:
        size = _parse_int(limit)
        if size is None or size < 1:
            raise ValidationError(LIMIT_MESSAGE)
        size = min(size, max_limit)

    page_no = min(page_no, MAX_DB_INT // size + 1)

    return Page(page=page_no, limit=size, offset=(page_no - 1) * size)
