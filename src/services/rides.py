"""
Ride service
============

Orchestrates validation, pagination and the record store for the three
ride operations.  The store is injected at construction; the service
never catches store failures, they propagate to the HTTP boundary.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, Union

from src.config import settings
from src.domain.entities import MAX_DB_INT, Ride, RideFields
from src.domain.errors import NotFoundError, ServerError
from src.domain.pagination import resolve_page
from src.domain.validation import validate_ride

logger = logging.getLogger(__name__)


class RideStore(Protocol):
    async def insert(self, fields: RideFields) -> int: ...

    async def fetch_by_id(self, ride_id: int) -> list[Ride]: ...

    async def fetch_page(self, limit: int, offset: int) -> list[Ride]: ...


class RideService:
    def __init__(self, store: RideStore):
        self.store = store

    async def create_ride(self, payload: Mapping[str, Any]) -> list[Ride]:
        """Validate and insert a ride, returning the row read back by id."""
        fields = validate_ride(payload)
        ride_id = await self.store.insert(fields)
        rides = await self.store.fetch_by_id(ride_id)
        if not rides:
            # The row we just wrote is unreadable: a storage fault
            logger.error("Ride %s not readable after insert", ride_id)
            raise ServerError()
        logger.info("Created ride %s", ride_id)
        return rides

    async def list_rides(
        self,
        page: Union[str, int, None] = None,
        limit: Union[str, int, None] = None,
    ) -> list[Ride]:
        window = resolve_page(
            page,
            limit,
            default_limit=settings.default_page_limit,
            max_limit=settings.max_page_limit,
        )
        rides = await self.store.fetch_page(window.limit, window.offset)
        if not rides:
            raise NotFoundError()
        return rides

    async def get_ride(self, ride_id: Union[str, int]) -> list[Ride]:
        parsed = _parse_id(ride_id)
        if parsed is None:
            raise NotFoundError()
        rides = await self.store.fetch_by_id(parsed)
        if not rides:
            raise NotFoundError()
        return rides


def _parse_id(value: Union[str, int]) -> Optional[int]:
    """Return *value* as a storable id, or ``None`` if no row can have it."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError:
            return None
    if not -MAX_DB_INT - 1 <= parsed <= MAX_DB_INT:
        return None
    return parsed
