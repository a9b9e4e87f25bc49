"""
Repository Pattern -- abstracts DB access so the service stays DB-agnostic.

``RideRepository`` receives an ``AsyncSession`` (unit-of-work) and exposes
the three queries the service needs.  All values are passed as bound
parameters.  Engine failures and timeouts are logged here and surface to
callers only as ``ServerError``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .models import RideModel
from src.config import settings
from src.domain.entities import Ride, RideFields
from src.domain.errors import ServerError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_entity(row: RideModel) -> Ride:
    return Ride(
        id=row.id,
        start_lat=row.start_lat,
        start_long=row.start_long,
        end_lat=row.end_lat,
        end_long=row.end_long,
        rider_name=row.rider_name,
        driver_name=row.driver_name,
        driver_vehicle=row.driver_vehicle,
        created_at=row.created_at,
    )


class RideRepository:
    def __init__(
        self, session: AsyncSession, timeout: Optional[float] = None
    ):
        self.session = session
        self.timeout = (
            settings.store_timeout_seconds if timeout is None else timeout
        )

    async def _run(self, op: str, awaitable: Awaitable[T]) -> T:
        """Await a store call under the timeout, classifying failures."""
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Store %s timed out after %.1fs", op, self.timeout)
            raise ServerError() from exc
        except (SQLAlchemyError, OSError, OverflowError, ValueError) as exc:
            logger.exception("Store %s failed", op)
            raise ServerError() from exc

    async def insert(self, fields: RideFields) -> int:
        """Insert one ride and return its generated ``rideID``."""
        ride = RideModel(**fields._asdict())
        self.session.add(ride)
        await self._run("insert", self.session.flush())
        return ride.id

    async def fetch_by_id(self, ride_id: int) -> list[Ride]:
        query = (
            select(RideModel)
            .where(RideModel.id == ride_id)
            .execution_options(populate_existing=True)
        )
        result = await self._run("fetch_by_id", self.session.execute(query))
        return [to_entity(r) for r in result.scalars().all()]

    async def fetch_page(self, limit: int, offset: int) -> list[Ride]:
        query = (
            select(RideModel)
            .order_by(RideModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._run("fetch_page", self.session.execute(query))
        return [to_entity(r) for r in result.scalars().all()]
