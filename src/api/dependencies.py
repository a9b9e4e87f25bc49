"""FastAPI dependency injection helpers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database import async_session_factory
from src.infrastructure.repositories import RideRepository
from src.services.rides import RideService


async def get_db() -> AsyncSession:  # type: ignore[misc]
    """Yield an async DB session; commit on success, rollback on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_ride_service(
    db: AsyncSession = Depends(get_db),
) -> RideService:
    return RideService(RideRepository(db))
