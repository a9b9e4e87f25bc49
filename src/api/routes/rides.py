"""
Ride endpoints
==============

POST /rides          -- validate and record a ride
GET  /rides          -- list rides a page at a time (``page``, ``limit``)
GET  /rides/{ride_id} -- fetch the rides recorded under an id

All three answer with a JSON array of rows.  Failures are raised as
``RideError`` and rendered by the handlers in ``src.api.errors``.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request

from src.api.dependencies import get_ride_service
from src.api.middleware import current_rate_limit, limiter
from src.api.schemas import ErrorResponse, RideResponse
from src.services.rides import RideService

router = APIRouter(prefix="/rides", tags=["rides"])

_ERROR_RESPONSES = {
    500: {
        "model": ErrorResponse,
        "description": "Validation, not-found or storage failure.",
    }
}


@router.post(
    "",
    response_model=list[RideResponse],
    summary="Insert a record of ride information",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(current_rate_limit)
async def create_ride(
    request: Request,
    payload: Optional[dict[str, Any]] = Body(None),
    service: RideService = Depends(get_ride_service),
):
    rides = await service.create_ride(payload or {})
    return [RideResponse.from_entity(r) for r in rides]


@router.get(
    "",
    response_model=list[RideResponse],
    summary="List rides by page",
    description=(
        "Returns ``limit`` rides (default 5) from page ``page`` "
        "(default 1).  E.g. records 21-30 are ``limit=10&page=3``."
    ),
    responses=_ERROR_RESPONSES,
)
@limiter.limit(current_rate_limit)
async def list_rides(
    request: Request,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    service: RideService = Depends(get_ride_service),
):
    rides = await service.list_rides(page=page, limit=limit)
    return [RideResponse.from_entity(r) for r in rides]


@router.get(
    "/{ride_id}",
    response_model=list[RideResponse],
    summary="Get the ride recorded under an id",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(current_rate_limit)
async def get_ride(
    request: Request,
    ride_id: str,
    service: RideService = Depends(get_ride_service),
):
    rides = await service.get_ride(ride_id)
    return [RideResponse.from_entity(r) for r in rides]
