"""Pydantic response schemas for the REST API.

Ride rows are serialised with the camelCase keys of the ``Rides`` table.
Request bodies are taken as plain JSON objects and checked by
``src.domain.validation`` so that every rejection uses the same error
envelope.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.entities import Ride


class RideResponse(BaseModel):
    ride_id: int = Field(..., alias="rideID", examples=[1242])
    start_lat: float = Field(..., alias="startLat", examples=[45])
    start_long: float = Field(..., alias="startLong", examples=[37])
    end_lat: float = Field(..., alias="endLat", examples=[29])
    end_long: float = Field(..., alias="endLong", examples=[57])
    rider_name: str = Field(..., alias="riderName", examples=["Ryon Zhang"])
    driver_name: str = Field(..., alias="driverName", examples=["Paul Ryon"])
    driver_vehicle: str = Field(
        ..., alias="driverVehicle", examples=["Volks Wagen"]
    )
    created_at: Optional[datetime] = Field(None, alias="created")

    @classmethod
    def from_entity(cls, ride: Ride) -> "RideResponse":
        return cls(
            rideID=ride.id,
            startLat=ride.start_lat,
            startLong=ride.start_long,
            endLat=ride.end_lat,
            endLong=ride.end_long,
            riderName=ride.rider_name,
            driverName=ride.driver_name,
            driverVehicle=ride.driver_vehicle,
            created=ride.created_at,
        )


class ErrorResponse(BaseModel):
    error_code: str
    message: str
