"""
Domain entities.

``RideFields`` is the validated, insert-ready payload; ``Ride`` is a
persisted row as handed out by the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional

# Largest value a signed 64-bit INTEGER column (ids, offsets) can hold
MAX_DB_INT = 2**63 - 1


class RideFields(NamedTuple):
    """Validated ride fields, in insertion order."""

    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str


@dataclass(frozen=True)
class Ride:
    id: int
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str
    created_at: Optional[datetime] = None

    @property
    def fields(self) -> RideFields:
        return RideFields(
            self.start_lat,
            self.start_long,
            self.end_lat,
            self.end_long,
            self.rider_name,
            self.driver_name,
            self.driver_vehicle,
        )
