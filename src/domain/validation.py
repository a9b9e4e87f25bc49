"""
Ride payload validation.

Checks run in a fixed order and the first failure wins:

1. start coordinates
2. end coordinates
3. rider name
4. driver name
5. driver vehicle

Coordinates are coerced to ``float``; anything that does not coerce
cleanly becomes NaN, which never satisfies a range check.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from .entities import RideFields
from .errors import ValidationError

# Plain decimal notation only: no "1_0", "nan", "inf" or hex
DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

LAT_RANGE = (-90.0, 90.0)
LONG_RANGE = (-180.0, 180.0)

START_COORDS_MESSAGE = (
    "Start latitude and longitude must be between -90 - 90 "
    "and -180 to 180 degrees respectively"
)
END_COORDS_MESSAGE = (
    "End latitude and longitude must be between -90 - 90 "
    "and -180 to 180 degrees respectively"
)
RIDER_NAME_MESSAGE = "Rider name must be a non empty string"
DRIVER_NAME_MESSAGE = "Driver name must be a non empty string"
DRIVER_VEHICLE_MESSAGE = "Driver Vehicle must be a non empty string"


def to_float(value: Any) -> float:
    """Coerce a wire value to ``float``; NaN when it is not numeric."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.nan
    if isinstance(value, str):
        text = value.strip()
        if not DECIMAL_RE.match(text):
            return math.nan
        # Huge exponents parse to inf and fail the range check
        return float(text)
    return math.nan


def _in_range(value: float, bounds: tuple[float, float]) -> bool:
    # NaN fails both comparisons
    return bounds[0] <= value <= bounds[1]


def coordinates_ok(lat: float, long: float) -> bool:
    return _in_range(lat, LAT_RANGE) and _in_range(long, LONG_RANGE)


def _non_empty(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def validate_ride(payload: Mapping[str, Any]) -> RideFields:
    """Validate *payload* and return insert-ready fields.

    Raises ``ValidationError`` naming the first rule violated.
    """
    start_lat = to_float(payload.get("start_lat"))
    start_long = to_float(payload.get("start_long"))
    end_lat = to_float(payload.get("end_lat"))
    end_long = to_float(payload.get("end_long"))
    rider_name = payload.get("rider_name")
    driver_name = payload.get("driver_name")
    driver_vehicle = payload.get("driver_vehicle")

    if not coordinates_ok(start_lat, start_long):
        raise ValidationError(START_COORDS_MESSAGE)
    if not coordinates_ok(end_lat, end_long):
        raise ValidationError(END_COORDS_MESSAGE)
    if not _non_empty(rider_name):
        raise ValidationError(RIDER_NAME_MESSAGE)
    if not _non_empty(driver_name):
        raise ValidationError(DRIVER_NAME_MESSAGE)
    if not _non_empty(driver_vehicle):
        raise ValidationError(DRIVER_VEHICLE_MESSAGE)

    return RideFields(
        start_lat=start_lat,
        start_long=start_long,
        end_lat=end_lat,
        end_long=end_long,
        rider_name=rider_name,
        driver_name=driver_name,
        driver_vehicle=driver_vehicle,
    )
