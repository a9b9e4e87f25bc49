"""Unit tests for ride payload validation."""

import math

import pytest

from src.domain.entities import RideFields
from src.domain.errors import ValidationError
from src.domain.validation import (
    DRIVER_NAME_MESSAGE,
    DRIVER_VEHICLE_MESSAGE,
    END_COORDS_MESSAGE,
    RIDER_NAME_MESSAGE,
    START_COORDS_MESSAGE,
    to_float,
    validate_ride,
)

PAYLOAD = {
    "start_lat": 45,
    "start_long": 37,
    "end_lat": 29,
    "end_long": 57,
    "rider_name": "Ryon Zhang",
    "driver_name": "Paul Ryon",
    "driver_vehicle": "Volks Wagen",
}


def _message(**overrides) -> str:
    with pytest.raises(ValidationError) as info:
        validate_ride({**PAYLOAD, **overrides})
    assert info.value.error_code.value == "VALIDATION_ERROR"
    return info.value.message


class TestToFloat:
    def test_numbers(self):
        assert to_float(3) == 3.0
        assert to_float(-1.5) == -1.5

    def test_integer_too_large_for_float_is_nan(self):
        assert math.isnan(to_float(10**400))

    def test_numeric_string(self):
        assert to_float(" 12.25 ") == 12.25
        assert to_float("-.5") == -0.5
        assert to_float("1e1") == 10.0

    @pytest.mark.parametrize(
        "value",
        [None, "", "abc", True, [1], {"a": 1}, "1_0", "nan", "inf", "0x10", "1e5x"],
    )
    def test_non_numeric_is_nan(self, value):
        assert math.isnan(to_float(value))


class TestValidateRide:
    def test_valid_payload_returns_fields_in_order(self):
        fields = validate_ride(PAYLOAD)
        assert fields == RideFields(
            45.0, 37.0, 29.0, 57.0, "Ryon Zhang", "Paul Ryon", "Volks Wagen"
        )
        assert all(isinstance(v, float) for v in fields[:4])

    def test_boundaries_are_inclusive(self):
        fields = validate_ride(
            {**PAYLOAD, "start_lat": -90, "start_long": 180, "end_lat": 90, "end_long": -180}
        )
        assert fields.start_lat == -90.0
        assert fields.end_long == -180.0

    @pytest.mark.parametrize(
        "field,value",
        [("start_lat", 90.01), ("start_lat", -91), ("start_long", 181), ("start_long", -180.5)],
    )
    def test_start_out_of_range(self, field, value):
        assert _message(**{field: value}) == START_COORDS_MESSAGE

    @pytest.mark.parametrize(
        "field,value",
        [("end_lat", 100), ("end_long", -200)],
    )
    def test_end_out_of_range(self, field, value):
        assert _message(**{field: value}) == END_COORDS_MESSAGE

    def test_nan_and_infinity_fail(self):
        assert _message(start_lat=float("nan")) == START_COORDS_MESSAGE
        assert _message(end_long=float("inf")) == END_COORDS_MESSAGE
        assert _message(end_lat="nan") == END_COORDS_MESSAGE

    def test_missing_coordinate_fails(self):
        payload = dict(PAYLOAD)
        del payload["end_long"]
        with pytest.raises(ValidationError, match="End latitude"):
            validate_ride(payload)

    def test_start_checked_before_end(self):
        assert _message(start_lat=91, end_lat=91) == START_COORDS_MESSAGE

    def test_coordinates_checked_before_names(self):
        assert _message(end_long=500, rider_name="") == END_COORDS_MESSAGE

    def test_names_checked_in_order(self):
        assert _message(rider_name="", driver_name="", driver_vehicle="") == RIDER_NAME_MESSAGE
        assert _message(driver_name="", driver_vehicle="") == DRIVER_NAME_MESSAGE
        assert _message(driver_vehicle="") == DRIVER_VEHICLE_MESSAGE

    def test_whitespace_only_name_fails(self):
        assert _message(driver_name="   ") == DRIVER_NAME_MESSAGE

    def test_non_string_name_fails(self):
        assert _message(rider_name=42) == RIDER_NAME_MESSAGE
        assert _message(driver_vehicle=None) == DRIVER_VEHICLE_MESSAGE

    def test_payload_not_mutated(self):
        payload = dict(PAYLOAD, start_lat="45")
        validate_ride(payload)
        assert payload["start_lat"] == "45"
