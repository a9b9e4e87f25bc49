"""Unit tests for the error taxonomy and classifier."""

from sqlalchemy.exc import OperationalError

from src.domain.enums import ErrorCode
from src.domain.errors import (
    NotFoundError,
    RideError,
    ServerError,
    ValidationError,
    classify,
)


class TestErrorCodes:
    def test_validation(self):
        err = ValidationError("Rider name must be a non empty string")
        assert err.to_dict() == {
            "error_code": "VALIDATION_ERROR",
            "message": "Rider name must be a non empty string",
        }

    def test_not_found_default_message(self):
        assert NotFoundError().to_dict() == {
            "error_code": "RIDES_NOT_FOUND_ERROR",
            "message": "Could not find any rides",
        }

    def test_server_error_never_carries_detail(self):
        err = ServerError()
        assert err.error_code is ErrorCode.SERVER_ERROR
        assert err.message == "Unknown error"
        assert str(err) == "Unknown error"

    def test_all_are_ride_errors(self):
        for err in (ValidationError("x"), NotFoundError(), ServerError()):
            assert isinstance(err, RideError)


class TestClassify:
    def test_ride_errors_pass_through(self):
        err = NotFoundError()
        assert classify(err) is err

    def test_engine_error_becomes_server_error(self):
        exc = OperationalError("SELECT 1", {}, Exception("database is locked"))
        classified = classify(exc)
        assert isinstance(classified, ServerError)
        assert "locked" not in classified.message

    def test_anything_else_becomes_server_error(self):
        assert classify(KeyError("x")).to_dict() == {
            "error_code": "SERVER_ERROR",
            "message": "Unknown error",
        }
