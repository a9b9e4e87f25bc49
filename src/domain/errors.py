"""
Error taxonomy for the rides service.

Every failure that reaches a caller is one of three ``RideError``
subclasses, each carrying a stable ``error_code`` and a message:

* ``ValidationError``  -- payload failed a domain rule (message names the rule)
* ``NotFoundError``    -- a lookup or page matched no rows
* ``ServerError``      -- storage or anything unexpected; message never
  carries internal detail
"""

from __future__ import annotations

from .enums import ErrorCode

NOT_FOUND_MESSAGE = "Could not find any rides"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


class RideError(Exception):
    """Base class for classified service failures."""

    error_code: ErrorCode = ErrorCode.SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error_code": self.error_code.value, "message": self.message}


class ValidationError(RideError):
    error_code = ErrorCode.VALIDATION_ERROR


class NotFoundError(RideError):
    error_code = ErrorCode.RIDES_NOT_FOUND_ERROR

    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)


class ServerError(RideError):
    error_code = ErrorCode.SERVER_ERROR

    def __init__(self):
        super().__init__(UNKNOWN_ERROR_MESSAGE)


def classify(exc: BaseException) -> RideError:
    """Return *exc* if already classified, else an opaque ``ServerError``."""
    if isinstance(exc, RideError):
        return exc
    return ServerError()
