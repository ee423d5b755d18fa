"""Construction-time failures of the cafe simulation.

Business-rule violations (a client arriving twice, a busy table, ...) are not
errors in this sense: they are reported as ``Error`` events by the handler and
never raised.
"""

from enum import Enum


class ErrorCode(Enum):
    """Failure codes."""

    INVALID_NAME = "INVALID_NAME"
    INVALID_TABLE = "INVALID_TABLE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_CONFIG = "INVALID_CONFIG"
    MALFORMED_LINE = "MALFORMED_LINE"
    OUT_OF_ORDER = "OUT_OF_ORDER"


class CafeError(ValueError):
    """Base failure with a code and a human readable message."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidName(CafeError):
    code = ErrorCode.INVALID_NAME


class InvalidTable(CafeError):
    code = ErrorCode.INVALID_TABLE


class InvalidTime(CafeError):
    code = ErrorCode.INVALID_TIME


class InvalidConfig(CafeError):
    code = ErrorCode.INVALID_CONFIG


class MalformedLine(CafeError):
    """Raised for the first line of a day file that cannot be read."""

    code = ErrorCode.MALFORMED_LINE

    def __init__(self, line: str, reason: str = "") -> None:
        super().__init__(f"{line!r}" + (f" ({reason})" if reason else ""))
        self.line = line
        self.reason = reason


class OutOfOrder(CafeError):
    """Raised when an event is earlier than the one before it."""

    code = ErrorCode.OUT_OF_ORDER

    def __init__(self, event, index: int) -> None:
        super().__init__(f"event #{index} at t={event.t} is earlier than its predecessor")
        self.event = event
        self.index = index
