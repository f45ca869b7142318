"""Error codes and exceptions for ingredient parsing."""

from enum import Enum
from typing import Any


class ParseErrorCode(str, Enum):
    """Failure modes of the parsing pipeline.

    Codes are string values for easy serialization and logging.
    """

    # No notation line test matched the line
    INVALID_LINE_FORMAT = "INVALID_LINE_FORMAT"
    # No measurement span at the start of the line
    MEASUREMENT_NOT_FOUND = "MEASUREMENT_NOT_FOUND"
    # Nothing left after the measurement
    EMPTY_ITEM = "EMPTY_ITEM"
    # Notation has no decomposition path (count)
    UNKNOWN_NOTATION = "UNKNOWN_NOTATION"
    # Raw unit token missing from the unit table
    UNIT_NOT_RECOGNIZED = "UNIT_NOT_RECOGNIZED"


class ParseError(Exception):
    """Raised when a failed parse result is unwrapped."""

    def __init__(self, code: ParseErrorCode, message: str, raw: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.raw = raw

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for API responses."""
        return {"code": self.code.value, "message": self.message, "raw": self.raw}
