"""Result values threaded through every parsing stage."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from recipeparse.errors import ParseError, ParseErrorCode

T = TypeVar("T")
R = TypeVar("R")
R2 = TypeVar("R2")


@dataclass(frozen=True)
class Parsed(Generic[T, R]):
    """Outcome of one parse attempt.

    A success carries the produced item; a failure carries an error code and
    message instead. Both keep the raw input that was parsed.
    """

    raw: R
    item: T | None = None
    error: ParseErrorCode | None = None
    message: str | None = None

    @classmethod
    def success(cls, item: T, raw: R) -> "Parsed[T, R]":
        return cls(raw=raw, item=item)

    @classmethod
    def failure(cls, error: ParseErrorCode, message: str, raw: R) -> "Parsed[T, R]":
        return cls(raw=raw, error=error, message=message)

    @property
    def was_parsed(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the parsed item, raising ParseError if parsing failed."""
        if self.error is not None:
            raise ParseError(self.error, self.message or "", self.raw)
        return self.item  # type: ignore[return-value]

    def with_raw(self, raw: R2) -> "Parsed[T, R2]":
        """Re-key this result to a different raw input."""
        return Parsed(raw=raw, item=self.item, error=self.error, message=self.message)


def all_succeeded(results: Iterable[Parsed]) -> bool:
    """Check that every result in a collection was parsed."""
    return all(result.was_parsed for result in results)
