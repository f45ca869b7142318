"""Batch parsing of ingredient lines with all-or-nothing results."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from recipeparse.config import get_settings
from recipeparse.errors import ParseErrorCode
from recipeparse.logging_config import get_logger
from recipeparse.parse.decomposer import decompose
from recipeparse.parse.extractor import extract_raw
from recipeparse.parse.grammar import classify_notation, grammar_for
from recipeparse.parse.results import Parsed, all_succeeded
from recipeparse.schemas import Ingredient, RawIngredient

logger = get_logger(__name__)


def _shorten(line: str, limit: int = 60) -> str:
    if len(line) <= limit:
        return repr(line)
    return repr(line[: limit - 3] + "...")


@dataclass
class BatchResult:
    """Per-line outcomes of parsing a list of ingredient lines."""

    lines: Sequence[str]
    results: list[Parsed[Ingredient, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Check if every line parsed."""
        return all_succeeded(self.results)

    @property
    def ingredients(self) -> list[Ingredient]:
        """Get the parsed ingredients in input order (empty unless all parsed)."""
        if not self.succeeded:
            return []
        return [result.unwrap() for result in self.results]

    @property
    def failures(self) -> list[tuple[int, Parsed[Ingredient, str]]]:
        """Get (index, result) for every line that failed."""
        return [
            (index, result) for index, result in enumerate(self.results) if not result.was_parsed
        ]

    def resolve(self) -> list[Ingredient] | Sequence[str]:
        """Get all ingredients, or the original lines if any line failed."""
        if self.succeeded:
            return self.ingredients
        return self.lines


def parse_ingredient_line(line: str) -> Parsed[Ingredient, str]:
    """
    Parse a single ingredient line.

    The line is classified by notation, split into measurement and item,
    then decomposed into normalized measures. The result is always keyed to
    the original line.
    """
    max_length = get_settings().max_line_length
    if len(line) > max_length:
        return Parsed.failure(
            ParseErrorCode.INVALID_LINE_FORMAT,
            f"the ingredient line is longer than {max_length} characters",
            raw=line,
        )

    notation = classify_notation(line)
    if notation is None:
        return Parsed.failure(
            ParseErrorCode.INVALID_LINE_FORMAT,
            "the ingredient line is not in a recognized format",
            raw=line,
        )

    raw_ingredient = extract_raw(line, grammar_for(notation))
    if not raw_ingredient.was_parsed:
        return raw_ingredient.with_raw(line)  # type: ignore[return-value]

    return decompose(raw_ingredient.unwrap()).with_raw(line)


def parse_ingredient_lines(lines: Sequence[str]) -> BatchResult:
    """Parse every line, keeping each outcome in input order."""
    batch = BatchResult(lines=lines, results=[parse_ingredient_line(line) for line in lines])

    for index, result in batch.failures:
        logger.debug(
            f"Line {index} failed ({result.error.value}): {result.message} - {_shorten(result.raw)}"
        )

    if batch.succeeded:
        logger.info(f"Parsed {len(batch.results)} ingredient lines")
    else:
        logger.info(
            f"Ingredient list not parsed: {len(batch.failures)}/{len(batch.results)} lines failed"
        )
    return batch


def parse_ingredient_list(lines: Sequence[str]) -> list[Ingredient] | Sequence[str]:
    """
    Parse a list of ingredient lines into structured ingredients.

    Args:
        lines: Raw ingredient lines, e.g. ["1 cup apples", "1/2 t. peaches"].

    Returns:
        One Ingredient per line in input order if every line parses,
        otherwise the original lines unchanged.
    """
    return parse_ingredient_lines(lines).resolve()


def parse_ingredient_from_raw_ingredient(
    raw_ingredient: RawIngredient,
) -> Parsed[Ingredient, RawIngredient]:
    """Decompose an already-extracted raw ingredient."""
    return decompose(raw_ingredient)
