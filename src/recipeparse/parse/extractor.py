"""Split ingredient lines into measurement text and item text."""

from recipeparse.errors import ParseErrorCode
from recipeparse.parse.grammar import (
    COUNT_GRAMMAR,
    DECIMAL_GRAMMAR,
    FRACTION_GRAMMAR,
    NotationGrammar,
)
from recipeparse.parse.results import Parsed
from recipeparse.schemas import RawIngredient


def extract_raw(line: str, grammar: NotationGrammar) -> Parsed[RawIngredient, str]:
    """
    Extract the raw measurement and item from a line.

    The measurement is the grammar's span matched at the start of the line,
    kept as typed apart from trailing whitespace. The item is whatever
    follows the measurement and one separator character, trimmed.

    Examples:
        "1/2c something" -> measurement "1/2c", item "something"
        "1 c 1/2 t some item" -> measurement "1 c 1/2 t", item "some item"
    """
    match = grammar.span.match(line)
    if match is None:
        return Parsed.failure(
            ParseErrorCode.MEASUREMENT_NOT_FOUND,
            f"no {grammar.notation.value} measurement at the start of the line",
            raw=line,
        )

    measurement = match.group(0).strip()
    item = line[len(measurement) + 1 :].strip()

    if not item:
        return Parsed.failure(
            ParseErrorCode.EMPTY_ITEM,
            f"nothing follows the measurement '{measurement}'",
            raw=line,
        )

    return Parsed.success(
        RawIngredient(item=item, measurement=measurement, notation=grammar.notation),
        raw=line,
    )


def parse_raw_ingredient_from_fraction(line: str) -> RawIngredient:
    """Extract a raw ingredient written in fraction notation.

    Raises:
        ParseError: If the line has no fraction measurement or no item.
    """
    return extract_raw(line, FRACTION_GRAMMAR).unwrap()


def parse_raw_ingredient_from_decimal(line: str) -> RawIngredient:
    """Extract a raw ingredient written in decimal notation.

    Raises:
        ParseError: If the line has no decimal measurement or no item.
    """
    return extract_raw(line, DECIMAL_GRAMMAR).unwrap()


def parse_raw_ingredient_from_count(line: str) -> RawIngredient:
    """Extract a raw ingredient written as a bare count, e.g. "2 eggs".

    The result cannot be decomposed into measures.

    Raises:
        ParseError: If the line does not start with a count.
    """
    return extract_raw(line, COUNT_GRAMMAR).unwrap()
