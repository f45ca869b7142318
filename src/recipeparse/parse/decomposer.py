"""Decompose raw measurements into normalized measures."""

from typing import assert_never

from recipeparse.errors import ParseErrorCode
from recipeparse.logging_config import get_logger
from recipeparse.normalize.units import normalize_unit
from recipeparse.parse.grammar import DECIMAL_GRAMMAR, FRACTION_GRAMMAR, NotationGrammar
from recipeparse.parse.results import Parsed, all_succeeded
from recipeparse.schemas import (
    Ingredient,
    Measure,
    Measurement,
    Notation,
    RawIngredient,
)

logger = get_logger(__name__)


def _decomposition_grammar(notation: Notation) -> NotationGrammar | None:
    match notation:
        case Notation.FRACTION:
            return FRACTION_GRAMMAR
        case Notation.DECIMAL:
            return DECIMAL_GRAMMAR
        case Notation.COUNT:
            # TODO: count lines need a unit-less Measure before they can be decomposed
            return None
        case _:
            assert_never(notation)


def parse_measure(part: str, grammar: NotationGrammar) -> Parsed[Measure, str]:
    """
    Parse one "amount unit" piece of a measurement.

    Examples:
        "1 1/2 cup " -> Measure(amount="1 1/2", unit=Unit.CUP)
        "1/2t" -> Measure(amount="1/2", unit=Unit.TEASPOON)
    """
    match = grammar.amount.match(part)
    if match is None:
        return Parsed.failure(
            ParseErrorCode.MEASUREMENT_NOT_FOUND,
            f"no amount at the start of '{part}'",
            raw=part,
        )

    amount = match.group(0).strip()
    raw_unit = part[match.end() :].strip()

    unit = normalize_unit(raw_unit)
    if unit is None:
        return Parsed.failure(
            ParseErrorCode.UNIT_NOT_RECOGNIZED,
            f"unit '{raw_unit}' is not recognized",
            raw=part,
        )

    return Parsed.success(Measure(amount=amount, unit=unit), raw=part)


def decompose(raw_ingredient: RawIngredient) -> Parsed[Ingredient, RawIngredient]:
    """
    Turn a raw ingredient into a fully normalized ingredient.

    Every part of the measurement must normalize; a measurement with one
    recognized and one unrecognized unit fails as a whole.

    Args:
        raw_ingredient: Measurement and item text with their notation.

    Returns:
        Parsed ingredient, or a failure keyed to the raw ingredient.
    """
    grammar = _decomposition_grammar(raw_ingredient.notation)
    if grammar is None:
        return Parsed.failure(
            ParseErrorCode.UNKNOWN_NOTATION,
            f"'{raw_ingredient.notation.value}' measurements cannot be decomposed",
            raw=raw_ingredient,
        )

    measurement_text = raw_ingredient.measurement.strip()
    if not grammar.span.fullmatch(measurement_text):
        return Parsed.failure(
            ParseErrorCode.MEASUREMENT_NOT_FOUND,
            f"'{raw_ingredient.measurement}' is not a "
            f"{raw_ingredient.notation.value} measurement",
            raw=raw_ingredient,
        )

    parsed_measures = [
        parse_measure(match.group(0), grammar) for match in grammar.part.finditer(measurement_text)
    ]

    if not all_succeeded(parsed_measures):
        failures = [parsed for parsed in parsed_measures if not parsed.was_parsed]
        message = "; ".join(parsed.message or "" for parsed in failures)
        logger.debug(f"Rejected measurement '{raw_ingredient.measurement}': {message}")
        return Parsed.failure(
            failures[0].error or ParseErrorCode.UNIT_NOT_RECOGNIZED,
            message,
            raw=raw_ingredient,
        )

    measures = tuple(parsed.unwrap() for parsed in parsed_measures)

    ingredient = Ingredient(
        item=raw_ingredient.item,
        measurement=Measurement(measure=measures, standard=measures[0].unit.system),
        notation=raw_ingredient.notation,
    )
    return Parsed.success(ingredient, raw=raw_ingredient)
