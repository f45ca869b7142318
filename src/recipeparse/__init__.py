"""Parse recipe ingredient lines into structured, unit-normalized data."""

from recipeparse.errors import ParseError, ParseErrorCode
from recipeparse.normalize import normalize_unit
from recipeparse.parse import (
    BatchResult,
    Parsed,
    parse_ingredient_from_raw_ingredient,
    parse_ingredient_line,
    parse_ingredient_lines,
    parse_ingredient_list,
    parse_raw_ingredient_from_count,
    parse_raw_ingredient_from_decimal,
    parse_raw_ingredient_from_fraction,
)
from recipeparse.schemas import (
    Ingredient,
    Measure,
    Measurement,
    MeasurementSystem,
    Notation,
    RawIngredient,
    Unit,
)

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "Ingredient",
    "Measure",
    "Measurement",
    "MeasurementSystem",
    "Notation",
    "ParseError",
    "ParseErrorCode",
    "Parsed",
    "RawIngredient",
    "Unit",
    "normalize_unit",
    "parse_ingredient_from_raw_ingredient",
    "parse_ingredient_line",
    "parse_ingredient_lines",
    "parse_ingredient_list",
    "parse_raw_ingredient_from_count",
    "parse_raw_ingredient_from_decimal",
    "parse_raw_ingredient_from_fraction",
]
