"""Ingredient line parsing: classification, extraction, and decomposition."""

from recipeparse.parse.decomposer import decompose, parse_measure
from recipeparse.parse.extractor import (
    extract_raw,
    parse_raw_ingredient_from_count,
    parse_raw_ingredient_from_decimal,
    parse_raw_ingredient_from_fraction,
)
from recipeparse.parse.grammar import (
    COUNT_GRAMMAR,
    DECIMAL_GRAMMAR,
    FRACTION_GRAMMAR,
    NotationGrammar,
    classify_notation,
    grammar_for,
)
from recipeparse.parse.pipeline import (
    BatchResult,
    parse_ingredient_from_raw_ingredient,
    parse_ingredient_line,
    parse_ingredient_lines,
    parse_ingredient_list,
)
from recipeparse.parse.results import Parsed, all_succeeded

__all__ = [
    # Grammars
    "COUNT_GRAMMAR",
    "DECIMAL_GRAMMAR",
    "FRACTION_GRAMMAR",
    "NotationGrammar",
    "classify_notation",
    "grammar_for",
    # Results
    "Parsed",
    "all_succeeded",
    # Extraction
    "extract_raw",
    "parse_raw_ingredient_from_count",
    "parse_raw_ingredient_from_decimal",
    "parse_raw_ingredient_from_fraction",
    # Decomposition
    "decompose",
    "parse_measure",
    # Pipeline
    "BatchResult",
    "parse_ingredient_from_raw_ingredient",
    "parse_ingredient_line",
    "parse_ingredient_lines",
    "parse_ingredient_list",
]
