"""Normalize raw unit spellings into canonical units."""

from recipeparse.normalize.units import UNIT_TABLE, normalize_unit, spellings_for

__all__ = [
    "UNIT_TABLE",
    "normalize_unit",
    "spellings_for",
]
