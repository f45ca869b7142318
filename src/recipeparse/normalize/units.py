"""Unit spelling normalization."""

from types import MappingProxyType

from recipeparse.schemas import Unit

# =============================================================================
# Unit Table
# =============================================================================

# Lookups are exact and case-sensitive: "t" is a teaspoon, "T" a tablespoon.
_UNIT_SPELLINGS: dict[str, Unit] = {
    # US customary - volume
    "t": Unit.TEASPOON,
    "t.": Unit.TEASPOON,
    "tsp": Unit.TEASPOON,
    "tsp.": Unit.TEASPOON,
    "teaspoon": Unit.TEASPOON,
    "T": Unit.TABLESPOON,
    "T.": Unit.TABLESPOON,
    "Tbsp": Unit.TABLESPOON,
    "Tbsp.": Unit.TABLESPOON,
    "tbsp": Unit.TABLESPOON,
    "tbsp.": Unit.TABLESPOON,
    "Tablespoon": Unit.TABLESPOON,
    "fl oz": Unit.FLUID_OUNCE,
    "fl. oz.": Unit.FLUID_OUNCE,
    "fl oz.": Unit.FLUID_OUNCE,
    "floz": Unit.FLUID_OUNCE,
    "floz.": Unit.FLUID_OUNCE,
    "c": Unit.CUP,
    "c.": Unit.CUP,
    "cup": Unit.CUP,
    "Cup": Unit.CUP,
    "cups": Unit.CUP,
    "Cups": Unit.CUP,
    "p": Unit.PINT,
    "p.": Unit.PINT,
    "pt": Unit.PINT,
    "pts": Unit.PINT,
    "pt.": Unit.PINT,
    "pint": Unit.PINT,
    "pints": Unit.PINT,
    "Pint": Unit.PINT,
    "q": Unit.QUART,
    "q.": Unit.QUART,
    "qt": Unit.QUART,
    "qts": Unit.QUART,
    "qt.": Unit.QUART,
    "qts.": Unit.QUART,
    "quart": Unit.QUART,
    "Quart": Unit.QUART,
    "quarts": Unit.QUART,
    "g": Unit.GALLON,
    "g.": Unit.GALLON,
    "gal": Unit.GALLON,
    "gals": Unit.GALLON,
    "gal.": Unit.GALLON,
    "gallon": Unit.GALLON,
    "Gallon": Unit.GALLON,
    "gallons": Unit.GALLON,
    # US customary - weight
    "oz": Unit.OUNCE,
    "oz.": Unit.OUNCE,
    "ozs": Unit.OUNCE,
    "ozs.": Unit.OUNCE,
    "ounce": Unit.OUNCE,
    "Ounce": Unit.OUNCE,
    "ounces": Unit.OUNCE,
    "lb": Unit.POUND,
    "lb.": Unit.POUND,
    "lbs": Unit.POUND,
    "lbs.": Unit.POUND,
    "pound": Unit.POUND,
    "pounds": Unit.POUND,
    "Pound": Unit.POUND,
    "Pounds": Unit.POUND,
}

UNIT_TABLE = MappingProxyType(_UNIT_SPELLINGS)


def normalize_unit(raw_unit: str) -> Unit | None:
    """
    Look up the canonical unit for a raw unit spelling.

    Examples:
        "Tbsp." -> Unit.TABLESPOON
        "t" -> Unit.TEASPOON
        "Teaspoon" -> None (not listed)
    """
    return UNIT_TABLE.get(raw_unit)


def spellings_for(unit: Unit) -> list[str]:
    """Get every known spelling of a canonical unit, in table order."""
    return [spelling for spelling, canonical in UNIT_TABLE.items() if canonical is unit]
