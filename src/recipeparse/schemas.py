"""Data schemas for parsed ingredient lines."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Notation(str, Enum):
    """Numeric style a measurement is written in."""

    FRACTION = "fraction"
    DECIMAL = "decimal"
    COUNT = "count"


class MeasurementSystem(str, Enum):
    """System of measure a canonical unit belongs to."""

    US_CUSTOMARY = "us-customary"
    METRIC = "metric"


class Unit(str, Enum):
    """Canonical unit symbols.

    Only the 'wet' US volumes are used, as they are mostly interchangeable
    in US recipes. Metric units are defined but no spelling maps to them yet.
    """

    # US customary - volume
    TEASPOON = "tsp"
    TABLESPOON = "Tbsp"
    FLUID_OUNCE = "fl oz"
    CUP = "c"
    PINT = "pt"
    QUART = "qt"
    GALLON = "gal"
    # US customary - weight
    OUNCE = "oz"
    POUND = "lb"
    # Metric - volume
    MILLILITER = "ml"
    CENTILITER = "cl"
    LITER = "l"
    # Metric - weight
    MILLIGRAM = "mg"
    GRAM = "g"
    KILOGRAM = "kg"

    @property
    def system(self) -> MeasurementSystem:
        """Get the measurement system this unit belongs to."""
        if self in _METRIC_UNITS:
            return MeasurementSystem.METRIC
        return MeasurementSystem.US_CUSTOMARY


_METRIC_UNITS = frozenset(
    {
        Unit.MILLILITER,
        Unit.CENTILITER,
        Unit.LITER,
        Unit.MILLIGRAM,
        Unit.GRAM,
        Unit.KILOGRAM,
    }
)


class FrozenModel(BaseModel):
    """Base class for immutable parse results."""

    model_config = ConfigDict(frozen=True)


class RawIngredient(FrozenModel):
    """Ingredient line split into measurement text and item text."""

    item: str
    measurement: str
    # The notation applies to the whole line, not just one measure
    notation: Notation


class Measure(FrozenModel):
    """One amount and unit pair.

    The amount stays a string: "1 1/2" has no exact float form.
    """

    amount: str
    unit: Unit


class Measurement(FrozenModel):
    """Ordered one- or two-part measurement."""

    measure: tuple[Measure, ...] = Field(min_length=1, max_length=2)
    standard: MeasurementSystem


class Ingredient(FrozenModel):
    """Structured, unit-normalized ingredient line."""

    item: str
    measurement: Measurement
    notation: Notation
