"""Height and weight unit conversion helpers."""

from .conversions import (
    UnitSystem,
    cm_to_feet_inches,
    convert_height_to_preferred,
    convert_weight_to_preferred,
    feet_inches_to_cm,
    format_height,
    format_weight,
    kg_to_pounds,
    pounds_to_kg,
)

__all__ = [
    "UnitSystem",
    "cm_to_feet_inches",
    "convert_height_to_preferred",
    "convert_weight_to_preferred",
    "feet_inches_to_cm",
    "format_height",
    "format_weight",
    "kg_to_pounds",
    "pounds_to_kg",
]
