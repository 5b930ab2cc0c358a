"""Height and weight unit conversions for user profiles.

Values are rounded the way the app displays them: centimetres and pounds to
whole numbers, kilograms to one decimal place. Rounding is half-up: 2.5
becomes 3, not the even neighbour.

Zero and missing values are both treated as "not provided" by the
formatting and conversion helpers, matching what profile forms submit for
blank fields.

Example:
    >>> from exmap.units import format_height, UnitSystem
    >>> format_height(5, 10, preferred=UnitSystem.METRIC)
    '178 cm'
"""

import math
from enum import Enum
from typing import Dict, Optional, Tuple, Union

CM_PER_INCH = 2.54
POUNDS_PER_KG = 2.205
INCHES_PER_FOOT = 12

Number = Union[int, float]


class UnitSystem(str, Enum):
    """Measurement systems a user can prefer."""
    METRIC = "metric"
    IMPERIAL = "imperial"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def feet_inches_to_cm(feet: Number, inches: Number) -> int:
    """Convert a height in feet and inches to whole centimetres."""
    total_inches = feet * INCHES_PER_FOOT + inches
    return _round_half_up(total_inches * CM_PER_INCH)


def cm_to_feet_inches(cm: Number) -> Tuple[int, int]:
    """Convert centimetres to ``(feet, inches)``, rounding to the nearest inch first."""
    total_inches = _round_half_up(cm / CM_PER_INCH)
    return total_inches // INCHES_PER_FOOT, total_inches % INCHES_PER_FOOT


def pounds_to_kg(pounds: Number) -> float:
    """Convert pounds to kilograms, rounded to one decimal place."""
    return _round_half_up(pounds / POUNDS_PER_KG * 10) / 10


def kg_to_pounds(kg: Number) -> int:
    """Convert kilograms to whole pounds."""
    return _round_half_up(kg * POUNDS_PER_KG)


def format_height(
    feet: Optional[Number] = None,
    inches: Optional[Number] = None,
    cm: Optional[Number] = None,
    preferred: Union[UnitSystem, str] = UnitSystem.IMPERIAL,
) -> str:
    """Render a height in the preferred system, converting when needed.

    Returns ``'178 cm'`` or ``5'10"``, or an empty string when no usable
    value is given. Raises ValueError for an unknown unit system.
    """
    if UnitSystem(preferred) is UnitSystem.METRIC:
        if cm:
            return f"{_format_number(cm)} cm"
        if feet and inches is not None:
            return f"{feet_inches_to_cm(feet, inches)} cm"
    else:
        if feet and inches is not None:
            return f"{_format_number(feet)}'{_format_number(inches)}\""
        if cm:
            whole_feet, rest_inches = cm_to_feet_inches(cm)
            return f"{whole_feet}'{rest_inches}\""
    return ""


def format_weight(
    pounds: Optional[Number] = None,
    kg: Optional[Number] = None,
    preferred: Union[UnitSystem, str] = UnitSystem.IMPERIAL,
) -> str:
    """Render a weight as ``'81.6 kg'`` or ``'180 lbs'``; empty when unknown."""
    if UnitSystem(preferred) is UnitSystem.METRIC:
        if kg:
            return f"{_format_number(kg)} kg"
        if pounds:
            return f"{_format_number(pounds_to_kg(pounds))} kg"
    else:
        if pounds:
            return f"{_format_number(pounds)} lbs"
        if kg:
            return f"{kg_to_pounds(kg)} lbs"
    return ""


def convert_height_to_preferred(
    target: Union[UnitSystem, str],
    feet: Optional[Number] = None,
    inches: Optional[Number] = None,
    cm: Optional[Number] = None,
) -> Dict[str, Optional[Number]]:
    """Express a stored height in the target system's fields.

    Returns ``{"height_cm": ...}`` for metric and
    ``{"height_feet": ..., "height_inches": ...}`` for imperial. Values that
    cannot be converted are passed through unchanged (possibly None).
    """
    if UnitSystem(target) is UnitSystem.METRIC:
        if feet and inches is not None:
            return {"height_cm": feet_inches_to_cm(feet, inches)}
        return {"height_cm": cm}
    if cm:
        whole_feet, rest_inches = cm_to_feet_inches(cm)
        return {"height_feet": whole_feet, "height_inches": rest_inches}
    return {"height_feet": feet, "height_inches": inches}


def convert_weight_to_preferred(
    target: Union[UnitSystem, str],
    pounds: Optional[Number] = None,
    kg: Optional[Number] = None,
) -> Dict[str, Optional[Number]]:
    """Express a stored weight as ``{"weight_kg": ...}`` or ``{"weight_pounds": ...}``."""
    if UnitSystem(target) is UnitSystem.METRIC:
        if pounds:
            return {"weight_kg": pounds_to_kg(pounds)}
        return {"weight_kg": kg}
    if kg:
        return {"weight_pounds": kg_to_pounds(kg)}
    return {"weight_pounds": pounds}
