"""Exercise matching package for exmap.

This package contains the StringMatcher implementation for resolving
exercise ids to image folder names, plus RapidFuzz-based suggestions for
ids that stay unmapped.

Example:
    >>> from exmap.matching import StringMatcher
    >>> matcher = StringMatcher()
    >>> result = matcher.best_match("34-situp", ["3_4_Sit-Up", "Other_Exercise"])
    >>> print(f"{result.candidate}: {result.score:.0%}")
    3_4_Sit-Up: 100%
"""

from .string_matcher import (
    SPECIAL_CASES,
    InvalidInputError,
    StringMatcher,
    best_match,
    edit_distance,
    similarity,
)
from .suggestions import suggest_folders

__all__ = [
    "SPECIAL_CASES",
    "InvalidInputError",
    "StringMatcher",
    "best_match",
    "edit_distance",
    "similarity",
    "suggest_folders",
]
