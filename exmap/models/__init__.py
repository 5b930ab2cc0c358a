"""
Models package for the exercise image mapper.

This package provides convenient imports for all data models:
- MatchKind: Enum for how an id was resolved
- MatchResult: Outcome of matching one id
- MappingReport: Results of a generator run
- CoverageReport: Image availability per exercise
"""

from .match_kind import MatchKind
from .data_models import (
    CoverageReport,
    MappingReport,
    MatchResult,
)

__all__ = [
    "MatchKind",
    "MatchResult",
    "MappingReport",
    "CoverageReport",
]
