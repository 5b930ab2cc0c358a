"""
Core data models for the exercise image mapper.

This module contains the following dataclasses:
- MatchResult: Outcome of matching one exercise id against the image folders
- MappingReport: All match results for one generator run
- CoverageReport: Image availability per exercise for the verify workflow
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .match_kind import MatchKind


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching a single exercise id."""
    target: str                       # Exercise id that was matched
    candidate: Optional[str]          # Chosen folder name (None if unmapped)
    score: float                      # Similarity score (0.0-1.0)
    kind: MatchKind                   # Which probe produced the result

    @property
    def is_mapped(self) -> bool:
        """Whether a folder was chosen for the target."""
        return self.candidate is not None

    @classmethod
    def unmapped(cls, target: str) -> "MatchResult":
        """Build the result reported when no candidate qualifies."""
        return cls(target=target, candidate=None, score=0.0, kind=MatchKind.UNMAPPED)


@dataclass
class MappingReport:
    """Results of matching every exercise id against the image folders."""
    results: List[MatchResult] = field(default_factory=list)   # One per distinct id, input order
    total_exercises: int = 0          # Ids found in the data file (duplicates included)
    folders: List[str] = field(default_factory=list)  # Image folder names, sorted
    suggestions: Dict[str, List[str]] = field(default_factory=dict)  # Hints for unmapped ids
    errors: List[str] = field(default_factory=list)  # Scanner error messages

    @property
    def total_folders(self) -> int:
        """Number of image folders found."""
        return len(self.folders)

    @property
    def mappings(self) -> Dict[str, str]:
        """Mapped ids and their folders, sorted by id."""
        return {
            result.target: result.candidate
            for result in sorted(self.results, key=lambda r: r.target)
            if result.candidate is not None
        }

    @property
    def unmapped(self) -> List[str]:
        """Ids that could not be mapped, in input order."""
        return [result.target for result in self.results if not result.is_mapped]

    @property
    def mapped_folders(self) -> List[str]:
        """Distinct mapped folders in first-seen order."""
        seen: Dict[str, None] = {}
        for result in self.results:
            if result.candidate is not None:
                seen.setdefault(result.candidate, None)
        return list(seen)

    def lookup(self, exercise_id: str) -> Optional[str]:
        """Return the folder mapped to an exercise id, if any."""
        for result in self.results:
            if result.target == exercise_id:
                return result.candidate
        return None


@dataclass
class CoverageReport:
    """Image availability for each exercise, produced by the verify workflow."""
    with_images: List[str] = field(default_factory=list)      # Ids whose start image exists
    without_images: List[str] = field(default_factory=list)   # Ids with no start image
    unused_folders: List[str] = field(default_factory=list)   # Folders no id resolves to
    total_exercises: int = 0
    total_folders: int = 0

    def percent_with_images(self) -> int:
        """Share of exercises with images, rounded to a whole percent."""
        return _percent(len(self.with_images), self.total_exercises)

    def percent_without_images(self) -> int:
        """Share of exercises without images, rounded to a whole percent."""
        return _percent(len(self.without_images), self.total_exercises)


def _percent(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    # Half-up rounding, not banker's
    return int(part * 100 / whole + 0.5)
