"""
Configuration for the mapping generator.

Holds the output layout of the generated TypeScript and the matching
thresholds. CLI options override individual fields.
"""

from dataclasses import dataclass, field
from typing import Tuple

from exmap.matching import SPECIAL_CASES


@dataclass
class GeneratorConfig:
    """
    Settings for one generator run.

    Attributes:
        asset_prefix: Module path prefix of the image folders in ``require`` calls.
        image_subdir: Directory inside each exercise folder holding the images.
        start_image: Image used for the card and the ``start``/``demonstration`` frames.
        end_image: Image used for the ``end`` frame.
        min_similarity: Minimum similarity for containment matches (0.0 - 1.0).
        suggestion_limit: Maximum suggestions listed for each unmapped id.
        suggestion_cutoff: Minimum RapidFuzz score (0 - 100) for a suggestion.
        special_cases: Marker -> folder pairs handed to the matcher.

    Example:
        >>> config = GeneratorConfig(min_similarity=0.5)
        >>> config.asset_prefix
        '@/assets/images/exercises'
    """

    # Output layout
    asset_prefix: str = "@/assets/images/exercises"
    image_subdir: str = "images"
    start_image: str = "0.jpg"
    end_image: str = "1.jpg"

    # Matching
    min_similarity: float = 0.0
    suggestion_limit: int = 3
    suggestion_cutoff: float = 60.0
    special_cases: Tuple[Tuple[str, str], ...] = field(default=SPECIAL_CASES)

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_similarity <= 1.0:
            raise ValueError(
                f"min_similarity must be between 0.0 and 1.0, got {self.min_similarity}"
            )
        if self.suggestion_limit < 0:
            raise ValueError(
                f"suggestion_limit must not be negative, got {self.suggestion_limit}"
            )
        if not 0.0 <= self.suggestion_cutoff <= 100.0:
            raise ValueError(
                f"suggestion_cutoff must be between 0 and 100, got {self.suggestion_cutoff}"
            )
        if not self.asset_prefix:
            raise ValueError("asset_prefix must not be empty")
