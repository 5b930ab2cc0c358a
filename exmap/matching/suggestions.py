"""Manual-mapping hints for exercise ids the matcher could not resolve.

Uses RapidFuzz token sort ratio over delimiter-insensitive names, so
``band-pull-apart`` ranks ``Pull_Apart_Band`` highly even though neither
cleaned name contains the other.
"""

import logging
from typing import List, Sequence

from rapidfuzz import fuzz, process, utils

logger = logging.getLogger(__name__)


def suggest_folders(
    target: str,
    candidates: Sequence[str],
    limit: int = 3,
    score_cutoff: float = 60.0,
) -> List[str]:
    """Rank folder names that look like ``target``.

    Args:
        target: Unmapped exercise id.
        candidates: Available folder names.
        limit: Maximum number of suggestions to return (at least 1).
        score_cutoff: Minimum RapidFuzz score (0-100) for a suggestion.

    Returns:
        Up to ``limit`` folder names, best first. Empty if nothing reaches
        the cutoff.

    Raises:
        ValueError: If limit is below 1 or score_cutoff is outside 0-100.

    Example:
        >>> suggest_folders("band-pull-apart", ["Pull_Apart_Band", "Air_Bike"])
        ['Pull_Apart_Band']
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    if not 0.0 <= score_cutoff <= 100.0:
        raise ValueError(f"score_cutoff must be between 0 and 100, got {score_cutoff}")

    if not candidates:
        return []

    ranked = process.extract(
        target,
        list(candidates),
        scorer=fuzz.token_sort_ratio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    suggestions = [name for name, _score, _index in ranked]
    logger.debug("Suggestions for %r: %s", target, suggestions)
    return suggestions
