"""String matching implementation for exmap.

This module provides the StringMatcher class which resolves an exercise id
(e.g. ``push-up``) to one of the available image folder names (e.g.
``Push_Up``).

The matching pipeline runs in order, returning on the first hit:
    1. Exact variant probe (score 1.0): the id unchanged, with hyphens
       replaced by underscores, or in Title_Case, equals a folder name
    2. Special-case table (score 1.0): a literal marker -> folder lookup
    3. Normalized probe (score 1.0): cleaned names are equal
    4. Containment (scored by Levenshtein similarity): one cleaned name
       contains the other; the most similar folder wins, earliest on ties

Example:
    >>> from exmap.matching import StringMatcher
    >>> matcher = StringMatcher()
    >>> result = matcher.best_match("push-up", ["Push_Up", "Pull_Up"])
    >>> result.candidate, result.score
    ('Push_Up', 1.0)
"""

import logging
import re
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple

from exmap.models import MatchKind, MatchResult

logger = logging.getLogger(__name__)

# Marker substrings of an exercise id and the literal folder each maps to.
SPECIAL_CASES: Tuple[Tuple[str, str], ...] = (
    ("34-situp", "3_4_Sit-Up"),
    ("9090-hamstring", "90_90_Hamstring"),
)


class InvalidInputError(ValueError):
    """Raised when the matcher receives a missing or non-string input."""


def _require_str(value: object, label: str) -> str:
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{label} must be a string, got {type(value).__name__}"
        )
    return value


class StringMatcher:
    """Matches exercise ids to folder names using edit-distance similarity.

    The special-case table and the similarity threshold are fixed at
    construction, so ``best_match`` is a pure function of its arguments.

    Attributes:
        special_cases: Ordered ``(marker, folder_name)`` pairs. When a target
            contains ``marker``, ``folder_name`` is probed as an exact variant.
        min_similarity: Minimum similarity for a containment match (0.0-1.0).
            Containment winners below this threshold are reported unmapped.

    Example:
        >>> matcher = StringMatcher(min_similarity=0.5)
        >>> matcher.similarity("kitten", "sitting")
        0.5714285714285714
    """

    # Characters removed when building a comparison key
    _CLEAN_PATTERN = re.compile(r'[_\-\s]')

    def __init__(
        self,
        special_cases: Iterable[Tuple[str, str]] = SPECIAL_CASES,
        min_similarity: float = 0.0,
    ) -> None:
        """Initialize the StringMatcher.

        Args:
            special_cases: Marker -> folder pairs probed after the spelling
                variants. Defaults to the built-in SPECIAL_CASES table.
            min_similarity: Minimum similarity for containment matches.
                Must be between 0.0 and 1.0. Defaults to 0.0.

        Raises:
            ValueError: If min_similarity is not between 0.0 and 1.0, or a
                special case is not a pair of strings.
        """
        if not 0.0 <= min_similarity <= 1.0:
            raise ValueError(
                f"min_similarity must be between 0.0 and 1.0, got {min_similarity}"
            )
        table = tuple(tuple(entry) for entry in special_cases)
        for entry in table:
            if len(entry) != 2 or not all(isinstance(part, str) for part in entry):
                raise ValueError(f"special case must be a (marker, folder) pair: {entry!r}")
        self.special_cases: Tuple[Tuple[str, str], ...] = table
        self.min_similarity = min_similarity

    @staticmethod
    def edit_distance(a: str, b: str) -> int:
        """Compute the Levenshtein distance between two strings.

        Fills a ``(len(b) + 1) x (len(a) + 1)`` table where cell ``[i][j]``
        is the cost of turning the first ``j`` characters of ``a`` into the
        first ``i`` characters of ``b``.

        Args:
            a: First string (may be empty).
            b: Second string (may be empty).

        Returns:
            Minimum number of single-character insertions, deletions or
            substitutions needed to transform ``a`` into ``b``.

        Raises:
            InvalidInputError: If either argument is not a string.

        Example:
            >>> StringMatcher.edit_distance("kitten", "sitting")
            3
        """
        _require_str(a, "a")
        _require_str(b, "b")

        matrix: List[List[int]] = [[i] + [0] * len(a) for i in range(len(b) + 1)]
        matrix[0] = list(range(len(a) + 1))

        for i in range(1, len(b) + 1):
            for j in range(1, len(a) + 1):
                if b[i - 1] == a[j - 1]:
                    matrix[i][j] = matrix[i - 1][j - 1]
                else:
                    matrix[i][j] = 1 + min(
                        matrix[i - 1][j - 1],
                        matrix[i][j - 1],
                        matrix[i - 1][j],
                    )

        return matrix[len(b)][len(a)]

    @classmethod
    def similarity(cls, a: str, b: str) -> float:
        """Score how alike two strings are, relative to the longer one.

        Formula: (len(longer) - edit_distance(longer, shorter)) / len(longer)

        Args:
            a: First string.
            b: Second string.

        Returns:
            Similarity in [0.0, 1.0]; 1.0 for identical strings, including
            two empty strings.

        Raises:
            InvalidInputError: If either argument is not a string.
        """
        _require_str(a, "a")
        _require_str(b, "b")

        if len(b) > len(a):
            longer, shorter = b, a
        else:
            longer, shorter = a, b

        if not longer:
            return 1.0

        distance = cls.edit_distance(longer, shorter)
        return (len(longer) - distance) / len(longer)

    @classmethod
    def clean(cls, name: str) -> str:
        """Build the comparison key: lower-cased, without ``_``, ``-`` or whitespace."""
        return cls._CLEAN_PATTERN.sub('', name.lower())

    def variants(self, target: str) -> List[Tuple[str, MatchKind]]:
        """List the spellings of ``target`` probed for an exact folder match.

        Args:
            target: Exercise id, e.g. ``"push-up"``.

        Returns:
            Ordered ``(spelling, kind)`` pairs: the id unchanged, hyphens as
            underscores, Title_Case, then any special-case folders whose
            marker the id contains.

        Example:
            >>> [v for v, _ in StringMatcher().variants("push-up")]
            ['push-up', 'push_up', 'Push_Up']
        """
        title_case = '_'.join(word[:1].upper() + word[1:] for word in target.split('-'))
        found: List[Tuple[str, MatchKind]] = [
            (target, MatchKind.EXACT),
            (target.replace('-', '_'), MatchKind.EXACT),
            (title_case, MatchKind.EXACT),
        ]
        for marker, folder in self.special_cases:
            if marker in target:
                found.append((folder, MatchKind.SPECIAL_CASE))
        return found

    def best_match(self, target: str, candidates: Sequence[str]) -> MatchResult:
        """Resolve ``target`` to the best matching candidate folder name.

        Args:
            target: Exercise id to resolve.
            candidates: Ordered folder names. Duplicates are allowed and
                treated as distinct positions.

        Returns:
            MatchResult with the chosen folder, its score and the probe that
            found it, or an unmapped result when nothing qualifies.

        Raises:
            InvalidInputError: If target or candidates is None, candidates
                is a bare string, or any candidate is not a string.

        Example:
            >>> StringMatcher().best_match("unknown-move", ["Push_Up"]).is_mapped
            False
        """
        if target is None:
            raise InvalidInputError("target must not be None")
        _require_str(target, "target")
        if candidates is None:
            raise InvalidInputError("candidates must not be None")
        if isinstance(candidates, str):
            raise InvalidInputError("candidates must be a sequence of strings, not a string")
        names = tuple(candidates)
        for name in names:
            _require_str(name, "candidate")

        if not names:
            logger.debug("No candidates for %r", target)
            return MatchResult.unmapped(target)

        result = self._match_variants(target, names)
        if result is not None:
            return result

        clean_target = self.clean(target)
        clean_names = [self.clean(name) for name in names]

        result = self._match_normalized(target, clean_target, names, clean_names)
        if result is not None:
            return result

        return self._match_containment(target, clean_target, names, clean_names)

    def _match_variants(
        self, target: str, names: Tuple[str, ...]
    ) -> Optional[MatchResult]:
        """Probe the exact spelling variants and special cases in order."""
        available = set(names)
        for variant, kind in self.variants(target):
            if variant in available:
                logger.debug("%r matched %r by %s", target, variant, kind.value)
                return MatchResult(target=target, candidate=variant, score=1.0, kind=kind)
        return None

    def _match_normalized(
        self,
        target: str,
        clean_target: str,
        names: Tuple[str, ...],
        clean_names: List[str],
    ) -> Optional[MatchResult]:
        """Return the first candidate whose cleaned key equals the target's."""
        for name, clean_name in zip(names, clean_names):
            if clean_name == clean_target:
                logger.debug("%r matched %r after normalization", target, name)
                return MatchResult(
                    target=target, candidate=name, score=1.0, kind=MatchKind.NORMALIZED
                )
        return None

    def _match_containment(
        self,
        target: str,
        clean_target: str,
        names: Tuple[str, ...],
        clean_names: List[str],
    ) -> MatchResult:
        """Pick the most similar candidate among those overlapping the target.

        A candidate qualifies when its cleaned key contains the target's
        cleaned key or the reverse. Scores are computed on the original
        strings. A later candidate replaces the running best only when its
        score is strictly greater, so the earliest candidate wins ties.
        """
        qualifying = [
            name
            for name, clean_name in zip(names, clean_names)
            if clean_target in clean_name or clean_name in clean_target
        ]

        if not qualifying:
            logger.debug("No containment candidates for %r", target)
            return MatchResult.unmapped(target)

        scored = [(name, self.similarity(target, name)) for name in qualifying]
        best_name, best_score = reduce(
            lambda best, current: current if current[1] > best[1] else best,
            scored,
        )

        if best_score < self.min_similarity:
            logger.debug(
                "%r best containment match %r scored %.3f, below %.3f",
                target, best_name, best_score, self.min_similarity,
            )
            return MatchResult.unmapped(target)

        logger.debug(
            "%r matched %r by containment (%d candidates, score %.3f)",
            target, best_name, len(qualifying), best_score,
        )
        return MatchResult(
            target=target, candidate=best_name, score=best_score, kind=MatchKind.CONTAINMENT
        )


_DEFAULT_MATCHER = StringMatcher()


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between ``a`` and ``b``."""
    return StringMatcher.edit_distance(a, b)


def similarity(a: str, b: str) -> float:
    """Edit-distance similarity of ``a`` and ``b`` in [0.0, 1.0]."""
    return StringMatcher.similarity(a, b)


def best_match(target: str, candidates: Sequence[str]) -> MatchResult:
    """Match ``target`` against ``candidates`` with the default matcher."""
    return _DEFAULT_MATCHER.best_match(target, candidates)
