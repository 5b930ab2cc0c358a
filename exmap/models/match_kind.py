"""
MatchKind enum for the exercise-to-folder matching pipeline.

The matcher probes candidates in this order, returning on the first hit:
1. Exact (100% score) - A spelling variant of the id equals a folder name
2. Special Case (100% score) - A literal lookup table entry names the folder
3. Normalized (100% score) - Names are equal after cleaning case and delimiters
4. Containment (scaled) - One cleaned name contains the other, scored by similarity
"""

from enum import Enum


class MatchKind(Enum):
    """Encodes how an exercise id was resolved to an image folder."""
    EXACT = "exact"                    # id, id with underscores, or Title_Case id
    SPECIAL_CASE = "special_case"      # Hard-coded marker -> folder table
    NORMALIZED = "normalized"          # Cleaned keys are identical
    CONTAINMENT = "containment"        # Cleaned keys overlap, best similarity wins
    UNMAPPED = "unmapped"              # No candidate qualified
