"""Unit tests for RapidFuzz-based folder suggestions."""

import pytest

from exmap.matching import suggest_folders


class TestSuggestFolders:
    """Test suggest_folders ranking and validation."""

    def test_reordered_words_rank_first(self) -> None:
        """Token order and delimiters do not matter."""
        result = suggest_folders("band-pull-apart", ["Air_Bike", "Pull_Apart_Band", "Band_Skull_Crusher"])
        assert result[0] == "Pull_Apart_Band"

    def test_cutoff_filters_weak_matches(self) -> None:
        result = suggest_folders("band-pull-apart", ["Pull_Apart_Band", "Air_Bike"], score_cutoff=90.0)
        assert result == ["Pull_Apart_Band"]

    def test_limit_respected(self) -> None:
        folders = ["Push_Up", "Push_Ups", "Push_Up_Wide", "Push_Up_Close"]
        result = suggest_folders("push-up", folders, limit=2, score_cutoff=0.0)
        assert len(result) == 2

    def test_empty_candidates(self) -> None:
        assert suggest_folders("push-up", []) == []

    def test_nothing_above_cutoff(self) -> None:
        assert suggest_folders("push-up", ["Zottman_Curl"], score_cutoff=95.0) == []

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError):
            suggest_folders("push-up", ["Push_Up"], limit=0)

    def test_invalid_cutoff(self) -> None:
        with pytest.raises(ValueError):
            suggest_folders("push-up", ["Push_Up"], score_cutoff=101.0)
