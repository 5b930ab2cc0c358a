"""Unit tests for exmap data models."""

import dataclasses

import pytest

from exmap.models import CoverageReport, MappingReport, MatchKind, MatchResult


class TestMatchKind:
    """Test MatchKind enum values."""

    def test_values(self) -> None:
        assert MatchKind.EXACT.value == "exact"
        assert MatchKind.SPECIAL_CASE.value == "special_case"
        assert MatchKind.NORMALIZED.value == "normalized"
        assert MatchKind.CONTAINMENT.value == "containment"
        assert MatchKind.UNMAPPED.value == "unmapped"

    def test_member_count(self) -> None:
        assert len(MatchKind) == 5


class TestMatchResult:
    """Test MatchResult."""

    def test_mapped(self) -> None:
        result = MatchResult("push-up", "Push_Up", 1.0, MatchKind.EXACT)
        assert result.is_mapped

    def test_unmapped_factory(self) -> None:
        result = MatchResult.unmapped("unknown-move")
        assert result.target == "unknown-move"
        assert result.candidate is None
        assert result.score == 0.0
        assert result.kind == MatchKind.UNMAPPED
        assert not result.is_mapped

    def test_frozen(self) -> None:
        result = MatchResult("push-up", "Push_Up", 1.0, MatchKind.EXACT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.candidate = "Pull_Up"

    def test_equality(self) -> None:
        assert MatchResult.unmapped("a") == MatchResult.unmapped("a")


class TestMappingReport:
    """Test MappingReport derived views."""

    def test_mappings_sorted_by_id(self, sample_report: MappingReport) -> None:
        assert list(sample_report.mappings.items()) == [
            ("ab-roller", "Ab_Roller"),
            ("air-bike", "Air_Bike"),
            ("push-up", "Push_Up"),
        ]

    def test_unmapped_in_input_order(self) -> None:
        report = MappingReport(results=[
            MatchResult.unmapped("zz-move"),
            MatchResult("push-up", "Push_Up", 1.0, MatchKind.EXACT),
            MatchResult.unmapped("aa-move"),
        ])
        assert report.unmapped == ["zz-move", "aa-move"]

    def test_mapped_folders_distinct_first_seen(self) -> None:
        report = MappingReport(results=[
            MatchResult("barbell-bench-press", "Barbell_Bench_Press_-_Medium_Grip", 0.6, MatchKind.CONTAINMENT),
            MatchResult("air-bike", "Air_Bike", 1.0, MatchKind.EXACT),
            MatchResult("barbell-bench-press-medium-grip", "Barbell_Bench_Press_-_Medium_Grip", 1.0, MatchKind.NORMALIZED),
        ])
        assert report.mapped_folders == ["Barbell_Bench_Press_-_Medium_Grip", "Air_Bike"]

    def test_total_folders(self, sample_report: MappingReport) -> None:
        assert sample_report.total_folders == 4

    def test_lookup(self, sample_report: MappingReport) -> None:
        assert sample_report.lookup("push-up") == "Push_Up"
        assert sample_report.lookup("mystery-move") is None
        assert sample_report.lookup("not-there") is None

    def test_empty(self) -> None:
        report = MappingReport()
        assert report.mappings == {}
        assert report.unmapped == []
        assert report.mapped_folders == []
        assert report.total_folders == 0


class TestCoverageReport:
    """Test CoverageReport percentages."""

    def test_percentages(self) -> None:
        coverage = CoverageReport(
            with_images=["a", "b", "c"],
            without_images=["d", "e"],
            total_exercises=5,
        )
        assert coverage.percent_with_images() == 60
        assert coverage.percent_without_images() == 40

    def test_rounds_half_up(self) -> None:
        coverage = CoverageReport(with_images=["a"], without_images=["b"] * 7, total_exercises=8)
        assert coverage.percent_with_images() == 13  # 12.5%

    def test_no_exercises(self) -> None:
        coverage = CoverageReport()
        assert coverage.percent_with_images() == 0
        assert coverage.percent_without_images() == 0
