"""Integration tests for MappingGenerator workflows on a real folder tree."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from exmap.config import GeneratorConfig
from exmap.models import MatchKind
from exmap.orchestration import MappingGenerator


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def generator(data_file: Path, images_dir: Path, quiet_console: Console) -> MappingGenerator:
    return MappingGenerator(data_file, images_dir, console=quiet_console)


class TestMappingGeneratorInit:
    """Test constructor validation."""

    def test_missing_data_file(self, temp_dir: Path, images_dir: Path) -> None:
        with pytest.raises(ValueError, match="Data file"):
            MappingGenerator(temp_dir / "missing.ts", images_dir)

    def test_images_dir_not_directory(self, data_file: Path) -> None:
        with pytest.raises(ValueError, match="Images directory"):
            MappingGenerator(data_file, data_file)

    def test_default_config(self, generator: MappingGenerator) -> None:
        assert generator.config == GeneratorConfig()


class TestBuildReport:
    """Test the shared build phase."""

    def test_results_per_distinct_id(self, generator: MappingGenerator) -> None:
        report = generator.build_report()
        assert report.total_exercises == 6
        assert [r.target for r in report.results] == [
            "push-up",
            "34-situp",
            "bench-press-wide",
            "air-bike",
            "unknown-move",
        ]
        assert report.total_folders == 5

    def test_match_kinds(self, generator: MappingGenerator) -> None:
        report = generator.build_report()
        kinds = {r.target: (r.candidate, r.kind) for r in report.results}
        assert kinds["push-up"] == ("Push_Up", MatchKind.EXACT)
        assert kinds["34-situp"] == ("3_4_Sit-Up", MatchKind.SPECIAL_CASE)
        assert kinds["bench-press-wide"] == ("Bench_Press", MatchKind.CONTAINMENT)
        assert kinds["air-bike"] == ("Air_Bike", MatchKind.EXACT)
        assert kinds["unknown-move"] == (None, MatchKind.UNMAPPED)

    def test_unmapped(self, generator: MappingGenerator) -> None:
        assert generator.build_report().unmapped == ["unknown-move"]

    def test_suggestions_only_for_unmapped(self, generator: MappingGenerator) -> None:
        report = generator.build_report()
        assert set(report.suggestions) <= {"unknown-move"}

    def test_suggestions_disabled(self, data_file: Path, images_dir: Path, quiet_console: Console) -> None:
        config = GeneratorConfig(suggestion_limit=0)
        report = MappingGenerator(data_file, images_dir, config=config, console=quiet_console).build_report()
        assert report.suggestions == {}

    def test_min_similarity(self, data_file: Path, images_dir: Path, quiet_console: Console) -> None:
        config = GeneratorConfig(min_similarity=0.9)
        report = MappingGenerator(data_file, images_dir, config=config, console=quiet_console).build_report()
        assert report.unmapped == ["bench-press-wide", "unknown-move"]


class TestGenerate:
    """Test the generate workflow."""

    def test_returns_code(self, generator: MappingGenerator) -> None:
        report, code = generator.generate()
        assert "const folderMap: { [key: string]: string } = {" in code
        assert "  '34-situp': '3_4_Sit-Up'," in code
        assert "  'bench-press-wide': 'Bench_Press'," in code
        assert "// 'unknown-move': 'FOLDER_NAME'," in code
        assert len(report.mappings) == 4

    def test_folder_map_sorted(self, generator: MappingGenerator) -> None:
        _, code = generator.generate()
        block = code.split("};")[0]
        keys = [line.split("'")[1] for line in block.splitlines() if line.startswith("  '")]
        assert keys == sorted(keys)

    def test_writes_output_file(self, generator: MappingGenerator, temp_dir: Path) -> None:
        output = temp_dir / "generated.ts"
        _, code = generator.generate(output=output)
        assert output.read_text(encoding="utf-8") == code

    def test_writes_log(self, generator: MappingGenerator, temp_dir: Path) -> None:
        log_path = temp_dir / "mapping.log"
        generator.generate(log_file_path=log_path)
        content = log_path.read_text()
        assert "MAPPING PHASE" in content
        assert "34-situp -> 3_4_Sit-Up (100% - special_case)" in content

    def test_bad_log_path_is_not_fatal(self, generator: MappingGenerator, temp_dir: Path, capsys) -> None:
        _, code = generator.generate(log_file_path=temp_dir / "missing" / "mapping.log")
        assert "folderMap" in code
        assert "Could not create log file" in capsys.readouterr().err

    def test_displays_summary(self, generator: MappingGenerator, quiet_console: Console) -> None:
        generator.generate()
        output = quiet_console.file.getvalue()
        assert "Found 6 exercises in database" in output
        assert "Found 5 image folders" in output
        assert "Generated 4 mappings" in output


class TestVerify:
    """Test the verify workflow."""

    def test_coverage(self, generator: MappingGenerator) -> None:
        coverage = generator.verify()
        assert coverage.with_images == ["push-up", "34-situp", "bench-press-wide"]
        assert coverage.without_images == ["air-bike", "unknown-move"]
        assert coverage.unused_folders == ["Incline_Bench_Press"]
        assert coverage.total_exercises == 5
        assert coverage.total_folders == 5
        assert coverage.percent_with_images() == 60

    def test_folder_named_after_id(self, temp_dir: Path, quiet_console: Console) -> None:
        """A folder named exactly like the id is used as-is."""
        data = temp_dir / "exercises.ts"
        data.write_text("{ id: 'zz-custom' }")
        images = temp_dir / "imgs"
        (images / "zz-custom" / "images").mkdir(parents=True)
        (images / "zz-custom" / "images" / "0.jpg").write_bytes(b"x")
        coverage = MappingGenerator(data, images, console=quiet_console).verify()
        assert coverage.with_images == ["zz-custom"]
        assert coverage.unused_folders == []
