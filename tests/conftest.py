"""Pytest fixtures for exmap tests."""

import io
import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional

import pytest
from rich.console import Console

from exmap.matching import StringMatcher
from exmap.models import MappingReport, MatchKind, MatchResult
from exmap.ui import ReportTUI


EXERCISE_DATA = """\
import { Exercise } from '@/types';

export const exercises: Exercise[] = [
  { id: 'push-up', name: 'Push Up', muscle: 'chest' },
  { id: '34-situp', name: '3/4 Sit-Up', muscle: 'abs' },
  { id: 'bench-press-wide', name: 'Wide Grip Bench Press', muscle: 'chest' },
  { id: 'air-bike', name: 'Air Bike', muscle: 'cardio' },
  { id: 'unknown-move', name: 'Unknown Move', muscle: 'none' },
  { id: 'push-up', name: 'Push Up (duplicate)', muscle: 'chest' },
];
"""

# Folder name -> images present in its images/ directory (None: no images/ dir)
IMAGE_FOLDERS: Dict[str, Optional[List[str]]] = {
    "Push_Up": ["0.jpg", "1.jpg"],
    "3_4_Sit-Up": ["0.jpg", "1.jpg"],
    "Bench_Press": ["0.jpg"],
    "Incline_Bench_Press": ["0.jpg", "1.jpg"],
    "Air_Bike": None,
}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """Write the sample exercise data file.

    Contains six entries: five distinct ids and a duplicate 'push-up'.
    """
    path = temp_dir / "exercises.ts"
    path.write_text(EXERCISE_DATA, encoding="utf-8")
    return path


@pytest.fixture
def images_dir(temp_dir: Path) -> Path:
    """Create the sample image folder tree.

    Creates:
        images/
        ├── 3_4_Sit-Up/images/{0,1}.jpg
        ├── Air_Bike/                 (no images)
        ├── Bench_Press/images/0.jpg
        ├── Incline_Bench_Press/images/{0,1}.jpg
        ├── Push_Up/images/{0,1}.jpg
        └── README.txt                (file, not a folder)
    """
    base = temp_dir / "images"
    base.mkdir()
    for folder, images in IMAGE_FOLDERS.items():
        folder_path = base / folder
        folder_path.mkdir()
        if images is None:
            continue
        (folder_path / "images").mkdir()
        for image in images:
            (folder_path / "images" / image).write_bytes(b"\xff\xd8\xff")
    (base / "README.txt").write_text("not an exercise")
    return base


@pytest.fixture
def matcher() -> StringMatcher:
    """Matcher with the default special cases and no similarity floor."""
    return StringMatcher()


@pytest.fixture
def string_console() -> Console:
    """Rich Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, force_terminal=False)


@pytest.fixture
def tui(string_console: Console) -> ReportTUI:
    return ReportTUI(console=string_console)


@pytest.fixture
def sample_report() -> MappingReport:
    """A MappingReport with three mapped ids and one unmapped id."""
    return MappingReport(
        results=[
            MatchResult("push-up", "Push_Up", 1.0, MatchKind.EXACT),
            MatchResult("air-bike", "Air_Bike", 1.0, MatchKind.EXACT),
            MatchResult("mystery-move", None, 0.0, MatchKind.UNMAPPED),
            MatchResult("ab-roller", "Ab_Roller", 0.75, MatchKind.CONTAINMENT),
        ],
        total_exercises=4,
        folders=["Ab_Roller", "Air_Bike", "Mystery_Box", "Push_Up"],
        suggestions={"mystery-move": ["Mystery_Box"]},
    )
