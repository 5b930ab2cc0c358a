"""Input scanning package for exmap.

This package reads the two inputs of the mapping generator:

- ExerciseSource: Extracts exercise ids from the exercise data file.
- ImageFolderScanner: Lists image folders and checks image availability.

Example:
    >>> from exmap.scanning import ExerciseSource, ImageFolderScanner
    >>> from pathlib import Path
    >>>
    >>> ids = ExerciseSource.read_ids(Path("data/exercises.ts"))
    >>> folders = ImageFolderScanner().list_folders(Path("assets/images/exercises"))
"""

from .exercise_source import ExerciseSource
from .folder_scanner import ImageFolderScanner

__all__ = ["ExerciseSource", "ImageFolderScanner"]
