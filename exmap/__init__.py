"""exmap - Exercise Image Mapper.

A build-time tool that resolves exercise ids to image folder names with
fuzzy string matching and generates the app's TypeScript lookup tables.
"""

__version__ = "1.0.0"

from .models import (
    CoverageReport,
    MappingReport,
    MatchKind,
    MatchResult,
)

__all__ = [
    "__version__",
    "MatchKind",
    "MatchResult",
    "MappingReport",
    "CoverageReport",
]


def main() -> None:
    """Entry point for the exmap CLI application.

    Imports and runs the Typer app from the exmap.cli module.
    """
    from exmap.cli import app
    app()
