"""
Exercise Image Mapper - CLI Interface.

A command-line interface for mapping exercise ids to image folders and
generating the TypeScript lookup tables used by the app.

Usage Examples:
    # Generate mappings to stdout
    python -m exmap generate data/exercises.ts assets/images/exercises

    # Generate into a file and keep a run log
    python -m exmap generate data/exercises.ts assets/images/exercises \\
        --output folderMap.generated.ts --log-file mapping.log

    # Check which exercises have images
    python -m exmap verify data/exercises.ts assets/images/exercises

    # Try a single id against some folder names
    python -m exmap match push-up Push_Up Pull_Up

    # Unit conversions
    python -m exmap units height --feet 5 --inches 10 --to metric
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from exmap.config import GeneratorConfig
from exmap.matching import StringMatcher
from exmap.orchestration import MappingGenerator
from exmap.ui import ReportTUI
from exmap.units import UnitSystem, format_height, format_weight

__version__ = "1.0.0"

# Initialize Typer app
app = typer.Typer(
    name="exmap",
    help="Exercise Image Mapper - Map exercise ids to image folders.",
    add_completion=False,
    no_args_is_help=True,
)

units_app = typer.Typer(
    help="Height and weight unit conversions.",
    no_args_is_help=True,
)
app.add_typer(units_app, name="units")

# Status output goes to stderr so generated code on stdout can be redirected
console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"Exercise Image Mapper v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def validate_data_file(data_file: Path) -> None:
    """
    Validate that the exercise data file exists and is a file.

    Raises:
        typer.Exit: If validation fails with descriptive error message.
    """
    if not data_file.exists():
        console.print(f"[red]Error:[/red] Data file does not exist: {data_file}")
        raise typer.Exit(1)

    if not data_file.is_file():
        console.print(f"[red]Error:[/red] Data file is not a file: {data_file}")
        raise typer.Exit(1)


def validate_images_dir(images_dir: Path) -> None:
    """
    Validate that the images directory exists and is a directory.

    Raises:
        typer.Exit: If validation fails with descriptive error message.
    """
    if not images_dir.exists():
        console.print(f"[red]Error:[/red] Images directory does not exist: {images_dir}")
        raise typer.Exit(1)

    if not images_dir.is_dir():
        console.print(f"[red]Error:[/red] Images path is not a directory: {images_dir}")
        raise typer.Exit(1)


def validate_similarity(value: float) -> float:
    """
    Validate similarity threshold is within valid range.

    Raises:
        typer.BadParameter: If value is out of range.
    """
    if not 0.0 <= value <= 100.0:
        raise typer.BadParameter("Similarity must be between 0 and 100")
    return value


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Exercise Image Mapper - Map exercise ids to image folders."""
    pass


@app.command()
def generate(
    data_file: Path = typer.Argument(
        ...,
        help="Exercise data file containing id: '<slug>' entries.",
    ),
    images_dir: Path = typer.Argument(
        ...,
        help="Directory with one image folder per exercise.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write generated code to this file instead of stdout.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        "-l",
        help="Path for a structured run log.",
    ),
    min_similarity: float = typer.Option(
        0.0,
        "--min-similarity",
        "-s",
        help="Minimum similarity for fuzzy matches (0-100).",
        callback=validate_similarity,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Generate folderMap and imageModules source for the app.

    Matches every exercise id against the image folder names and prints
    the generated TypeScript. Unmapped ids are listed as comments for
    manual follow-up.
    """
    validate_data_file(data_file)
    validate_images_dir(images_dir)
    setup_logging(verbose)

    try:
        generator = MappingGenerator(
            data_file=data_file,
            images_dir=images_dir,
            config=GeneratorConfig(min_similarity=min_similarity / 100.0),
            verbose=verbose,
            console=console,
        )
        _, code = generator.generate(output=output, log_file_path=log_file)

    except KeyboardInterrupt:
        console.print("\n[yellow]Generation interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except PermissionError as e:
        console.print(f"[red]Error:[/red] Permission denied - {e}")
        raise typer.Exit(1)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(code, nl=False)
    else:
        console.print(f"[dim]Generated code written to: {output}[/dim]")

    if log_file:
        console.print(f"[dim]Log written to: {log_file}[/dim]")


@app.command()
def verify(
    data_file: Path = typer.Argument(
        ...,
        help="Exercise data file containing id: '<slug>' entries.",
    ),
    images_dir: Path = typer.Argument(
        ...,
        help="Directory with one image folder per exercise.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Check that every exercise resolves to a folder with images.

    Exits with status 1 when any exercise is missing its start image.
    """
    validate_data_file(data_file)
    validate_images_dir(images_dir)
    setup_logging(verbose)

    try:
        generator = MappingGenerator(
            data_file=data_file,
            images_dir=images_dir,
            verbose=verbose,
            console=console,
        )
        coverage = generator.verify()

    except KeyboardInterrupt:
        console.print("\n[yellow]Verification interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if coverage.without_images:
        raise typer.Exit(1)


@app.command()
def match(
    target: str = typer.Argument(..., help="Exercise id to resolve."),
    candidates: List[str] = typer.Argument(..., help="Candidate folder names."),
    min_similarity: float = typer.Option(
        0.0,
        "--min-similarity",
        "-s",
        help="Minimum similarity for fuzzy matches (0-100).",
        callback=validate_similarity,
    ),
) -> None:
    """
    Resolve one exercise id against the given folder names.

    Prints the chosen folder on stdout; exits with status 1 when unmapped.
    """
    matcher = StringMatcher(min_similarity=min_similarity / 100.0)
    result = matcher.best_match(target, candidates)
    ReportTUI(console).display_match(result)

    if not result.is_mapped:
        raise typer.Exit(1)

    typer.echo(result.candidate)


@units_app.command("height")
def units_height(
    feet: Optional[float] = typer.Option(None, "--feet", help="Height in feet."),
    inches: Optional[float] = typer.Option(None, "--inches", help="Remaining inches."),
    cm: Optional[float] = typer.Option(None, "--cm", help="Height in centimetres."),
    to: UnitSystem = typer.Option(UnitSystem.IMPERIAL, "--to", help="Unit system to display."),
) -> None:
    """Display a height in the chosen unit system."""
    if feet is not None and inches is None:
        inches = 0.0
    text = format_height(feet, inches, cm, preferred=to)
    if not text:
        console.print("[red]Error:[/red] Provide --feet/--inches or --cm.")
        raise typer.Exit(1)
    typer.echo(text)


@units_app.command("weight")
def units_weight(
    pounds: Optional[float] = typer.Option(None, "--pounds", help="Weight in pounds."),
    kg: Optional[float] = typer.Option(None, "--kg", help="Weight in kilograms."),
    to: UnitSystem = typer.Option(UnitSystem.IMPERIAL, "--to", help="Unit system to display."),
) -> None:
    """Display a weight in the chosen unit system."""
    text = format_weight(pounds, kg, preferred=to)
    if not text:
        console.print("[red]Error:[/red] Provide --pounds or --kg.")
        raise typer.Exit(1)
    typer.echo(text)


if __name__ == "__main__":
    app()
