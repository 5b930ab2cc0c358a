"""MappingGenerator for coordinating the generate and verify workflows.

This module provides the MappingGenerator class, which wires together
ExerciseSource, ImageFolderScanner, StringMatcher, CodeEmitter, ReportTUI
and MappingLogger.

Example:
    from exmap.orchestration import MappingGenerator
    from pathlib import Path

    generator = MappingGenerator(
        data_file=Path("data/exercises.ts"),
        images_dir=Path("assets/images/exercises"),
    )

    # Generate TypeScript mappings
    report, code = generator.generate()

    # Check image coverage
    coverage = generator.verify()
"""

import logging
import sys
import time
from pathlib import Path
from typing import Optional, Tuple

from rich.console import Console

from exmap.config import GeneratorConfig
from exmap.generation import CodeEmitter
from exmap.matching import StringMatcher, suggest_folders
from exmap.models import CoverageReport, MappingReport
from exmap.orchestration.mapping_logger import MappingLogger
from exmap.scanning import ExerciseSource, ImageFolderScanner
from exmap.ui import ReportTUI

logger = logging.getLogger(__name__)


class MappingGenerator:
    """Orchestrates the generate and verify workflows.

    Both workflows share a build phase that reads the exercise ids, lists
    the image folders and matches each distinct id. ``generate`` then renders
    TypeScript; ``verify`` checks which exercises have images on disk.

    Attributes:
        data_file: Exercise data file containing ``id: '<slug>'`` entries.
        images_dir: Directory with one image folder per exercise.
        config: Output layout and matching settings.
        verbose: Whether to display per-match details.
    """

    def __init__(
        self,
        data_file: Path,
        images_dir: Path,
        config: Optional[GeneratorConfig] = None,
        verbose: bool = False,
        console: Optional[Console] = None,
    ) -> None:
        """Initialize the MappingGenerator.

        Args:
            data_file: Path to the exercise data file.
            images_dir: Path to the exercise image folders.
            config: Optional GeneratorConfig. Defaults to GeneratorConfig().
            verbose: If True, display additional details during execution.
            console: Optional Rich Console for status output.

        Raises:
            ValueError: If data_file is not a file or images_dir is not a
                directory.
        """
        data_file = Path(data_file)
        images_dir = Path(images_dir)
        if not data_file.is_file():
            raise ValueError(f"Data file does not exist: {data_file}")
        if not images_dir.is_dir():
            raise ValueError(f"Images directory is not a directory: {images_dir}")

        self.data_file = data_file
        self.images_dir = images_dir
        self.config = config or GeneratorConfig()
        self.verbose = verbose

        self._scanner = ImageFolderScanner(image_subdir=self.config.image_subdir)
        self._matcher = StringMatcher(
            special_cases=self.config.special_cases,
            min_similarity=self.config.min_similarity,
        )
        self._emitter = CodeEmitter(self.config)
        self._tui = ReportTUI(console)

    def build_report(self) -> MappingReport:
        """Read inputs and match every distinct exercise id.

        Returns:
            MappingReport with one result per distinct id, in file order.

        Raises:
            OSError: If the data file cannot be read.
        """
        ids = ExerciseSource.read_ids(self.data_file)
        distinct_ids = list(dict.fromkeys(ids))
        if len(distinct_ids) != len(ids):
            logger.warning(
                "%d duplicate exercise ids in %s",
                len(ids) - len(distinct_ids), self.data_file,
            )

        self._scanner.clear_errors()
        folders = self._scanner.list_folders(self.images_dir)
        logger.info("Found %d image folders in %s", len(folders), self.images_dir)

        report = MappingReport(
            total_exercises=len(ids),
            folders=folders,
            errors=self._scanner.get_errors(),
        )
        for exercise_id in distinct_ids:
            report.results.append(self._matcher.best_match(exercise_id, folders))

        if self.config.suggestion_limit > 0:
            for exercise_id in report.unmapped:
                suggestions = suggest_folders(
                    exercise_id,
                    folders,
                    limit=self.config.suggestion_limit,
                    score_cutoff=self.config.suggestion_cutoff,
                )
                if suggestions:
                    report.suggestions[exercise_id] = suggestions

        logger.info(
            "Mapped %d of %d exercises", len(report.mappings), len(report.results)
        )
        return report

    def generate(
        self,
        output: Optional[Path] = None,
        log_file_path: Optional[Path] = None,
    ) -> Tuple[MappingReport, str]:
        """Execute the generate workflow.

        Args:
            output: Optional file to write the generated code to.
            log_file_path: Optional path for a structured run log. No log is
                written when omitted.

        Returns:
            Tuple of (report, generated_code).

        Raises:
            OSError: If the data file cannot be read or the output file
                cannot be written.
        """
        start_time = time.time()
        report = self.build_report()

        self._tui.display_inputs(report.total_exercises, report.total_folders)
        self._tui.display_mapping_summary(report, verbose=self.verbose)

        code = self._emitter.render(report)
        if output is not None:
            Path(output).write_text(code, encoding="utf-8")
            logger.info("Wrote generated code to %s", output)

        if log_file_path is not None:
            self._write_log(report, log_file_path, time.time() - start_time)

        return report, code

    def verify(self) -> CoverageReport:
        """Execute the verify workflow.

        Each exercise resolves to its mapped folder, or to its own id when
        unmapped, and counts as covered when that folder holds the start
        image.

        Returns:
            CoverageReport with covered, uncovered and unused folders.
        """
        report = self.build_report()
        coverage = CoverageReport(
            total_exercises=len(report.results),
            total_folders=report.total_folders,
        )

        used_folders = set()
        for result in report.results:
            folder = result.candidate or result.target
            used_folders.add(folder)
            if self._scanner.has_image(self.images_dir, folder, self.config.start_image):
                coverage.with_images.append(result.target)
            else:
                coverage.without_images.append(result.target)

        coverage.unused_folders = [f for f in report.folders if f not in used_folders]

        self._tui.display_inputs(report.total_exercises, report.total_folders)
        self._tui.display_coverage(coverage)

        if self.verbose and self._scanner.get_errors():
            self._tui.console.print("[yellow]Scanner warnings:[/yellow]")
            for error in self._scanner.get_errors():
                self._tui.console.print(f"  [dim]- {error}[/dim]")

        return coverage

    def _write_log(self, report: MappingReport, log_file_path: Path, duration: float) -> None:
        try:
            with MappingLogger(log_file_path) as run_log:
                run_log.log_header()
                run_log.log_scan_phase(self.data_file, self.images_dir, report)
                run_log.log_mapping_phase(report)
                run_log.log_summary(report, duration)
                if self.verbose:
                    self._tui.console.print(
                        f"[dim]Log file: {run_log.get_log_path()}[/dim]"
                    )
        except OSError as e:
            print(f"Warning: Could not create log file: {e}", file=sys.stderr)
