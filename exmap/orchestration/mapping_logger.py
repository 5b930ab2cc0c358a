"""MappingLogger for recording generator runs in a structured log file.

The log has four sections (header, scan phase, mapping phase, summary)
separated by 65-character rules, so runs can be diffed between asset
updates.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from exmap.models import MappingReport


class MappingLogger:
    """Logger for mapping runs with structured output format.

    Usage:
        with MappingLogger(log_file_path) as logger:
            logger.log_header()
            logger.log_scan_phase(data_file, images_dir, report)
            logger.log_mapping_phase(report)
            logger.log_summary(report, duration)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(self, log_file_path: Optional[Path] = None) -> None:
        """Initialize the MappingLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.

        Raises:
            OSError: If the log file path is not writable.
        """
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"mapping_log_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file's parent directory exists.

        Raises:
            OSError: If the parent directory doesn't exist or is not a directory.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")

    def __enter__(self) -> "MappingLogger":
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        """Get the path to the log file."""
        return self._log_file_path

    def log_header(self) -> None:
        """Write the title and timestamp."""
        self._write_separator()
        self._write_line("Exercise Image Mapper - Mapping Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line("")

    def log_scan_phase(self, data_file: Path, images_dir: Path, report: MappingReport) -> None:
        """Write the inputs and any scanner errors.

        Args:
            data_file: Exercise data file that was read.
            images_dir: Image folder directory that was listed.
            report: MappingReport holding the input counts.
        """
        self._write_separator()
        self._write_line("SCAN PHASE")
        self._write_separator()
        self._write_line(f"Data file: {data_file}")
        self._write_line(f"Images directory: {images_dir}")
        self._write_line(f"Exercises found: {report.total_exercises}")
        self._write_line(f"Distinct exercises: {len(report.results)}")
        self._write_line(f"Image folders found: {report.total_folders}")
        if report.errors:
            self._write_line("Errors:")
            for error in report.errors:
                self._write_line(f"- {error}", indent=2)
        self._write_line("")

    def log_mapping_phase(self, report: MappingReport) -> None:
        """Write one line per exercise: id, folder, match type and score."""
        self._write_separator()
        self._write_line("MAPPING PHASE")
        self._write_separator()
        for result in report.results:
            if result.is_mapped:
                score_pct = int(result.score * 100)
                self._write_line(
                    f"{result.target} -> {result.candidate} ({score_pct}% - {result.kind.value})"
                )
            else:
                self._write_line(f"{result.target} -> UNMAPPED")
                suggestions = report.suggestions.get(result.target)
                if suggestions:
                    self._write_line(f"suggestions: {', '.join(suggestions)}", indent=2)
        self._write_line("")

    def log_summary(self, report: MappingReport, duration: float) -> None:
        """Write the summary section.

        Args:
            report: MappingReport of the run.
            duration: Run duration in seconds.
        """
        by_kind = {}
        for result in report.results:
            by_kind[result.kind.value] = by_kind.get(result.kind.value, 0) + 1

        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Mappings generated: {len(report.mappings)}")
        self._write_line(f"Unmapped exercises: {len(report.unmapped)}")
        for kind, count in sorted(by_kind.items()):
            self._write_line(f"{kind}: {count}", indent=2)
        self._write_line(f"Duration: {self._format_duration(duration)}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_duration(self, seconds: float) -> str:
        """Format duration as "1.25s" below a minute, "5m 23s" above."""
        if seconds < 60:
            return f"{max(seconds, 0.0):.2f}s"
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"

    def _format_timestamp(self, dt: datetime) -> str:
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
