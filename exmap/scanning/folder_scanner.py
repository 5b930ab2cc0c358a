"""Image folder listing for the mapping generator.

This module provides the ImageFolderScanner class, which lists the exercise
image folders under a base directory and checks for individual images.

Example:
    >>> from exmap.scanning import ImageFolderScanner
    >>> scanner = ImageFolderScanner()
    >>> folders = scanner.list_folders(Path("assets/images/exercises"))
    >>> for name in folders:
    ...     print(name)
"""

from pathlib import Path
from typing import List


class ImageFolderScanner:
    """Lists exercise image folders and collects errors instead of raising.

    Attributes:
        image_subdir: Directory inside each exercise folder holding images.
        _errors: List of error messages encountered during scanning.

    Example:
        >>> scanner = ImageFolderScanner()
        >>> names = scanner.list_folders(Path("/data/exercises"))
        >>> if scanner.get_errors():
        ...     print("Scan had problems")
    """

    def __init__(self, image_subdir: str = "images") -> None:
        """Initialize the ImageFolderScanner.

        Args:
            image_subdir: Name of the image directory inside each exercise
                folder. Defaults to ``"images"``.
        """
        self.image_subdir = image_subdir
        self._errors: List[str] = []

    def list_folders(self, base_path: Path) -> List[str]:
        """List the names of the immediate subdirectories of ``base_path``.

        Files are skipped. Names are sorted so runs are reproducible across
        filesystems.

        Args:
            base_path: Directory containing one folder per exercise.

        Returns:
            Sorted folder names, or an empty list if the base path cannot be
            read (the reason is recorded in ``get_errors``).
        """
        result: List[str] = []

        try:
            resolved_path = Path(base_path).resolve()

            if not resolved_path.exists():
                self._errors.append(f"Base path not found: {base_path}")
                return result

            if not resolved_path.is_dir():
                self._errors.append(f"Base path is not a directory: {base_path}")
                return result

            for child in resolved_path.iterdir():
                try:
                    if child.is_dir():
                        result.append(child.name)
                except OSError as e:
                    self._errors.append(f"Error accessing {child}: {e}")

        except PermissionError:
            self._errors.append(f"Permission denied accessing base path: {base_path}")
        except OSError as e:
            self._errors.append(f"Error scanning base path {base_path}: {e}")

        result.sort()
        return result

    def image_path(self, base_path: Path, folder: str, image: str) -> Path:
        """Build the path of ``image`` inside an exercise folder."""
        return Path(base_path) / folder / self.image_subdir / image

    def has_image(self, base_path: Path, folder: str, image: str) -> bool:
        """Check that an exercise folder exists and contains ``image``.

        Args:
            base_path: Directory containing the exercise folders.
            folder: Exercise folder name.
            image: Image file name, e.g. ``"0.jpg"``.

        Returns:
            True if both the folder and the image file exist.
        """
        folder_path = Path(base_path) / folder
        try:
            return folder_path.is_dir() and self.image_path(base_path, folder, image).is_file()
        except OSError as e:
            self._errors.append(f"Error accessing {folder_path}: {e}")
            return False

    def get_errors(self) -> List[str]:
        """Get list of errors encountered during scanning operations.

        Returns:
            List of error message strings.
        """
        return self._errors.copy()

    def clear_errors(self) -> None:
        """Clear the list of accumulated errors."""
        self._errors.clear()
