"""Exercise id extraction from the exercise data file.

The data file is application source text in which every exercise is an
object literal with an ``id: '<slug>'`` entry.

Example:
    >>> from exmap.scanning import ExerciseSource
    >>> ExerciseSource.extract_ids("{ id: 'push-up', name: 'Push Up' }")
    ['push-up']
"""

import logging
import re
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class ExerciseSource:
    """Reads exercise ids from an exercise data file."""

    _ID_PATTERN = re.compile(r"id: '([^']+)'")

    @classmethod
    def extract_ids(cls, text: str) -> List[str]:
        """Return every exercise id in ``text``, in order, duplicates included."""
        return cls._ID_PATTERN.findall(text)

    @classmethod
    def read_ids(cls, data_file: Path) -> List[str]:
        """Read ``data_file`` as UTF-8 and extract its exercise ids.

        Args:
            data_file: Path to the exercise data file.

        Returns:
            Exercise ids in file order.

        Raises:
            OSError: If the file cannot be read.
        """
        text = Path(data_file).read_text(encoding="utf-8")
        ids = cls.extract_ids(text)
        logger.info("Read %d exercise ids from %s", len(ids), data_file)
        return ids
