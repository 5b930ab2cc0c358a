"""Workflow orchestration package for exmap.

This package contains orchestration components for mapping runs:
- MappingLogger: Structured logging of mapping runs to log files.
- MappingGenerator: Central coordinator for generate and verify workflows.
"""

from exmap.orchestration.mapping_logger import MappingLogger
from exmap.orchestration.mapping_generator import MappingGenerator

__all__ = ["MappingLogger", "MappingGenerator"]
