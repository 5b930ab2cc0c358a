"""TypeScript source generation for exercise image mappings.

The CodeEmitter turns a MappingReport into the snippets pasted into the
app's ExerciseCard.tsx and ExerciseInstructions.tsx components:

- ``folderMap``: exercise id -> image folder, sorted by id
- a comment block listing unmapped ids (with suggestions, when known)
- ``imageModules`` for the card: folder -> start image
- ``imageModules`` for the instructions: folder -> start/end/demonstration
"""

from typing import List, Optional

from exmap.config import GeneratorConfig
from exmap.models import MappingReport


def quote(value: str) -> str:
    """Render ``value`` as a single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class CodeEmitter:
    """Renders generated TypeScript text from a MappingReport.

    Args:
        config: Output layout settings. Defaults to GeneratorConfig().

    Example:
        >>> emitter = CodeEmitter()
        >>> code = emitter.render(report)
        >>> print(code)
    """

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()

    def render(self, report: MappingReport) -> str:
        """Render all generated sections, newline-terminated."""
        lines: List[str] = []
        lines.extend(self.render_folder_map(report))
        lines.extend(self.render_unmapped(report))
        lines.append("")
        lines.append("")
        lines.extend(self.render_card_modules(report))
        lines.append("")
        lines.append("")
        lines.extend(self.render_instruction_modules(report))
        return "\n".join(lines) + "\n"

    def render_folder_map(self, report: MappingReport) -> List[str]:
        lines = [
            "// Generated folderMap for ExerciseCard.tsx and ExerciseInstructions.tsx",
            "const folderMap: { [key: string]: string } = {",
        ]
        for exercise_id, folder in report.mappings.items():
            lines.append(f"  {quote(exercise_id)}: {quote(folder)},")
        lines.append("};")
        return lines

    def render_unmapped(self, report: MappingReport) -> List[str]:
        """Comment block for ids that need a manual mapping; empty if none."""
        unmapped = report.unmapped
        if not unmapped:
            return []

        lines = ["", "// Unmapped exercises (need manual mapping):"]
        for exercise_id in unmapped:
            line = f"// {quote(exercise_id)}: 'FOLDER_NAME',"
            suggestions = report.suggestions.get(exercise_id)
            if suggestions:
                line += f"  // suggestions: {', '.join(suggestions)}"
            lines.append(line)
        return lines

    def render_card_modules(self, report: MappingReport) -> List[str]:
        lines = [
            "// Generated imageModules for ExerciseCard.tsx",
            "const imageModules: { [key: string]: any } = {",
        ]
        for folder in report.mapped_folders:
            lines.append(f"  {quote(folder)}: {self._require(folder, self.config.start_image)},")
        lines.append("};")
        return lines

    def render_instruction_modules(self, report: MappingReport) -> List[str]:
        lines = [
            "// Generated imageModules for ExerciseInstructions.tsx",
            "const imageModules: { [key: string]: { [key: string]: any } } = {",
        ]
        for folder in report.mapped_folders:
            lines.append(f"  {quote(folder)}: {{")
            lines.append(f"    start: {self._require(folder, self.config.start_image)},")
            lines.append(f"    end: {self._require(folder, self.config.end_image)},")
            lines.append(f"    demonstration: {self._require(folder, self.config.start_image)},")
            lines.append("  },")
        lines.append("};")
        return lines

    def _require(self, folder: str, image: str) -> str:
        module_path = "/".join(
            (self.config.asset_prefix.rstrip("/"), folder, self.config.image_subdir, image)
        )
        return f"require({quote(module_path)})"
