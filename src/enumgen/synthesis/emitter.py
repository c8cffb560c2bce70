"""Drive synthesis, writing and formatting for a set of enum definitions."""

from pathlib import Path
from typing import List, Optional, Sequence

from enumgen.extraction.models import EnumDef
from enumgen.synthesis.synthesizer import EnumSynthesizer
from enumgen.synthesis.writer import run_formatter, write_enum_module


class EnumEmitter:
    """Render, write and format enum modules one at a time.

    Enums are processed in order and the first failure stops the run. Files
    written for earlier enums are left in place.
    """

    def __init__(
        self,
        output_dir: Path,
        synthesizer: Optional[EnumSynthesizer] = None,
        formatter: Optional[Sequence[str]] = None,
    ):
        """
        Initialize the emitter.

        Args:
            output_dir: Directory receiving the generated modules
            synthesizer: Synthesizer to render with (default template if None)
            formatter: Formatter command run after each write; None or empty
                      disables formatting
        """
        self.output_dir = output_dir
        self.synthesizer = synthesizer or EnumSynthesizer()
        self.formatter = list(formatter or [])
        self.formatted_files: List[Path] = []

    def emit(self, enum_def: EnumDef, package: str) -> Path:
        """
        Render and write a single enum module.

        Args:
            enum_def: Enum to generate
            package: Package name for the generated module

        Returns:
            Path of the written file

        Raises:
            SynthesisError: If rendering fails
            WriteError: If writing fails
            FormatterError: If the formatter fails
        """
        source = self.synthesizer.render(enum_def, package)
        path = write_enum_module(self.output_dir, enum_def.name, source)
        if run_formatter([path], self.formatter):
            self.formatted_files.append(path)
        return path

    def emit_all(self, enum_defs: Sequence[EnumDef], package: str) -> List[Path]:
        """Emit every enum in order and return the written paths."""
        return [self.emit(enum_def, package) for enum_def in enum_defs]
