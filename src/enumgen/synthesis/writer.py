"""Writing generated modules to disk and running an external formatter."""

import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from enumgen.synthesis.synthesizer import output_filename

DEFAULT_FORMATTER = "ruff format"


class WriteError(Exception):
    """Exception raised when a generated module cannot be written."""

    pass


class FormatterError(Exception):
    """Exception raised when the external formatter fails."""

    pass


def write_enum_module(directory: Path, enum_name: str, source: str) -> Path:
    """
    Write a generated module, replacing any previous output for the enum.

    Args:
        directory: Output directory (created if missing)
        enum_name: Enum name, used to derive the file name
        source: Generated Python source

    Returns:
        Path of the written file

    Raises:
        WriteError: If the directory or file cannot be written
    """
    path = directory / output_filename(enum_name)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
    except OSError as e:
        raise WriteError(f"Failed to write {path}: {e}") from e
    return path


def parse_formatter_command(raw: Optional[str]) -> List[str]:
    """Split a formatter command line such as "ruff format" into arguments."""
    if not raw:
        return []
    return shlex.split(raw)


def run_formatter(paths: Sequence[Path], command: Sequence[str]) -> bool:
    """
    Run an external formatter over generated files.

    Args:
        paths: Files to format
        command: Formatter command and arguments; file paths are appended

    Returns:
        True if the formatter ran, False if there was nothing to do or the
        executable is not installed

    Raises:
        FormatterError: If the formatter exits with a non-zero status
    """
    if not command or not paths:
        return False

    executable = shutil.which(command[0])
    if executable is None:
        return False

    args = [executable, *command[1:], *(str(path) for path in paths)]
    try:
        completed = subprocess.run(args, capture_output=True, text=True, check=False)
    except OSError as e:
        raise FormatterError(f"Could not run formatter '{command[0]}': {e}") from e

    if completed.returncode != 0:
        detail = (completed.stderr or completed.stdout).strip()
        raise FormatterError(
            f"Formatter '{' '.join(command)}' failed with exit code "
            f"{completed.returncode}: {detail}"
        )

    return True
