"""File utility functions for enumgen."""

from pathlib import Path

GENERATED_HEADER = "# Code generated by enumgen; DO NOT EDIT."


def read_source_file(file_path: Path) -> str:
    """
    Read a Python source file as text.

    A leading UTF-8 byte order mark is dropped, as the interpreter does when
    it loads the same file.

    Args:
        file_path: Path to the source file to read

    Returns:
        The decoded source text

    Raises:
        OSError: If the file is missing, is a directory, or cannot be read
        UnicodeDecodeError: If the file is not UTF-8
    """
    with open(file_path, "r", encoding="utf-8-sig") as f:
        return f.read()


def is_generated_source(source: str) -> bool:
    """Return True if the source starts with the enumgen generated header."""
    first_line = source.split("\n", 1)[0].strip()
    return first_line == GENERATED_HEADER
