"""Shared models and enums used across enumgen modules."""

from enum import Enum


class ExtractionStrategy(str, Enum):
    """Built-in strategies for discovering enum definitions."""

    ANNOTATION = "annotation"
    TAG = "tag"
    CONST = "const"


class OutputFormat(str, Enum):
    """Output format for the inspect command."""

    TEXT = "text"
    JSON = "json"
