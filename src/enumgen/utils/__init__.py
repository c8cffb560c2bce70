"""Utility functions for enumgen."""

from enumgen.utils.casing import to_pascal_case, to_snake_case, to_title_case
from enumgen.utils.config import ConfigSettings, find_config_file, load_config
from enumgen.utils.file_utils import (
    GENERATED_HEADER,
    is_generated_source,
    read_source_file,
)

__all__ = [
    "ConfigSettings",
    "GENERATED_HEADER",
    "find_config_file",
    "is_generated_source",
    "load_config",
    "read_source_file",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
]
