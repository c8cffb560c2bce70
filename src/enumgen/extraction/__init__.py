"""Enum extraction strategies for enumgen.

This package turns scanned source files into canonical EnumDef records.
Strategies are discovered via the 'enumgen.extractors' entry point group.

Built-in strategies:
- `annotation`: ``# enum:name=... values=...`` directive comments
- `tag`: classes carrying an ``EnumTag`` marker field
- `const`: constant blocks prefixed with a declared type name

Example:
    >>> from enumgen.extraction import get_extractor
    >>> extractor = get_extractor("annotation")
    >>> enums = extractor.extract(scan_result.files)
"""

from enumgen.extraction.base import (
    DuplicateEnumValue,
    ExtractionError,
    Extractor,
    ExtractorError,
    MalformedDirective,
    build_enum_def,
)
from enumgen.extraction.config_file import (
    EnumConfigEntry,
    EnumConfigFile,
    load_enum_config,
)
from enumgen.extraction.models import EnumDef, EnumValue, ExtractionReport
from enumgen.extraction.registry import (
    clear_registry,
    get_extractor,
    list_extractors,
    register_extractor,
)

__all__ = [
    # Models
    "EnumDef",
    "EnumValue",
    "ExtractionReport",
    # Base classes
    "Extractor",
    "ExtractorError",
    "ExtractionError",
    "MalformedDirective",
    "DuplicateEnumValue",
    "build_enum_def",
    # Registry functions
    "get_extractor",
    "list_extractors",
    "register_extractor",
    "clear_registry",
    # Configuration files
    "EnumConfigEntry",
    "EnumConfigFile",
    "load_enum_config",
]
