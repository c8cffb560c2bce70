"""Base classes for the enum extraction system.

This module defines the abstract interface for extraction strategies and
the exceptions raised while recognizing enum definitions.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from enumgen.extraction.models import EnumDef, EnumValue
from enumgen.scanning.models import SourceFile


class ExtractorError(Exception):
    """Exception raised when an extractor cannot be found or configured."""

    pass


class ExtractionError(Exception):
    """Base exception for failures while extracting enum definitions."""

    pass


class MalformedDirective(ExtractionError):
    """Exception raised when an enum directive is missing keys or values."""

    pass


class DuplicateEnumValue(ExtractionError):
    """Exception raised when two values map to the same constant name."""

    pass


class Extractor(ABC):
    """Abstract base class for enum extraction strategies.

    All strategies consume the same scanned files and return canonical
    EnumDef records. Strategies are discovered via entry points and are
    selected by name at configuration time.

    Example:
        >>> class MyExtractor(Extractor):
        ...     @property
        ...     def name(self) -> str:
        ...         return "my-extractor"
        ...
        ...     def extract(self, files):
        ...         return []
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the strategy name.

        This name is used to select the strategy in configuration and
        CLI options.

        Returns:
            The unique name of this strategy.
        """
        pass

    @abstractmethod
    def extract(self, files: Sequence[SourceFile]) -> List[EnumDef]:
        """Extract enum definitions from scanned source files.

        Args:
            files: Scanned files, in scan order.

        Returns:
            Enum definitions in discovery order. Sources that describe no
            enum contribute nothing.

        Raises:
            ExtractionError: If a source describes an enum incorrectly.
        """
        pass


def build_enum_def(
    name: str,
    values: Sequence[EnumValue],
    plural: Optional[str] = None,
    location: str = "",
) -> EnumDef:
    """Create an EnumDef, reporting duplicate constants as DuplicateEnumValue.

    Args:
        name: Enum base name.
        values: Values in declaration order (must be non-empty).
        plural: Optional plural for the all-values collection.
        location: "path:line" prefix used in error messages.

    Returns:
        The validated EnumDef.

    Raises:
        DuplicateEnumValue: If two values share a constant name.
    """
    seen = set()
    for value in values:
        if value.constant_name in seen:
            prefix = f"{location}: " if location else ""
            raise DuplicateEnumValue(
                f"{prefix}enum {name} declares constant "
                f"{value.constant_name!r} more than once"
            )
        seen.add(value.constant_name)

    return EnumDef(name=name, values=list(values), plural=plural)
