"""Extractor registry with plugin discovery via entry points.

This module handles discovering and instantiating extraction strategies
from Python entry points, allowing third-party packages to register
custom strategies.
"""

from importlib.metadata import entry_points
from typing import Any, Dict, List, Type

from enumgen.extraction.base import Extractor, ExtractorError

ENTRY_POINT_GROUP = "enumgen.extractors"

# Cache for discovered extractors
_extractor_cache: Dict[str, Type[Extractor]] = {}
_discovery_done: bool = False


def _discover_extractors() -> None:
    """Discover extractors from entry points.

    Uses importlib.metadata to find all registered extractors
    in the 'enumgen.extractors' entry point group.
    """
    global _discovery_done, _extractor_cache

    if _discovery_done:
        return

    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            extractor_class = ep.load()
        except (ImportError, AttributeError):
            # Skip plugins whose optional dependencies are missing
            continue
        if isinstance(extractor_class, type) and issubclass(
            extractor_class, Extractor
        ):
            _extractor_cache.setdefault(ep.name, extractor_class)

    _discovery_done = True


def get_extractor(name: str, **options: Any) -> Extractor:
    """Get an extractor instance by name.

    Args:
        name: The name of the strategy (e.g., "annotation", "tag", "const").
        **options: Keyword arguments passed to the extractor constructor,
                  e.g. ``type_names`` for the const strategy.

    Returns:
        An instance of the requested extractor.

    Raises:
        ExtractorError: If the extractor is not found or rejects the options.

    Example:
        >>> extractor = get_extractor("const", type_names=["Status"])
        >>> enums = extractor.extract(scan_result.files)
    """
    _discover_extractors()

    if name not in _extractor_cache:
        available = ", ".join(sorted(_extractor_cache.keys()))
        raise ExtractorError(
            f"Unknown strategy '{name}'. Available strategies: {available or 'none'}"
        )

    try:
        return _extractor_cache[name](**options)
    except TypeError as e:
        raise ExtractorError(f"Invalid options for strategy '{name}': {e}") from e


def list_extractors() -> List[str]:
    """List all available strategy names.

    Returns:
        A sorted list of available strategy names.

    Example:
        >>> list_extractors()
        ['annotation', 'const', 'tag']
    """
    _discover_extractors()
    return sorted(_extractor_cache.keys())


def register_extractor(name: str, extractor_class: Type[Extractor]) -> None:
    """Register an extractor programmatically.

    This is primarily useful for testing or for registering extractors
    that aren't installed via entry points.

    Args:
        name: The name to register the extractor under.
        extractor_class: The extractor class to register.

    Raises:
        ValueError: If extractor_class is not a subclass of Extractor.
    """
    if not isinstance(extractor_class, type) or not issubclass(
        extractor_class, Extractor
    ):
        raise ValueError(f"{extractor_class} must be a subclass of Extractor")

    _extractor_cache[name] = extractor_class


def clear_registry() -> None:
    """Clear the extractor registry.

    This is primarily useful for testing.
    """
    global _discovery_done, _extractor_cache
    _extractor_cache.clear()
    _discovery_done = False
