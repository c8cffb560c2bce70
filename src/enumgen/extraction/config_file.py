"""Enum configuration files: an alternative to scanning for directives.

The file lists enums explicitly::

    {
      "package": "enums",
      "enums": [
        {"name": "Role", "plural": "Roles",
         "values": {"Admin": "admin", "User": "user"}}
      ]
    }

JSON, YAML and TOML files are accepted. Keys of ``values`` are constant
names and are kept in file order.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from enumgen.extraction.base import MalformedDirective, build_enum_def
from enumgen.extraction.models import EnumDef, EnumValue


class EnumConfigEntry(BaseModel):
    """One enum listed in a configuration file."""

    name: str = Field(..., min_length=1)
    plural: Optional[str] = None
    values: Dict[str, str] = Field(default_factory=dict)


class EnumConfigFile(BaseModel):
    """The contents of an enum configuration file."""

    package: str = ""
    enums: List[EnumConfigEntry] = Field(default_factory=list)

    def to_enum_defs(self) -> List[EnumDef]:
        """
        Convert the configured entries to EnumDef records.

        Returns:
            One EnumDef per entry, in file order

        Raises:
            MalformedDirective: If an entry lists no values
        """
        enum_defs = []
        for entry in self.enums:
            if not entry.values:
                raise MalformedDirective(f"enum {entry.name} has no values")
            values = [
                EnumValue(constant_name=constant, string_value=value)
                for constant, value in entry.values.items()
            ]
            enum_defs.append(build_enum_def(entry.name, values, plural=entry.plural))
        return enum_defs


def _read_data(path: Path) -> Any:
    suffix = path.suffix.lower()

    if suffix == ".json":
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedDirective(f"Invalid JSON in {path}: {e}") from e

    if suffix in (".yaml", ".yml"):
        try:
            import yaml
        except ImportError:
            raise MalformedDirective(
                f"Cannot load YAML file {path}: PyYAML is not installed. "
                "Install it with: pip install 'enumgen[yaml]'"
            )
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MalformedDirective(f"Invalid YAML in {path}: {e}") from e

    if suffix == ".toml":
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise MalformedDirective(f"Invalid TOML in {path}: {e}") from e

    raise MalformedDirective(
        f"Unsupported enum config format: {suffix}. Use .json, .yaml, .yml, or .toml"
    )


def load_enum_config(path: Path) -> EnumConfigFile:
    """Load an enum configuration file.

    Args:
        path: Path to a .json, .yaml, .yml or .toml file.

    Returns:
        The validated EnumConfigFile.

    Raises:
        MalformedDirective: If the file is missing, unreadable, cannot be
                            parsed, or does not match the expected shape.
    """
    if not path.exists():
        raise MalformedDirective(f"Enum config file not found: {path}")

    try:
        data = _read_data(path)
    except OSError as e:
        raise MalformedDirective(f"Could not read {path}: {e}") from e

    if not isinstance(data, dict):
        raise MalformedDirective(
            f"Enum config {path} must contain a mapping, got {type(data).__name__}"
        )

    try:
        return EnumConfigFile.model_validate(data)
    except ValidationError as e:
        raise MalformedDirective(f"Invalid enum config in {path}: {e}") from e
