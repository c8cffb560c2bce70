"""Configuration management for enumgen.

Loads configuration from enumgen.toml in the current working directory.
"""

import tomllib
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ValidationError
from rich.console import Console

console = Console(stderr=True)

CONFIG_FILE_NAME = "enumgen.toml"


class ConfigSettings(BaseModel):
    """Configuration settings for enumgen.

    All fields are optional. None values indicate the setting was not
    specified in the config file.
    """

    strategy: Optional[str] = None
    types: Optional[List[str]] = None
    recursive: Optional[bool] = None
    output_dir: Optional[str] = None
    formatter: Optional[str] = None  # e.g. "ruff format"
    format_output: Optional[bool] = None


def find_config_file(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find enumgen.toml in the current working directory.

    Args:
        start_path: Starting directory to search for config file.
                   Defaults to current working directory.

    Returns:
        Path to config file if found, None otherwise.
    """
    config_path = (start_path or Path.cwd()) / CONFIG_FILE_NAME
    return config_path if config_path.is_file() else None


def _read_settings(config_path: Path) -> ConfigSettings:
    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)
    return ConfigSettings.model_validate(toml_data.get("enumgen", {}))


def load_config(config_path: Optional[Path] = None) -> ConfigSettings:
    """Load the [enumgen] table of enumgen.toml.

    An explicit config_path wins over enumgen.toml in the current working
    directory. With neither, every setting is None.

    A file that cannot be read, is not valid TOML, or holds values of the
    wrong type is reported as a warning on stderr and ignored, so a broken
    config never stops a run. Unknown keys are ignored.

    Args:
        config_path: Optional explicit path to config file.

    Returns:
        ConfigSettings; unset fields are None.
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        return ConfigSettings()

    try:
        return _read_settings(config_path)
    except tomllib.TOMLDecodeError as e:
        problem = f"Failed to parse {config_path}: {e}"
    except ValidationError as e:
        problem = f"Invalid configuration in {config_path}: {e}"
    except OSError as e:
        problem = f"Could not read {config_path}: {e}"

    console.print(f"[yellow]Warning:[/yellow] {problem}")
    console.print("[yellow]Using default settings[/yellow]")
    return ConfigSettings()
