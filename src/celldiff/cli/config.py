#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the celldiff CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and merging file values with command line
overrides into a :class:`~celldiff.options.DiffConfig`.
"""

import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from celldiff.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from celldiff.exceptions import ConfigFileError
from celldiff.options import DiffConfig

logger = logging.getLogger(__name__)

DEDICATED_CONFIG_FILENAMES = [name for name in CONFIG_FILENAMES if name != "pyproject.toml"]


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.celldiff]`` section from a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigFileError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(str(pyproject_path), f"Invalid TOML in {pyproject_path}: {e}", original_error=e) from e
    except OSError as e:
        raise ConfigFileError(str(pyproject_path), f"Error reading {pyproject_path}: {e}", original_error=e) from e

    section = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigFileError(
            str(pyproject_path),
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(section).__name__}",
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` to the filesystem root, checking each
    directory for ``.celldiff.toml``, ``.celldiff.yaml``, ``.celldiff.yml``,
    ``.celldiff.json`` and finally a ``pyproject.toml`` that has a
    ``[tool.celldiff]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigFileError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in standard locations.

    Searches the current directory and its parents first, then the user's
    home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(str(config_path), f"Invalid TOML in config file {config_path}: {e}", original_error=e) from e


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigFileError(str(config_path), f"Invalid YAML in config file {config_path}: {e}", original_error=e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigFileError(
            str(config_path), f"YAML config file must contain a mapping, got {type(config).__name__}"
        )
    return config


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigFileError(str(config_path), f"Invalid JSON in config file {config_path}: {e}", original_error=e) from e

    if not isinstance(config, dict):
        raise ConfigFileError(
            str(config_path), f"JSON config file must contain an object, got {type(config).__name__}"
        )
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigFileError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigFileError(str(config_path), f"Configuration file does not exist: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise ConfigFileError(
                str(config_path), f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json"
            )
    except OSError as e:
        raise ConfigFileError(str(config_path), f"Error reading config file {config_path}: {e}", original_error=e) from e

    logger.debug("Loaded %d option(s) from %s", len(config), config_path)
    return config


def build_diff_config(file_values: Mapping[str, Any], overrides: Mapping[str, Any]) -> DiffConfig:
    """Merge config file values with command line overrides.

    Overrides whose value is ``None`` are ignored so unset flags fall back
    to the file (and then to the defaults).

    Raises
    ------
    ValidationError
        If any merged value is invalid

    """
    merged: Dict[str, Any] = {str(key).replace("-", "_"): value for key, value in file_values.items()}
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return DiffConfig.from_dict(merged)
