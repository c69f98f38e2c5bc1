#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Settings discovery and loading for strtools.

strtools has no runtime knobs for the string helpers themselves; the
settings cover how an application wires up the library's logging. They
are read from, in priority order (highest first):

1. ``STRTOOLS_LOG_LEVEL``, ``STRTOOLS_LOG_FILE`` and ``STRTOOLS_TRACE_MODE``
   environment variables
2. An explicit settings file, or the file named by ``STRTOOLS_CONFIG``
3. An auto-discovered ``.strtools.toml``, ``.strtools.yaml``,
   ``.strtools.yml``, ``.strtools.json`` or ``pyproject.toml`` with a
   ``[tool.strtools]`` table, searched from the working directory up to
   the filesystem root and then in the home directory

Examples
--------
    >>> from strtools.config import load_settings, setup_logging
    >>> settings = load_settings()
    >>> setup_logging(settings)

"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from strtools.constants import (
    CONFIG_FILENAMES,
    DEFAULT_LOG_LEVEL,
    ENV_CONFIG_PATH,
    ENV_PREFIX,
    PYPROJECT_FILENAME,
    PYPROJECT_TOOL_SECTION,
    VALID_LOG_LEVELS,
)
from strtools.exceptions import ConfigError, ValidationError
from strtools.logging_utils import configure_logging

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class StrToolsSettings:
    """Logging settings for applications using strtools.

    Parameters
    ----------
    log_level : str, default "WARNING"
        Logging level name, case-insensitive
    log_file : str or None, default None
        Optional file that receives a copy of the log output
    trace_mode : bool, default False
        Use the timestamped trace format

    """

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    trace_mode: bool = False

    def __post_init__(self) -> None:
        """Validate and normalize the level name.

        Raises
        ------
        ValidationError
            If a field has the wrong type or the level name is unknown.

        """
        if not isinstance(self.log_level, str):
            raise ValidationError(
                f"log_level must be a string, got {type(self.log_level).__name__}",
                parameter_name="log_level",
                parameter_value=self.log_level,
            )
        level = self.log_level.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValidationError(
                f"Unknown log level {self.log_level!r}. Choices: {', '.join(VALID_LOG_LEVELS)}",
                parameter_name="log_level",
                parameter_value=self.log_level,
            )
        object.__setattr__(self, "log_level", level)

        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValidationError(
                f"log_file must be a string, got {type(self.log_file).__name__}",
                parameter_name="log_file",
                parameter_value=self.log_file,
            )
        if not isinstance(self.trace_mode, bool):
            raise ValidationError(
                f"trace_mode must be a boolean, got {type(self.trace_mode).__name__}",
                parameter_name="trace_mode",
                parameter_value=self.trace_mode,
            )

    def create_updated(self, **kwargs: Any) -> StrToolsSettings:
        """Create a new instance with updated field values."""
        return replace(self, **kwargs)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.strtools]`` table from a pyproject.toml file.

    Returns an empty dict when the table is missing.

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the section is not a table

    """
    data = _load_toml_config(pyproject_path)
    section = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(section).__name__}",
            config_path=pyproject_path,
        )
    return section


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {config_path}: {e}", config_path, e) from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}", config_path, e) from e

    if not isinstance(config, dict):
        raise ConfigError(f"JSON config file must contain an object, got {type(config).__name__}", config_path)
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}", config_path, e) from e

    # Empty YAML documents load as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"YAML config file must contain a mapping, got {type(config).__name__}", config_path)
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a settings mapping from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the settings file

    Returns
    -------
    dict
        Raw settings mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed or of an unknown type

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path)

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == PYPROJECT_FILENAME:
            return _load_pyproject_section(config_path)
        elif ext == ".toml":
            return _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            return _load_yaml_config(config_path)
        elif ext == ".json":
            return _load_json_config(config_path)
        else:
            raise ConfigError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json", config_path)
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", config_path, e) from e


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest settings file from ``start_dir`` up to the filesystem root.

    Dedicated ``.strtools.*`` files win over ``pyproject.toml`` in the same
    directory, and a ``pyproject.toml`` only counts when it has a
    ``[tool.strtools]`` table.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug(f"Skipping unusable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a settings file in the parent directories, then in the home directory."""
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid boolean value for {name}: {value!r}", parameter_name=name, parameter_value=value)


def get_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect ``STRTOOLS_*`` setting overrides from the environment.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    dict
        Settings keyed by field name, only for variables that are set

    """
    if environ is None:
        environ = os.environ

    overrides: Dict[str, Any] = {}
    for field_info in fields(StrToolsSettings):
        env_key = f"{ENV_PREFIX}{field_info.name.upper()}"
        if env_key not in environ:
            continue
        value = environ[env_key]
        if field_info.name == "trace_mode":
            overrides[field_info.name] = _parse_bool(env_key, value)
        elif field_info.name == "log_file":
            overrides[field_info.name] = value or None
        else:
            overrides[field_info.name] = value
    return overrides


def settings_from_mapping(config: Mapping[str, Any]) -> StrToolsSettings:
    """Build settings from a raw mapping, ignoring unknown keys.

    Keys may use dashes or underscores (``log-level`` or ``log_level``).
    """
    known = {field_info.name for field_info in fields(StrToolsSettings)}
    values: Dict[str, Any] = {}
    for key, value in config.items():
        name = str(key).replace("-", "_")
        if name not in known:
            logger.warning(f"Ignoring unknown strtools setting: {key}")
            continue
        values[name] = value
    return StrToolsSettings(**values)


def load_settings(
    config_path: Path | str | None = None,
    environ: Optional[Mapping[str, str]] = None,
) -> StrToolsSettings:
    """Load settings from files and environment variables.

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit settings file. Takes precedence over ``STRTOOLS_CONFIG``
        and auto-discovery.
    environ : Mapping[str, str], optional
        Environment to read, defaults to ``os.environ``

    Returns
    -------
    StrToolsSettings
        Merged settings

    Raises
    ------
    ConfigError
        If an explicitly requested settings file cannot be loaded
    ValidationError
        If a setting value is invalid

    """
    if environ is None:
        environ = os.environ

    if config_path is None and environ.get(ENV_CONFIG_PATH):
        config_path = environ[ENV_CONFIG_PATH]
    if config_path is None:
        config_path = discover_config_file()

    config: Dict[str, Any] = {}
    if config_path is not None:
        config = load_config_file(config_path)
        logger.debug(f"Loaded strtools settings from {config_path}")

    settings = settings_from_mapping(config)
    overrides = get_env_overrides(environ)
    if overrides:
        settings = settings.create_updated(**overrides)
    return settings


def setup_logging(settings: Optional[StrToolsSettings] = None, library_only: bool = False) -> logging.Logger:
    """Configure logging from ``settings``, loading them when not given."""
    if settings is None:
        settings = load_settings()
    return configure_logging(
        settings.log_level,
        log_file=settings.log_file,
        trace_mode=settings.trace_mode,
        library_only=library_only,
    )
