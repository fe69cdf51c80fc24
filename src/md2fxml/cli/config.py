#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2fxml CLI.

Configuration files hold a ``[parser]`` table with
:class:`~md2fxml.options.MarkdownParserOptions` fields and a ``[renderer]``
table with :class:`~md2fxml.options.FxmlRendererOptions` fields. They can be
TOML, YAML or JSON, or a ``[tool.md2fxml]`` section in ``pyproject.toml``.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional, Tuple

import yaml

from md2fxml.constants import CONFIG_FILENAMES
from md2fxml.options.fxml import FxmlRendererOptions
from md2fxml.options.markdown import MarkdownParserOptions

CONFIG_SECTIONS = ("parser", "renderer")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.md2fxml]`` section of a pyproject.toml file.

    Returns
    -------
    dict
        The section, or an empty dict when there is none

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("md2fxml", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.md2fxml] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file in ``start_dir`` or any of its parents.

    Dedicated config files win over ``pyproject.toml``, which only counts
    when it has a ``[tool.md2fxml]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if not config_path.is_file():
                continue
            if filename != "pyproject.toml":
                return config_path
            try:
                if _load_pyproject_section(config_path):
                    return config_path
            except argparse.ArgumentTypeError:
                pass

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file does not exist, has an unsupported extension or cannot
        be parsed

    Examples
    --------
    >>> config = load_config_file(".md2fxml.toml")
    >>> config.get("renderer", {}).get("bullet_prefix")
    '- '

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    ext = config_path.suffix.lower()
    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml or .json")
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (MD2FXML_CONFIG)
    3. Auto-discovered config file, searching upward from the cwd

    Returns
    -------
    dict
        Loaded configuration (empty dict if no config found)

    """
    if explicit_path:
        return load_config_file(explicit_path)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents()
    if discovered_path:
        return load_config_file(discovered_path)
    return {}


def options_from_config(config: Dict[str, Any]) -> Tuple[MarkdownParserOptions, FxmlRendererOptions]:
    """Build parser and renderer options from a loaded configuration.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration has unknown sections or fields, or invalid values

    """
    unknown_sections = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise argparse.ArgumentTypeError(f"Unknown config section(s): {', '.join(unknown_sections)}")

    sections = {}
    for section in CONFIG_SECTIONS:
        values = config.get(section, {})
        if not isinstance(values, dict):
            raise argparse.ArgumentTypeError(f"Config section [{section}] must be a table")
        sections[section] = values

    try:
        parser_options = MarkdownParserOptions.from_mapping(sections["parser"])
        renderer_options = FxmlRendererOptions.from_mapping(sections["renderer"])
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e
    return parser_options, renderer_options
