#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file loading for the html2draft CLI.

A configuration file holds :class:`~html2draft.options.HtmlOptions` field
names as top-level keys, for example in TOML::

    html_parser = "lxml"
    extra_atomic_tags = ["video"]

    [tag_to_entity_type]
    cta = "CALL_TO_ACTION"

JSON, TOML and YAML files are accepted, as is a ``pyproject.toml`` with a
``[tool.html2draft]`` table.
"""

import argparse
import json
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from html2draft.exceptions import ValidationError
from html2draft.options.html import HtmlOptions

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

CONFIG_ENV_VAR = "HTML2DRAFT_CONFIG"
PYPROJECT_SECTION = "html2draft"

MAPPING_FIELDS = ("tag_to_block_type", "tag_to_style", "tag_to_entity_type")
TAG_SET_FIELDS = ("extra_inline_tags", "extra_atomic_tags")


def _parse_toml(path: Path) -> Any:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in {path}: {e}") from e


def _parse_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in {path}: {e}") from e


def _parse_yaml(path: Path) -> Any:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in {path}: {e}") from e
    # An empty YAML document loads as None
    return {} if loaded is None else loaded


def _parse_pyproject(path: Path) -> Any:
    return _parse_toml(path).get("tool", {}).get(PYPROJECT_SECTION, {})


_PARSERS_BY_SUFFIX: Dict[str, Callable[[Path], Any]] = {
    ".json": _parse_json,
    ".toml": _parse_toml,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Top-level configuration table; for ``pyproject.toml`` the
        ``[tool.html2draft]`` table, or ``{}`` when it is absent

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed, not a table, or has
        an unsupported extension

    """
    path = Path(config_path)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {path}")

    if path.name.lower() == "pyproject.toml":
        parse = _parse_pyproject
    else:
        suffix = path.suffix.lower()
        if suffix not in _PARSERS_BY_SUFFIX:
            raise argparse.ArgumentTypeError(
                f"Unsupported config file format: {suffix or path.name}. Use .json, .toml, or .yaml"
            )
        parse = _PARSERS_BY_SUFFIX[suffix]

    try:
        config = parse(path)
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"Configuration in {path} must be a table, got {type(config).__name__}")
    return config


def options_kwargs_from_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check a loaded configuration and return it as HtmlOptions keyword arguments.

    Tag lists are turned into frozensets; mappings are copied.

    Raises
    ------
    ValidationError
        If a key is not an option name or a value has the wrong shape

    """
    known = {f.name for f in fields(HtmlOptions)}
    kwargs: Dict[str, Any] = {}
    for key, value in config.items():
        if key not in known:
            raise ValidationError(
                f"Unknown configuration key {key!r}; expected one of {', '.join(sorted(known))}",
                parameter_name=key,
                parameter_value=value,
            )
        if key in MAPPING_FIELDS:
            if not isinstance(value, dict):
                raise ValidationError(
                    f"Configuration key {key!r} must be a table of tag names, got {type(value).__name__}",
                    parameter_name=key,
                    parameter_value=value,
                )
            kwargs[key] = dict(value)
        elif key in TAG_SET_FIELDS:
            if not isinstance(value, list):
                raise ValidationError(
                    f"Configuration key {key!r} must be a list of tag names, got {type(value).__name__}",
                    parameter_name=key,
                    parameter_value=value,
                )
            kwargs[key] = frozenset(value)
        else:
            kwargs[key] = value
    return kwargs
