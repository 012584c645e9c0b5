"""Command-line interface for the html2draft conversion library.

This module provides a CLI tool that reads HTML from a file or stdin and
writes the converted document as JSON.

Environment Variable Support
----------------------------
``--html-parser``, ``--log-level`` and ``--rich`` take their defaults from
``HTML2DRAFT_HTML_PARSER``, ``HTML2DRAFT_LOG_LEVEL`` and ``HTML2DRAFT_RICH``.
``HTML2DRAFT_CONFIG`` names a configuration file used when ``--config`` is
not given. Priority, highest first: command-line flags, configuration file,
environment variables, built-in defaults.

Examples
--------
Basic conversion::

    $ html2draft page.html

Read stdin, write range-form JSON to a file::

    $ cat page.html | html2draft --raw -o page.json

Map a custom element to an entity::

    $ html2draft page.html --entity cta=CALL_TO_ACTION --style mark=HIGHLIGHT

Use rich formatting::

    $ html2draft page.html --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from dataclasses import MISSING, fields
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from html2draft.api import convert
from html2draft.cli.actions import (
    EnvironmentAwareAction,
    EnvironmentAwareBooleanAction,
    TagMappingAction,
    TagSetAction,
)
from html2draft.cli.config import (
    CONFIG_ENV_VAR,
    MAPPING_FIELDS,
    TAG_SET_FIELDS,
    load_config_file,
    options_kwargs_from_config,
)
from html2draft.cli.output import print_json, should_use_rich_output, write_output_file
from html2draft.constants import DEFAULT_LOG_LEVEL
from html2draft.exceptions import DependencyError, FileError, ParsingError, ValidationError
from html2draft.logging_utils import configure_logging
from html2draft.model.serialization import document_to_json
from html2draft.options.html import HtmlOptions

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "build_options", "get_exit_code_for_exception"]

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

STDIN_MARKER = "-"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def _get_version() -> str:
    from html2draft import __version__

    return f"html2draft {__version__}"


def add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one argument per :class:`HtmlOptions` field, driven by field metadata.

    Mapping fields become repeatable ``TAG=VALUE`` flags, tag set fields
    repeatable ``TAG`` flags, and anything else a plain value whose default
    may come from the environment.
    """
    group = parser.add_argument_group("conversion options")
    for field in fields(HtmlOptions):
        metadata = field.metadata
        flag = f"--{metadata.get('cli_name', field.name.replace('_', '-'))}"
        help_text = metadata.get("help")

        if field.default_factory is dict:
            group.add_argument(flag, dest=field.name, action=TagMappingAction, help=help_text)
        elif field.default_factory is frozenset:
            group.add_argument(flag, dest=field.name, action=TagSetAction, help=help_text)
        else:
            default = field.default if field.default is not MISSING else None
            group.add_argument(
                flag,
                dest=field.name,
                action=EnvironmentAwareAction,
                default=default,
                choices=metadata.get("choices"),
                help=f"{help_text} (default: {default})",
            )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``html2draft`` command."""
    parser = argparse.ArgumentParser(
        prog="html2draft",
        description="Convert HTML into a block/entity rich-text document and print it as JSON.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_MARKER,
        help="HTML file to convert; omit or use '-' to read stdin",
    )
    parser.add_argument("-o", "--out", type=Path, help="Write JSON to this file instead of stdout")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Emit the range form (text with inlineStyleRanges/entityRanges) instead of entity/style nodes",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent JSON output by this many spaces")
    parser.add_argument("--config", help=f"JSON, TOML or YAML options file (default: ${CONFIG_ENV_VAR})")

    add_options_arguments(parser)

    display = parser.add_argument_group("display and logging")
    display.add_argument("--rich", action=EnvironmentAwareBooleanAction, help="Pretty-print JSON with Rich")
    display.add_argument(
        "--force-rich",
        action="store_true",
        help="Use Rich output even when stdout is not a terminal",
    )
    display.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    display.add_argument("--log-file", help="Also write log messages to this file")
    display.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=_get_version())
    return parser


def build_options(args: argparse.Namespace) -> HtmlOptions:
    """Combine the configuration file and command-line flags into options.

    Flags given on the command line win over the configuration file. Tag
    mappings are merged per tag and tag sets are joined.

    Raises
    ------
    ValidationError
        If the configuration or a flag value is invalid
    argparse.ArgumentTypeError
        If the configuration file cannot be loaded

    """
    config_path = args.config or os.environ.get(CONFIG_ENV_VAR)
    values: Dict[str, Any] = {}
    if config_path:
        values = options_kwargs_from_config(load_config_file(config_path))
        logger.debug("Loaded options from %s: %s", config_path, sorted(values))

    provided = getattr(args, "_provided_args", set())
    for field in fields(HtmlOptions):
        name = field.name
        cli_value = getattr(args, name, None)
        if name in MAPPING_FIELDS:
            values[name] = {**values.get(name, {}), **(cli_value or {})}
        elif name in TAG_SET_FIELDS:
            values[name] = frozenset(values.get(name, ())) | frozenset(cli_value or ())
        elif name in provided or name not in values:
            values[name] = cli_value

    try:
        return HtmlOptions(**values)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def _read_source(input_arg: str) -> Any:
    if input_arg == STDIN_MARKER:
        return getattr(sys.stdin, "buffer", sys.stdin)
    return Path(input_arg)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command-line interface.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments to parse; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            logging.DEBUG if args.trace else args.log_level, log_file=args.log_file, trace_mode=args.trace
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = build_options(args)
        document = convert(_read_source(args.input), options)
        content = document_to_json(document, raw=args.raw, indent=args.indent)

        if args.out:
            write_output_file(content, args.out)
            logger.info("Wrote %d blocks to %s", len(document.blocks), args.out)
        else:
            print_json(content, args.indent, should_use_rich_output(args))
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return exit_code

    return EXIT_SUCCESS
