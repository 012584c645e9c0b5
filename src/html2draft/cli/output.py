"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/html2draft/cli/output.py
import argparse
import sys
from pathlib import Path
from typing import IO, Optional

from html2draft.exceptions import FileError


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND either --force-rich is set OR the stream is a TTY

    """
    if not args.rich:
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_json(content: str, indent: Optional[int], use_rich: bool) -> None:
    """Print JSON text to stdout, highlighted by Rich when requested."""
    if use_rich:
        from rich.console import Console

        Console().print_json(content, indent=indent if indent is not None else 2)
    else:
        print(content)


def write_output_file(content: str, output_path: Path) -> None:
    """Write JSON text to ``output_path``, creating parent directories.

    Raises
    ------
    FileError
        If the file cannot be written

    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write output file: {output_path}", file_path=str(output_path), original_error=e) from e
