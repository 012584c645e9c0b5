#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2draft/utils/decorators.py
"""Dependency checks and timing helpers for parsers."""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from html2draft.exceptions import DependencyError
from html2draft.utils.packages import check_version_requirement


def check_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Verify that every package is importable and meets its version requirement.

    Parameters
    ----------
    converter_name : str
        Name shown in the error message (e.g. ``"html"``)
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` tuples; an empty
        ``version_spec`` accepts any version

    Raises
    ------
    DependencyError
        Listing every missing package and every version mismatch

    """
    missing: list[tuple[str, str]] = []
    version_mismatches: list[tuple[str, str, str]] = []
    original_error: ImportError | None = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e
            continue

        if version_spec:
            meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
            if not meets_requirement:
                version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

    if missing or version_mismatches:
        raise DependencyError(
            converter_name=converter_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies before the decorated method runs.

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def parse(self, input_data):
        ...     from bs4 import BeautifulSoup

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check_dependencies(converter_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the block took at DEBUG level; no-op otherwise.

    Examples
    --------
        >>> with debug_timer(logger, "Converting HTML"):
        ...     document = parser.parse(markup)

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug("%s completed in %.4fs", operation, elapsed)
    else:
        yield
