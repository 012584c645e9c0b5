#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for parser options.

Options are frozen dataclasses: a configured instance can be shared between
conversions and threads, and variants are derived with ``create_updated``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        TypeError
            If a keyword does not name a field of this options class

        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no option(s): {', '.join(unknown)}")
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Subclasses define format-specific options as frozen dataclass fields,
    each carrying a ``help`` entry in its field metadata for the CLI.
    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass
