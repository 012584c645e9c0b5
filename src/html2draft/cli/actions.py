"""Custom argparse Action classes for the html2draft CLI.

Every action here records its ``dest`` in ``namespace._provided_args`` when
the flag appears on the command line, so configuration files can fill in
only what the user did not pass explicitly.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import os
from typing import Any

from html2draft.constants import ENV_PREFIX


def env_key_for(dest: str) -> str:
    """Return the environment variable consulted for ``dest`` (e.g. HTML2DRAFT_LOG_LEVEL)."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_')}"


def _mark_provided(namespace: argparse.Namespace, dest: str) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    namespace._provided_args.add(dest)


def parse_tag_assignment(value: str) -> tuple[str, str]:
    """Split a ``TAG=VALUE`` argument.

    Raises
    ------
    argparse.ArgumentTypeError
        If the separator is missing or either side is empty

    """
    tag, sep, mapped = value.partition("=")
    tag, mapped = tag.strip(), mapped.strip()
    if not sep or not tag or not mapped:
        raise argparse.ArgumentTypeError(f"expected TAG=VALUE, got {value!r}")
    return tag, mapped


class EnvironmentAwareAction(argparse.Action):
    """Store action that takes its default from an ``HTML2DRAFT_*`` variable.

    The environment value is converted with the argument's ``type`` when one
    is given. Choices are not checked for environment values; invalid values
    are reported when the options are built.
    """

    def __init__(self, option_strings, dest, default=None, type=None, **kwargs):
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = type(env_value) if type is not None else env_value
        super().__init__(option_strings, dest, default=default, type=type, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        _mark_provided(namespace, self.dest)


class EnvironmentAwareBooleanAction(argparse.Action):
    """Boolean flag whose default comes from an ``HTML2DRAFT_*`` variable."""

    def __init__(self, option_strings, dest, default=False, **kwargs):
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in ("true", "1", "yes", "on")
        super().__init__(option_strings, dest, nargs=0, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, True)
        _mark_provided(namespace, self.dest)


class TagMappingAction(argparse.Action):
    """Repeatable ``TAG=VALUE`` flag collected into a dict.

    A later occurrence of the same tag replaces the earlier one.
    """

    def __init__(self, option_strings, dest, **kwargs):
        kwargs.setdefault("metavar", "TAG=VALUE")
        kwargs.setdefault("default", None)
        super().__init__(option_strings, dest, type=parse_tag_assignment, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        tag, mapped = values
        current: dict[str, Any] = dict(getattr(namespace, self.dest, None) or {})
        current[tag] = mapped
        setattr(namespace, self.dest, current)
        _mark_provided(namespace, self.dest)


class TagSetAction(argparse.Action):
    """Repeatable flag collecting tag names; commas separate several tags."""

    def __init__(self, option_strings, dest, **kwargs):
        kwargs.setdefault("metavar", "TAG")
        kwargs.setdefault("default", None)
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        current = list(getattr(namespace, self.dest, None) or [])
        current.extend(tag.strip() for tag in values.split(",") if tag.strip())
        setattr(namespace, self.dest, current)
        _mark_provided(namespace, self.dest)
