"""Argument normalization for check dispatch."""

from typing import Any

from .types import Arguments, Options, as_arguments


def normalize(arguments: Arguments) -> list[Any]:
    """Return the positional parameters a check is called with.

    Non-empty options are passed as a single mapping parameter. Positional
    values, and empty options, are passed through as they are.
    """
    arguments = as_arguments(arguments)
    if isinstance(arguments, Options):
        return [arguments.as_dict()] if arguments else []
    return list(arguments.values)
