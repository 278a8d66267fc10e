"""Skip markers.

A check is skipped when a file exists at ``.medic/skipped/<name>``, where the
name is built from the check's category, operation and argument values. The
markers are created and removed by the user, never by medic.
"""

import logging
import re
from pathlib import Path

from .types import Arguments, Options, Positional, as_arguments

logger = logging.getLogger(__name__)

DEFAULT_SKIP_DIR = ".medic/skipped"

_UNSAFE_CHARS = re.compile(r"[^\w\-_+.]+", re.ASCII)


def argument_token(arguments: Arguments) -> str:
    """Join argument values with ``+``. Option names are dropped."""
    arguments = as_arguments(arguments)
    if isinstance(arguments, Options):
        values = arguments.values()
    else:
        values = list(arguments.values)
    return "+".join(str(value) for value in values)


def sanitize(filename: str) -> str:
    """Strip every character that is not safe in a marker filename."""
    return _UNSAFE_CHARS.sub("", filename)


def skip_filename(category: str, operation: str, arguments: Arguments = Positional()) -> str:
    parts = [category, operation, argument_token(arguments)]
    return sanitize("-".join(part for part in parts if part != ""))


def resolve_skip_path(
    category: str,
    operation: str,
    arguments: Arguments = Positional(),
    root: str | Path = DEFAULT_SKIP_DIR,
) -> Path:
    return Path(root) / skip_filename(category, operation, arguments)


def is_skipped(
    category: str,
    operation: str,
    arguments: Arguments = Positional(),
    root: str | Path = DEFAULT_SKIP_DIR,
) -> bool:
    """Return True if the user left a skip marker for this check."""
    path = resolve_skip_path(category, operation, arguments, root)
    skipped = path.exists()
    logger.debug("Skip marker %s %s", path, "found" if skipped else "not found")
    return skipped
