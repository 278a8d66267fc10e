"""In-memory assertions usable within a check."""

from collections.abc import Iterable
from typing import Any

from .types import Error, Ok


def in_list(item: Any, items: Iterable[Any], remedy: str = "") -> Ok | Error:
    """Ok if ``item`` equals a member of ``items``."""
    items = list(items)
    if item in items:
        return Ok()
    return Error(output=f"“{item}” not found in {items!r}", remedy=remedy)
