"""Registry mapping (category, operation) pairs to check functions."""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from .errors import DuplicateCheckError, UnknownCheckError
from .types import CheckResult

logger = logging.getLogger(__name__)

CheckFn = Callable[..., CheckResult]


class CheckRegistry:
    """Catalog of check functions, filled in at startup.

    Usage::

        registry = CheckRegistry()

        @registry.register("homebrew")
        def installed():
            return command_succeeds("brew", ["--version"], remedy="...")
    """

    def __init__(self) -> None:
        self._checks: dict[tuple[str, str], CheckFn] = {}

    def add(self, category: str, operation: str, fn: CheckFn) -> None:
        key = (category, operation)
        if key in self._checks:
            raise DuplicateCheckError(category, operation)
        self._checks[key] = fn
        logger.debug("Registered check %s.%s", category, operation)

    def register(
        self, category: str, operation: str | None = None
    ) -> Callable[[CheckFn], CheckFn]:
        """Decorator form of :meth:`add`. Operation defaults to the function name."""

        def decorator(fn: CheckFn) -> CheckFn:
            self.add(category, operation or fn.__name__, fn)
            return fn

        return decorator

    def lookup(self, category: str, operation: str) -> CheckFn:
        try:
            return self._checks[(category, operation)]
        except KeyError:
            raise UnknownCheckError(category, operation) from None

    def __contains__(self, key: Any) -> bool:
        return key in self._checks

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._checks)

    def __len__(self) -> int:
        return len(self._checks)


default_registry = CheckRegistry()


def check(category: str, operation: str | None = None) -> Callable[[CheckFn], CheckFn]:
    """Register a check with the default registry."""
    return default_registry.register(category, operation)
