"""Check descriptor and result types."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class CheckStatus(Enum):
    """Outcome of a single check."""

    OK = "ok"
    SKIPPED = "skipped"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class Ok:
    """The check succeeded with no problems."""

    status = CheckStatus.OK


@dataclass(frozen=True)
class Skipped:
    """The check was bypassed, either by a skip marker or by the check itself."""

    status = CheckStatus.SKIPPED


@dataclass(frozen=True)
class Warn:
    """The check found a non-fatal problem."""

    output: str
    status = CheckStatus.WARN


@dataclass(frozen=True)
class Error:
    """The check failed.

    ``output`` is whatever the check wants to show the user, usually the text
    printed by a shell command. ``remedy`` is a suggested fix, often a command
    the caller can copy to the clipboard.
    """

    output: str
    remedy: str = ""
    status = CheckStatus.ERROR

    def __post_init__(self) -> None:
        if self.output is None:
            object.__setattr__(self, "output", "")
        if self.remedy is None:
            object.__setattr__(self, "remedy", "")


CheckResult = Union[Ok, Skipped, Warn, Error]

RESULT_TYPES = (Ok, Skipped, Warn, Error)


def is_failure(result: CheckResult) -> bool:
    return isinstance(result, Error)


@dataclass(frozen=True)
class Positional:
    """Arguments passed to a check as separate positional parameters."""

    values: tuple[Any, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.values)


@dataclass(frozen=True)
class Options:
    """Arguments passed to a check as one options mapping.

    Pairs keep the order they were given in, which also fixes the order of
    the values in the skip marker filename.
    """

    items: tuple[tuple[Any, Any], ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "Options":
        return cls(tuple((key, value) for key, value in mapping.items()))

    def values(self) -> list[Any]:
        return [value for _key, value in self.items]

    def as_dict(self) -> dict[Any, Any]:
        return dict(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


Arguments = Union[Positional, Options]


def as_arguments(value: Any) -> Arguments:
    """Convert plain Python arguments into their tagged form.

    ``None`` means no arguments, a mapping becomes ``Options`` and a list or
    tuple becomes ``Positional``.
    """
    if isinstance(value, (Positional, Options)):
        return value
    if value is None:
        return Positional()
    if isinstance(value, Mapping):
        return Options.from_mapping(value)
    if isinstance(value, (str, bytes)):
        raise TypeError(
            f"Check arguments must be a list or a mapping, not {type(value).__name__}"
        )
    return Positional(tuple(value))


@dataclass(frozen=True)
class CheckDescriptor:
    """Identifies one check to run: category, operation and arguments."""

    category: str
    operation: str
    arguments: Arguments = field(default_factory=Positional)

    @classmethod
    def of(cls, category: str, operation: str, args: Any = None) -> "CheckDescriptor":
        return cls(category, operation, as_arguments(args))

    @property
    def description(self) -> str:
        """Human-friendly form of the operation name."""
        return self.operation.replace("_", " ")

    def __str__(self) -> str:
        return f"{self.category}.{self.operation}"
