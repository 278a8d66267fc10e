"""Check execution engine."""

from .arguments import normalize
from .dispatch import CheckRunner, RunSummary, report
from .errors import (
    DuplicateCheckError,
    InvalidResultError,
    MedicError,
    UnknownCheckError,
)
from .predicates import in_list
from .registry import CheckRegistry, check, default_registry
from .reporter import Reporter
from .runner import command_output, command_succeeds
from .skip import DEFAULT_SKIP_DIR, is_skipped, resolve_skip_path
from .types import (
    Arguments,
    CheckDescriptor,
    CheckResult,
    CheckStatus,
    Error,
    Ok,
    Options,
    Positional,
    Skipped,
    Warn,
    as_arguments,
    is_failure,
)

__all__ = [
    "Arguments",
    "CheckDescriptor",
    "CheckRegistry",
    "CheckResult",
    "CheckRunner",
    "CheckStatus",
    "DEFAULT_SKIP_DIR",
    "DuplicateCheckError",
    "Error",
    "InvalidResultError",
    "MedicError",
    "Ok",
    "Options",
    "Positional",
    "Reporter",
    "RunSummary",
    "Skipped",
    "UnknownCheckError",
    "Warn",
    "as_arguments",
    "check",
    "command_output",
    "command_succeeds",
    "default_registry",
    "in_list",
    "is_failure",
    "is_skipped",
    "normalize",
    "report",
    "resolve_skip_path",
]
