"""Check dispatcher and the run loop built on top of it."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .arguments import normalize
from .errors import InvalidResultError
from .registry import CheckRegistry, default_registry
from .reporter import Reporter
from .skip import DEFAULT_SKIP_DIR, is_skipped
from .types import (
    RESULT_TYPES,
    CheckDescriptor,
    CheckResult,
    CheckStatus,
    Error,
    Ok,
    Skipped,
    Warn,
)

logger = logging.getLogger(__name__)


def report(result: CheckResult, reporter: Reporter) -> None:
    """Send a finished check's result to the reporter."""
    if isinstance(result, Ok):
        reporter.notify_ok()
    elif isinstance(result, Skipped):
        reporter.notify_skipped()
    elif isinstance(result, Warn):
        reporter.notify_warn(result.output)
    elif isinstance(result, Error):
        reporter.notify_failed(result.output, result.remedy)
    else:
        raise TypeError(f"Not a check result: {result!r}")


@dataclass
class RunSummary:
    """Results of a run, in the order the checks ran."""

    results: list[tuple[CheckDescriptor, CheckResult]] = field(default_factory=list)
    halted: bool = False

    def count(self, status: CheckStatus) -> int:
        return sum(1 for _descriptor, result in self.results if result.status == status)

    @property
    def passed(self) -> int:
        return self.count(CheckStatus.OK)

    @property
    def warned(self) -> int:
        return self.count(CheckStatus.WARN)

    @property
    def failed(self) -> int:
        return self.count(CheckStatus.ERROR)

    @property
    def skipped(self) -> int:
        return self.count(CheckStatus.SKIPPED)

    @property
    def ok(self) -> bool:
        return self.failed == 0


class CheckRunner:
    """Runs checks from a registry, one at a time, in the order given."""

    def __init__(
        self,
        reporter: Reporter,
        registry: CheckRegistry | None = None,
        skip_dir: str | Path = DEFAULT_SKIP_DIR,
    ):
        self.reporter = reporter
        self.registry = registry if registry is not None else default_registry
        self.skip_dir = Path(skip_dir)

    def run(self, descriptor: CheckDescriptor) -> CheckResult:
        """Run one check and return its result.

        The progress event is always emitted first, also for skipped checks.
        Reporting the result is left to the caller.
        """
        category, operation, arguments = (
            descriptor.category,
            descriptor.operation,
            descriptor.arguments,
        )
        self.reporter.notify_progress(category, descriptor.description, arguments)

        if is_skipped(category, operation, arguments, root=self.skip_dir):
            logger.debug("Skipping %s", descriptor)
            return Skipped()

        fn = self.registry.lookup(category, operation)
        result = fn(*normalize(arguments))
        if not isinstance(result, RESULT_TYPES):
            raise InvalidResultError(category, operation, result)
        logger.debug("%s finished: %s", descriptor, result.status.value)
        return result

    def run_all(
        self, descriptors: Iterable[CheckDescriptor], halt_on_error: bool = False
    ) -> RunSummary:
        """Run and report each check.

        With ``halt_on_error``, stop after the first failed check.
        """
        summary = RunSummary()
        for descriptor in descriptors:
            result = self.run(descriptor)
            report(result, self.reporter)
            summary.results.append((descriptor, result))
            if halt_on_error and isinstance(result, Error):
                logger.debug("Halting after %s failed", descriptor)
                summary.halted = True
                break
        return summary
