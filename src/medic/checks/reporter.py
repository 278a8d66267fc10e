"""Interface for anything that displays check progress and results."""

from typing import Protocol

from .types import Arguments


class Reporter(Protocol):
    def notify_progress(self, category: str, description: str, details: Arguments) -> None: ...

    def notify_ok(self) -> None: ...

    def notify_skipped(self) -> None: ...

    def notify_warn(self, output: str) -> None: ...

    def notify_failed(self, output: str, remedy: str) -> None: ...
