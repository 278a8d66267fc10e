"""Rich rendering of check progress and results."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from medic.checks import Arguments, Options, RunSummary, as_arguments


def format_details(details: Arguments) -> str:
    """Render check arguments for the progress line."""
    details = as_arguments(details)
    if isinstance(details, Options):
        return ", ".join(f"{key}: {value!r}" for key, value in details.items)
    return " ".join(str(value) for value in details.values)


class ConsoleReporter:
    """Writes one progress line per check, finished by its outcome."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def heading(self, message: str) -> None:
        self.console.print(
            Text.assemble(("▸ ", "green"), (message, "bold bright_cyan"), "...")
        )

    def notify_progress(self, category: str, description: str, details: Arguments) -> None:
        line = Text.assemble(("• ", "green"), (f"{category}: {description}", "cyan"))
        rendered = format_details(details)
        if rendered:
            line.append(" (", style="cyan")
            line.append(rendered, style="yellow")
            line.append(")", style="cyan")
        self.console.print(line, end="")

    def notify_ok(self) -> None:
        self.console.print(Text(" OK", style="bold green"))

    def notify_skipped(self) -> None:
        self.console.print(Text(" SKIPPED", style="bold yellow"))

    def notify_warn(self, output: str) -> None:
        self.console.print(Text(" WARN", style="bold yellow"))
        self.console.print(Text(output.rstrip("\n")))

    def notify_failed(self, output: str, remedy: str) -> None:
        self.console.print(Text(" FAILED", style="bold red"))
        self.console.print()
        if output.strip():
            self.console.print(Text(output.rstrip("\n")))
        if remedy:
            self.console.print(Text(remedy, style="cyan"))


def render_summary(summary: RunSummary, console: Console | None = None) -> None:
    console = console or Console(highlight=False)

    if summary.failed == 0:
        title = "[green bold]ALL CHECKS PASSED[/green bold]"
        border_style = "green"
    else:
        title = f"[red bold]{summary.failed} CHECKS FAILED[/red bold]"
        border_style = "red"

    stats = f"Passed: {summary.passed} | Failed: {summary.failed}"
    if summary.warned > 0:
        stats += f" | Warnings: {summary.warned}"
    if summary.skipped > 0:
        stats += f" | Skipped: {summary.skipped}"
    if summary.halted:
        stats += "\nStopped after the first failure"

    console.print(Panel(f"{title}\n{stats}", title="Summary", border_style=border_style))
