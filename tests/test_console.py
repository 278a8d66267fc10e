"""Tests for rich console reporting."""
from io import StringIO

import pytest
from rich.console import Console

from medic.checks import CheckDescriptor, Error, Ok, Options, Positional, RunSummary, Skipped, Warn
from medic.ui import ConsoleReporter, format_details, render_summary


@pytest.fixture
def console():
    return Console(file=StringIO(), width=100, color_system=None, highlight=False)


def output(console):
    return console.file.getvalue()


class TestFormatDetails:
    def test_empty(self):
        assert format_details(Positional()) == ""

    def test_positional(self):
        assert format_details(Positional(("erlang", "26"))) == "erlang 26"

    def test_options(self):
        assert format_details(Options((("cd", "assets"),))) == "cd: 'assets'"


class TestConsoleReporter:
    def test_progress_then_ok_on_one_line(self, console):
        reporter = ConsoleReporter(console)
        reporter.notify_progress("asdf", "plugin installed", Positional(("erlang",)))
        reporter.notify_ok()
        assert output(console) == "• asdf: plugin installed (erlang) OK\n"

    def test_progress_without_details(self, console):
        reporter = ConsoleReporter(console)
        reporter.notify_progress("git", "installed", Positional())
        reporter.notify_skipped()
        assert output(console) == "• git: installed SKIPPED\n"

    def test_warn_shows_output(self, console):
        reporter = ConsoleReporter(console)
        reporter.notify_warn("disk low\n")
        assert output(console) == " WARN\ndisk low\n"

    def test_failed_shows_output_and_remedy(self, console):
        reporter = ConsoleReporter(console)
        reporter.notify_failed("[boom] not installed", "brew install git")
        text = output(console)
        assert " FAILED" in text
        assert "[boom] not installed" in text
        assert text.rstrip().endswith("brew install git")

    def test_heading(self, console):
        ConsoleReporter(console).heading("Running 3 checks")
        assert output(console) == "▸ Running 3 checks...\n"


class TestRenderSummary:
    def test_all_passed(self, console):
        summary = RunSummary(results=[(CheckDescriptor.of("a", "b"), Ok())])
        render_summary(summary, console)
        assert "ALL CHECKS PASSED" in output(console)

    def test_failures_and_counts(self, console):
        summary = RunSummary(
            results=[
                (CheckDescriptor.of("a", "b"), Error("x", "y")),
                (CheckDescriptor.of("a", "c"), Warn("w")),
                (CheckDescriptor.of("a", "d"), Skipped()),
            ],
            halted=True,
        )
        render_summary(summary, console)
        text = output(console)
        assert "1 CHECKS FAILED" in text
        assert "Warnings: 1" in text
        assert "Skipped: 1" in text
        assert "Stopped after the first failure" in text
