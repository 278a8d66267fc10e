"""Terminal reporting for check runs."""

from medic.checks.reporter import Reporter

from .console import ConsoleReporter, format_details, render_summary

__all__ = ["ConsoleReporter", "Reporter", "format_details", "render_summary"]
