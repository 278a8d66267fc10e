import importlib
import logging

import click
from rich.logging import RichHandler

from medic.checks import (
    DEFAULT_SKIP_DIR,
    CheckDescriptor,
    CheckRegistry,
    CheckRunner,
    MedicError,
    resolve_skip_path,
)
from medic.ui import ConsoleReporter, render_summary


def _load_catalog(path: str) -> tuple[CheckRegistry, list[CheckDescriptor]]:
    """Import a catalog module exposing REGISTRY and CHECKS."""
    try:
        module = importlib.import_module(path)
    except ImportError as exc:
        raise click.ClickException(f"Cannot import catalog {path}: {exc}") from exc

    registry = getattr(module, "REGISTRY", None)
    checks = getattr(module, "CHECKS", None)
    if not isinstance(registry, CheckRegistry):
        raise click.ClickException(f"Catalog {path} has no REGISTRY CheckRegistry")
    if checks is None:
        raise click.ClickException(f"Catalog {path} has no CHECKS list")
    return registry, list(checks)


def _parse_args(values: tuple[str, ...]) -> list[str] | dict[str, str]:
    """Turn ``key=value`` arguments into options, anything else into positionals."""
    if values and all("=" in value for value in values):
        return dict(value.split("=", 1) for value in values)
    return list(values)


@click.group()
@click.option(
    "--skip-dir",
    envvar="MEDIC_SKIP_DIR",
    default=DEFAULT_SKIP_DIR,
    show_default=True,
    help="Directory holding skip markers",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, skip_dir: str, verbose: bool):
    """Check the local development environment."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    ctx.obj = {"skip_dir": skip_dir}


@main.command()
@click.argument("catalog")
@click.option(
    "--halt/--no-halt", default=False, help="Stop at the first failed check"
)
@click.pass_context
def run(ctx: click.Context, catalog: str, halt: bool):
    """Run the checks listed in CATALOG (an importable module path)."""
    registry, checks = _load_catalog(catalog)
    reporter = ConsoleReporter()
    runner = CheckRunner(reporter, registry=registry, skip_dir=ctx.obj["skip_dir"])

    reporter.heading(f"Running {len(checks)} checks")
    try:
        summary = runner.run_all(checks, halt_on_error=halt)
    except MedicError as exc:
        reporter.console.print()
        raise click.ClickException(str(exc)) from exc

    reporter.console.print()
    render_summary(summary, reporter.console)
    raise SystemExit(summary.failed)


@main.command("skip-path")
@click.argument("category")
@click.argument("operation")
@click.argument("args", nargs=-1)
@click.pass_context
def skip_path(ctx: click.Context, category: str, operation: str, args: tuple[str, ...]):
    """Print the marker file that skips a check.

    Arguments given as key=value are treated as options.
    """
    descriptor = CheckDescriptor.of(category, operation, _parse_args(args))
    click.echo(
        resolve_skip_path(
            descriptor.category,
            descriptor.operation,
            descriptor.arguments,
            root=ctx.obj["skip_dir"],
        )
    )


if __name__ == "__main__":
    main()
