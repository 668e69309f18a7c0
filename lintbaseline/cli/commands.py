"""
CLI commands for lintbaseline.

Provides the command-line interface using Click.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lintbaseline import __version__
from lintbaseline.baseline import (
    Baseline,
    BaselineStatus,
    diff_against_baseline,
    load_configured_baseline,
)
from lintbaseline.core.config import PROJECT_CONFIG_FILE, LintBaselineConfig, validate_config
from lintbaseline.models.lint_error import LintError
from lintbaseline.models.rule_id import split_rule_id
from lintbaseline.utils.logging import setup_logging, setup_logging_from_config

console = Console()

# Exit codes
EXIT_SUCCESS = 0
EXIT_NEW_LINT_ERRORS = 1
EXIT_CONFIG_ERROR = 2
EXIT_BASELINE_UNUSABLE = 3

STATUS_STYLES = {
    BaselineStatus.DISABLED: "dim",
    BaselineStatus.VALID: "green",
    BaselineStatus.NOT_FOUND: "yellow",
    BaselineStatus.INVALID: "red",
}


@click.group()
@click.version_option(version=__version__, prog_name="lintbaseline")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output (DEBUG level)")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output (ERROR level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    help="Write logs to file",
)
@click.option("--json-logs", is_flag=True, help="Output logs in JSON format")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    log_file: Optional[Path],
    json_logs: bool,
) -> None:
    """lintbaseline - baselines of accepted lint errors.

    Inspect baseline files and compare lint results against them.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["log_file"] = log_file
    ctx.obj["json_logs"] = json_logs

    # Commands that load the configuration reconfigure logging from it
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    else:
        level = "INFO"

    setup_logging(
        level=level,
        log_file=log_file,
        json_format=json_logs,
    )


@cli.command()
@click.argument("baseline_file", type=click.Path(path_type=Path), required=False)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Configuration file path",
)
@click.option("--no-baseline", is_flag=True, help="Do not load a baseline")
@click.pass_context
def show(
    ctx: click.Context,
    baseline_file: Optional[Path],
    config: Optional[Path],
    no_baseline: bool,
) -> None:
    """Show the lint errors stored in a baseline file.

    BASELINE_FILE defaults to the path from the configuration.
    A baseline file that can not be parsed is deleted.

    Examples:

        lintbaseline show

        lintbaseline show build/baseline.xml
    """
    cfg = _load_config(ctx, baseline_file, config, no_baseline)
    baseline = load_configured_baseline(cfg)

    _print_baseline_summary(baseline)
    if baseline.is_valid and not ctx.obj.get("quiet"):
        _print_baseline_files(baseline)

    sys.exit(_exit_code_for(baseline))


@cli.command()
@click.argument("lint_results", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-b",
    "--baseline",
    "baseline_file",
    type=click.Path(path_type=Path),
    help="Baseline file path",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Configuration file path",
)
@click.option("--no-baseline", is_flag=True, help="Report all lint errors as new")
@click.pass_context
def diff(
    ctx: click.Context,
    lint_results: Path,
    baseline_file: Optional[Path],
    config: Optional[Path],
    no_baseline: bool,
) -> None:
    """Show lint errors that are not in the baseline.

    LINT_RESULTS is a JSON file mapping relative file paths to lists of
    lint errors with "line", "col", "rule_id" and optional "detail".

    Examples:

        lintbaseline diff lint-results.json

        lintbaseline diff lint-results.json -b build/baseline.xml
    """
    cfg = _load_config(ctx, baseline_file, config, no_baseline)

    try:
        lint_errors_per_file = _read_lint_results(lint_results)
    except (OSError, ValueError, KeyError, TypeError) as e:
        console.print(f"[red]Unable to read lint results:[/] {escape(str(e))}")
        sys.exit(EXIT_CONFIG_ERROR)

    baseline = load_configured_baseline(cfg)
    if not baseline.provides_suppressions:
        _print_baseline_summary(baseline)

    result = diff_against_baseline(baseline, lint_errors_per_file)

    for file, lint_errors in sorted(result.new_lint_errors.items()):
        for lint_error in lint_errors:
            console.print(
                f"[cyan]{escape(file)}[/]:{lint_error.location}: "
                f"{escape(lint_error.detail)} [yellow]({escape(lint_error.rule_id)})[/]",
                soft_wrap=True,
            )

    if not ctx.obj.get("quiet"):
        console.print(
            f"\n[bold]New:[/] {result.new_count}  "
            f"[bold]Suppressed by baseline:[/] {result.baselined_count}"
        )

    sys.exit(EXIT_NEW_LINT_ERRORS if result.has_new else EXIT_SUCCESS)


@cli.command()
def version() -> None:
    """Show version information."""
    console.print(Panel.fit(
        f"[bold]lintbaseline[/] v{__version__}\n\n"
        "Baselines of accepted lint errors",
        title="Version Info",
    ))


@cli.command()
@click.argument("path", type=click.Path(path_type=Path), default=".")
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(path: Path, force: bool) -> None:
    """Initialize .lintbaseline.yml configuration in a directory.

    Examples:

        lintbaseline init

        lintbaseline init ./my-project --force
    """
    config_path = path / PROJECT_CONFIG_FILE

    if config_path.exists() and not force:
        console.print(f"[yellow]Configuration already exists:[/] {escape(str(config_path))}")
        console.print("Use --force to overwrite")
        return

    LintBaselineConfig().to_yaml(config_path)

    console.print(f"[green]Created configuration:[/] {escape(str(config_path))}")


def _load_config(
    ctx: click.Context,
    baseline_file: Optional[Path],
    config: Optional[Path],
    no_baseline: bool,
) -> LintBaselineConfig:
    """
    Load configuration and apply its logging section.

    Exits with EXIT_CONFIG_ERROR when the configuration is invalid.
    """
    # --verbose wins over --quiet, so it is merged last
    cli_args: dict[str, Any] = {
        "quiet": ctx.obj.get("quiet"),
        "verbose": ctx.obj.get("verbose"),
        "log_file": ctx.obj.get("log_file"),
        "json_logs": ctx.obj.get("json_logs"),
        "baseline": baseline_file,
        "no_baseline": no_baseline,
    }
    try:
        cfg = LintBaselineConfig.load(cli_args=cli_args, config_file=config)
    except Exception as e:
        console.print(f"[red]Configuration error:[/] {escape(str(e))}")
        sys.exit(EXIT_CONFIG_ERROR)

    setup_logging_from_config(cfg.logging)

    for warning in validate_config(cfg):
        console.print(f"[yellow]Warning:[/] {escape(warning)}")
    return cfg


def _read_lint_results(path: Path) -> dict[str, list[LintError]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Expected a JSON object mapping file paths to lint errors")
    return {
        file: [LintError.from_dict(entry) for entry in entries]
        for file, entries in data.items()
    }


def _exit_code_for(baseline: Baseline) -> int:
    if baseline.status in (BaselineStatus.NOT_FOUND, BaselineStatus.INVALID):
        return EXIT_BASELINE_UNUSABLE
    return EXIT_SUCCESS


def _print_baseline_summary(baseline: Baseline) -> None:
    """Print status panel of a baseline."""
    style = STATUS_STYLES[baseline.status]
    lines = [f"[bold]Status:[/] [{style}]{baseline.status.name}[/]"]
    if baseline.path is not None:
        lines.append(f"[bold]Path:[/] {escape(baseline.path)}")
    if baseline.is_valid:
        lines.append(f"[bold]Files:[/] {len(baseline.lint_errors_per_file)}")
        lines.append(f"[bold]Lint errors:[/] {baseline.error_count}")
    for diagnostic in baseline.diagnostics:
        lines.append(f"[yellow]{escape(diagnostic)}[/]")

    console.print(Panel.fit("\n".join(lines), title="Baseline", border_style=style))


def _print_baseline_files(baseline: Baseline) -> None:
    """Print lint error counts per file and per rule set."""
    table = Table(title="Lint Errors per File")
    table.add_column("File", style="cyan")
    table.add_column("Errors", justify="right", style="green")
    table.add_column("Rule sets", style="yellow")

    for file, lint_errors in sorted(baseline.lint_errors_per_file.items()):
        rule_sets = sorted({split_rule_id(e.rule_id)[0] for e in lint_errors})
        table.add_row(escape(file), str(len(lint_errors)), escape(", ".join(rule_sets)))

    console.print(table)


def main() -> None:
    cli(obj={})
