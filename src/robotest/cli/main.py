"""CLI entry point for robotest."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from colorama import init as colorama_init

from robotest import __version__
from robotest.cases.loader import HEADER_MODES
from robotest.config import REPORT_ERROR_POLICIES, HarnessConfig, load_config
from robotest.core.errors import LoadError, RobotestError
from robotest.harness import run_harness
from robotest.reporting.terminal import TerminalReporter


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"robotest {__version__}")
    raise click.exceptions.Exit()


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-r",
    "--robots-text-file-path",
    "robots_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="robots.txt file to validate.",
)
@click.option(
    "-t",
    "--test-case-file-path",
    "cases_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="CSV file of user-agent,url,expected rows.",
)
@click.option(
    "-g",
    "--generate-test-report",
    "generate_report",
    is_flag=True,
    help="Write a JUnit XML report named after the test-case file.",
)
@click.option(
    "--report-dir",
    type=click.Path(path_type=Path),
    help="Directory for the JUnit report (current directory by default).",
)
@click.option("--agent", type=str, help="Identifying user agent used for blank user-agent cells.")
@click.option("--header", type=click.Choice(HEADER_MODES), help="How to treat the first CSV row (auto by default).")
@click.option("--workers", type=click.IntRange(min=1), help="Evaluation worker threads.")
@click.option(
    "--on-report-error",
    type=click.Choice(REPORT_ERROR_POLICIES),
    help="Abort the run or only warn when the report cannot be written.",
)
@click.option("--decider", type=str, help="Custom decision function as FILE.py:FUNC instead of robots.txt.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with default option values.",
)
@click.option("--verbose", is_flag=True, help="List each failing case before the summary.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the robotest version and exit.",
)
def cli(
    robots_path: Optional[Path],
    cases_path: Optional[Path],
    generate_report: bool,
    report_dir: Optional[Path],
    agent: Optional[str],
    header: Optional[str],
    workers: Optional[int],
    on_report_error: Optional[str],
    decider: Optional[str],
    config_path: Optional[Path],
    verbose: bool,
    no_color: bool,
) -> None:
    """Validate a robots.txt file against a table of expected outcomes."""

    if not no_color:
        colorama_init()
    try:
        base = load_config(config_path) if config_path else HarnessConfig()
        config = base.with_overrides(
            robots_path=robots_path,
            cases_path=cases_path,
            generate_report=generate_report or None,
            report_dir=report_dir,
            agent=agent,
            header=header,
            workers=workers,
            on_report_error=on_report_error,
            decider=decider,
        )
    except RobotestError as exc:
        raise click.UsageError(str(exc)) from exc
    if config.cases_path is None:
        raise click.UsageError("Missing option '-t' / '--test-case-file-path'.")
    if config.robots_path is None and config.decider is None:
        raise click.UsageError("Missing option '-r' / '--robots-text-file-path'.")

    reporter = TerminalReporter(use_color=not no_color, verbose=verbose)
    try:
        result = run_harness(config, reporter=reporter)
    except LoadError as exc:
        click.echo(f"error getting test cases: {exc}", err=True)
        raise click.exceptions.Exit(1)
    except RobotestError as exc:
        raise click.ClickException(str(exc)) from exc
    if verbose and result.report_path is not None:
        click.echo(f"JUnit report written to {result.report_path}")
    raise click.exceptions.Exit(result.exit_code)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="robotest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
