"""CLI entry point for suiteload."""
from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from suiteload import __version__
from suiteload.collect import load_tests_sync
from suiteload.config import ConfigOptions, build_loader_config
from suiteload.core import ModuleFormat
from suiteload.reporting import JsonReporter, Reporter, TerminalReporter


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"suiteload {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the suiteload version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for suiteload."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    ctx.obj = CliState(verbose=verbose)


@cli.command(name="list")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with loader settings.",
)
@click.option("--root", "root_dir", type=click.Path(exists=True, file_okay=False), help="Directory holding test files.")
@click.option("--pattern", type=str, help="Glob pattern relative to the root (supports {a,b}).")
@click.option("-f", "--filter", "name_filter", type=str, help="Regex matched against test file names.")
@click.option("--filter-body", type=str, help="Regex matched against test file contents.")
@click.option(
    "--module-type",
    type=click.Choice([fmt.value for fmt in ModuleFormat]),
    help="Module format hint (legacy by default).",
)
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def list_cases(
    state: CliState,
    config_path: Optional[str],
    root_dir: Optional[str],
    pattern: Optional[str],
    name_filter: Optional[str],
    filter_body: Optional[str],
    module_type: Optional[str],
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Load test files and list the cases they declare, sorted by name."""

    options = ConfigOptions(
        config_path=config_path,
        root_dir=root_dir,
        pattern=pattern,
        filter=name_filter,
        filter_body=filter_body,
        module_type=module_type,
    )
    try:
        config = build_loader_config(options)
        cases = load_tests_sync(config)
    except Exception as exc:  # pragma: no cover - CLI error translation
        raise click.ClickException(str(exc)) from exc
    cases.sort(key=lambda case: case.name)
    reporter: Reporter
    if report_format == "json":
        reporter = JsonReporter(report_path)
    else:
        reporter = TerminalReporter(use_color=not no_color)
    reporter.report(cases)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="suiteload", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
