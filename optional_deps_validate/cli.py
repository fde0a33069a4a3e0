"""CLI entry point: optional-deps-validate.

Usage:
    optional-deps-validate                  # audit the current directory
    optional-deps-validate -C path/to/app   # audit another project
    optional-deps-validate -v               # with debug logging
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from optional_deps_validate.auditor import LOCKFILE_NAME, AuditConfig, run_audit
from optional_deps_validate.exceptions import OptionalDepsError
from optional_deps_validate.logging import LOG_FORMATS, setup_logging
from optional_deps_validate.models import MissingOptionalDependency


def _warn_missing(finding: MissingOptionalDependency) -> None:
    click.echo(
        f'[Warning] Package "{finding.package}" declares optional dependency '
        f'"{finding.dependency}" but it is NOT listed in {LOCKFILE_NAME}',
        err=True,
    )


class _AuditCommand(click.Command):
    """Exit 1 instead of click's usage-error status 2."""

    def main(self, *args, **kwargs):
        kwargs.pop("standalone_mode", None)
        try:
            return super().main(*args, standalone_mode=False, **kwargs)
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)


@click.command(
    cls=_AuditCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        # stray arguments are ignored so --help works anywhere
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
)
@click.option(
    "-C",
    "--project-dir",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Project directory containing package-lock.json and node_modules/",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMATS),
    default="console",
    show_default=True,
    help="Log output format",
)
def main(project_dir: Path, verbose: bool, log_format: str) -> None:
    """Check that optional dependencies of installed packages are locked.

    Every package in node_modules/ whose package.json declares
    optionalDependencies is checked against package-lock.json. Exits with
    code 1 if any optional dependency is missing from the lockfile.
    """
    setup_logging(verbose=verbose, log_format=log_format)

    try:
        result = run_audit(
            AuditConfig(project_dir=project_dir.resolve()), on_missing=_warn_missing
        )
    except OptionalDepsError as e:
        click.echo(f"[Error] {e}", err=True)
        sys.exit(1)

    if not result.ok:
        click.echo(
            f"\nOne or more optional dependencies are missing from {LOCKFILE_NAME}!",
            err=True,
        )
        sys.exit(1)

    click.echo(
        "All optional dependencies declared by installed packages "
        f"appear in {LOCKFILE_NAME}."
    )