from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

import typer

from covgate import logger
from covgate.cli.errors import EXIT_GENERIC
from covgate.cli.util import color_allowed, configure_runtime, resolve_config
from covgate.core.pipeline import check_coverage
from covgate.errors import CoverageRegressionError, CovgateError
from covgate.render.summary import render_delta_table

if TYPE_CHECKING:
    from covgate.core.check import CheckResult


def _echo_summary(result: CheckResult) -> None:
    typer.echo(render_delta_table(result, color=color_allowed()))


def register(app: typer.Typer) -> None:
    @app.command("check")
    def check_cmd(
        report_file: Annotated[
            Path | None,
            typer.Option(
                "--report-file",
                "--report_file",
                envvar="COVGATE_REPORT_FILE",
                help="Code coverage report file.",
            ),
        ] = None,
        baseline_file: Annotated[
            Path | None,
            typer.Option(
                "--baseline-file",
                "--baseline_file",
                envvar="COVGATE_BASELINE_FILE",
                help="Code coverage baseline file.",
            ),
        ] = None,
        threshold_file: Annotated[
            Path | None,
            typer.Option(
                "--threshold-file",
                "--threshold_file",
                envvar="COVGATE_THRESHOLD_FILE",
                help="File containing package to threshold mappings, as overrides.",
            ),
        ] = None,
        *,
        summary: Annotated[
            bool,
            typer.Option("--summary", help="Print a table of every package's coverage change."),
        ] = False,
        quiet: Annotated[bool, typer.Option("-q", "--quiet", help="Emit only errors.")] = False,
        verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Emit diagnostic logging.")] = False,
    ) -> None:
        """Fail when package coverage dropped more than the allowed threshold."""
        configure_runtime(quiet=quiet, verbose=verbose)

        regression: CoverageRegressionError | None = None
        try:
            config = resolve_config(
                report_file=report_file,
                baseline_file=baseline_file,
                threshold_file=threshold_file,
            )
            result = check_coverage(config)
        except CoverageRegressionError as exc:
            regression = exc
            result = exc.result
        except CovgateError as exc:
            logger.error("%s", exc)
            raise typer.Exit(code=EXIT_GENERIC) from exc
        except Exception as exc:
            logger.exception("unexpected failure")
            raise typer.Exit(code=EXIT_GENERIC) from exc

        if regression is not None:
            logger.error("%s", regression)
        if summary:
            _echo_summary(result)
        if regression is not None:
            raise typer.Exit(code=EXIT_GENERIC) from regression
        logger.info("coverage check passed for %d packages", len(result.deltas))


__all__ = ["register"]
