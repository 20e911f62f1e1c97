"""Helpers shared by the CLI commands."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click.utils as click_utils

from covgate import logger
from covgate.core.config import CONFIG_KEYS, LOG_FORMAT, CheckConfig, get_pyproject_defaults
from covgate.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def configure_runtime(*, quiet: bool, verbose: bool) -> None:
    """Configure logging based on *quiet*/*verbose*."""
    level = logging.ERROR if quiet else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger.setLevel(level)


def resolve_config(
    *,
    report_file: Path | None,
    baseline_file: Path | None,
    threshold_file: Path | None,
    pyproject: Path | None = None,
) -> CheckConfig:
    """Build the run configuration, filling missing paths from ``[tool.covgate]``."""
    given = {
        "report_file": report_file,
        "baseline_file": baseline_file,
        "threshold_file": threshold_file,
    }
    if any(value is None for value in given.values()):
        defaults = get_pyproject_defaults(pyproject)
        given = {key: value if value is not None else defaults.get(key) for key, value in given.items()}

    missing = [key for key in CONFIG_KEYS if given[key] is None]
    if missing:
        names = ", ".join("--" + key.replace("_", "-") for key in missing)
        msg = f"missing required input: {names}"
        raise ConfigError(msg)

    return CheckConfig(
        report_file=given["report_file"],
        baseline_file=given["baseline_file"],
        threshold_file=given["threshold_file"],
    )


def color_allowed() -> bool:
    stdout = sys.stdout
    is_tty = bool(getattr(stdout, "isatty", lambda: False)())
    return is_tty and not click_utils.should_strip_ansi(stdout)


__all__ = ["color_allowed", "configure_runtime", "resolve_config"]
