"""Central configuration and constants for ``covgate``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from covgate import logger

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Longest line accepted from an input file (same limit as a default line scanner token).
MAX_LINE_LENGTH = 64 * 1024

# Keys accepted in ``[tool.covgate]`` and as CLI options.
CONFIG_KEYS: tuple[str, ...] = ("report_file", "baseline_file", "threshold_file")


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Input paths for a single coverage check run."""

    report_file: Path
    baseline_file: Path
    threshold_file: Path


def get_pyproject_defaults(pyproject: Path | None = None) -> dict[str, Path]:
    """Return input paths configured under ``[tool.covgate]`` in *pyproject*.

    Relative paths are resolved against the directory holding the file. A missing
    or unreadable file yields an empty mapping.
    """
    path = pyproject if pyproject is not None else Path("./pyproject.toml")
    if not path.exists():
        return {}
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return {}

    section = data.get("tool", {}).get("covgate", {})
    found: dict[str, Path] = {}
    for key in CONFIG_KEYS:
        value = section.get(key)
        if isinstance(value, str) and value:
            found[key] = path.parent / value
    if found:
        logger.debug("Using covgate settings from %s: %s", path, ", ".join(sorted(found)))
    return found


__all__ = ["CONFIG_KEYS", "LOG_FORMAT", "MAX_LINE_LENGTH", "CheckConfig", "get_pyproject_defaults"]
