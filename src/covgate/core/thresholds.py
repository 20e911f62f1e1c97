"""Per-package threshold overrides: loading and prefix resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from covgate import logger
from covgate.core.files import iter_lines, open_text
from covgate.core.numbers import parse_float
from covgate.errors import ParseFloatError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from covgate.core.types import ThresholdMap

DEFAULT_THRESHOLD = 0.0


def parse_threshold_line(line: str) -> tuple[str, float] | None:
    """Parse a ``KEY=VALUE`` line into ``(key, value)``.

    Comments (``#``) and lines without ``=`` return ``None``. The split happens at
    the first ``=``, so everything after it is the value.
    """
    stripped = line.strip()
    if stripped.startswith("#"):
        return None
    key, sep, raw_value = stripped.partition("=")
    if not sep:
        return None
    key = key.strip()
    value = raw_value.strip()
    try:
        threshold = parse_float(value)
    except ValueError as exc:
        msg = f"failed to parse threshold for package {key!r}: {value!r}, {exc}"
        raise ParseFloatError(msg) from exc
    return key, threshold


def load_thresholds(path: Path) -> ThresholdMap:
    """Load prefix overrides from *path*; later duplicates replace earlier ones."""
    thresholds: ThresholdMap = {}
    with open_text(path, label="threshold") as handle:
        for line in iter_lines(handle, path=path, label="threshold"):
            try:
                entry = parse_threshold_line(line)
            except ParseFloatError as exc:
                msg = f"cannot parse threshold file {path}: {exc}"
                raise ParseFloatError(msg) from exc
            if entry is not None:
                key, value = entry
                thresholds[key] = value

    logger.debug("loaded %d threshold overrides from %s", len(thresholds), path)
    return thresholds


def resolve_threshold(thresholds: Mapping[str, float], package: str) -> float:
    """Return the threshold of the longest key that prefixes *package*.

    Falls back to ``DEFAULT_THRESHOLD`` when nothing matches. An empty key never
    matches.
    """
    matched = DEFAULT_THRESHOLD
    matched_len = 0
    for prefix, threshold in thresholds.items():
        if len(prefix) > matched_len and package.startswith(prefix):
            matched_len = len(prefix)
            matched = threshold
    return matched


__all__ = ["DEFAULT_THRESHOLD", "load_thresholds", "parse_threshold_line", "resolve_threshold"]
