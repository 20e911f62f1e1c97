"""Core API for ``covgate``.

The submodules are importable on their own; the most common entry points are
re-exported here.
"""

from __future__ import annotations

from covgate.core.check import (
    CheckResult,
    DeltaRecorder,
    LoggingRecorder,
    MemoryRecorder,
    PackageDelta,
    check_deltas,
)
from covgate.core.config import LOG_FORMAT, CheckConfig, get_pyproject_defaults
from covgate.core.delta import compute_deltas
from covgate.core.pipeline import check_coverage
from covgate.core.report import parse_report, parse_report_line
from covgate.core.thresholds import load_thresholds, parse_threshold_line, resolve_threshold
from covgate.core.types import CoverageMap, DeltaMap, ThresholdMap

__all__ = [
    "LOG_FORMAT",
    "CheckConfig",
    "CheckResult",
    "CoverageMap",
    "DeltaMap",
    "DeltaRecorder",
    "LoggingRecorder",
    "MemoryRecorder",
    "PackageDelta",
    "ThresholdMap",
    "check_coverage",
    "check_deltas",
    "compute_deltas",
    "get_pyproject_defaults",
    "load_thresholds",
    "parse_report",
    "parse_report_line",
    "parse_threshold_line",
    "resolve_threshold",
]
