"""End-to-end coverage regression check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from covgate import logger
from covgate.core.check import check_deltas
from covgate.core.delta import compute_deltas
from covgate.core.report import parse_report
from covgate.core.thresholds import load_thresholds
from covgate.errors import CoverageRegressionError

if TYPE_CHECKING:
    from covgate.core.check import CheckResult, DeltaRecorder
    from covgate.core.config import CheckConfig


def check_coverage(config: CheckConfig, recorder: DeltaRecorder | None = None) -> CheckResult:
    """Compare the configured report against its baseline.

    Parse errors propagate as soon as they happen; later inputs are not read.
    Raises :class:`CoverageRegressionError` when any package fails its threshold.
    """
    report = parse_report(config.report_file, label="report")
    baseline = parse_report(config.baseline_file, label="baseline")
    thresholds = load_thresholds(config.threshold_file)

    deltas = compute_deltas(report, baseline)
    logger.debug(
        "comparing %d packages (%d in report, %d in baseline)", len(deltas), len(report), len(baseline)
    )

    result = check_deltas(deltas, report, baseline, thresholds, recorder)
    if not result.passed:
        raise CoverageRegressionError(result)
    return result


__all__ = ["check_coverage"]
