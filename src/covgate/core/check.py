"""Threshold evaluation of per-package coverage deltas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from covgate import logger
from covgate.core.thresholds import resolve_threshold

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class PackageDelta:
    """Coverage change of one package together with the threshold applied to it."""

    package: str
    delta: float
    baseline: float
    current: float
    threshold: float = 0.0

    @property
    def failed(self) -> bool:
        return self.delta + self.threshold < 0


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of checking a delta map."""

    passed: bool
    deltas: list[PackageDelta] = field(default_factory=list)
    failures: list[PackageDelta] = field(default_factory=list)


class DeltaRecorder(Protocol):
    """Sink for the diagnostics produced while checking deltas."""

    def record_delta(self, entry: PackageDelta) -> None: ...

    def record_failure(self, entry: PackageDelta) -> None: ...


class LoggingRecorder:
    """Write diagnostics to the ``covgate`` logger."""

    def record_delta(self, entry: PackageDelta) -> None:
        logger.info(
            "Coverage change: %s:%.2f%% (%.2f%% to %.2f%%)",
            entry.package,
            entry.delta,
            entry.baseline,
            entry.current,
        )

    def record_failure(self, entry: PackageDelta) -> None:
        logger.error(
            "Coverage dropped: %s:%.2f%% (%.2f%% to %.2f%%)",
            entry.package,
            entry.delta,
            entry.baseline,
            entry.current,
        )


@dataclass(slots=True)
class MemoryRecorder:
    """Keep diagnostics in memory."""

    changes: list[PackageDelta] = field(default_factory=list)
    drops: list[PackageDelta] = field(default_factory=list)

    def record_delta(self, entry: PackageDelta) -> None:
        self.changes.append(entry)

    def record_failure(self, entry: PackageDelta) -> None:
        self.drops.append(entry)


def check_deltas(
    deltas: Mapping[str, float],
    current: Mapping[str, float],
    baseline: Mapping[str, float],
    thresholds: Mapping[str, float],
    recorder: DeltaRecorder | None = None,
) -> CheckResult:
    """Check every package's delta against its resolved threshold.

    All changes are recorded first, then every package whose
    ``delta + threshold`` is negative is recorded as a failure. The result passes
    when no package fails, which includes an empty *deltas*.
    """
    sink: DeltaRecorder = recorder if recorder is not None else LoggingRecorder()

    entries = [
        PackageDelta(
            package=pkg,
            delta=deltas[pkg],
            baseline=baseline.get(pkg, 0.0),
            current=current.get(pkg, 0.0),
            threshold=resolve_threshold(thresholds, pkg),
        )
        for pkg in sorted(deltas)
    ]

    for entry in entries:
        sink.record_delta(entry)

    failures: list[PackageDelta] = []
    for entry in entries:
        if entry.failed:
            sink.record_failure(entry)
            failures.append(entry)

    return CheckResult(passed=not failures, deltas=entries, failures=failures)


__all__ = [
    "CheckResult",
    "DeltaRecorder",
    "LoggingRecorder",
    "MemoryRecorder",
    "PackageDelta",
    "check_deltas",
]
