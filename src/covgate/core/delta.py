from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from covgate.core.types import DeltaMap


def compute_deltas(current: Mapping[str, float], baseline: Mapping[str, float]) -> DeltaMap:
    """Return ``current - baseline`` for every package seen in either report.

    A package missing from *baseline* counts from zero; one missing from
    *current* (removed or renamed) loses its whole baseline value.
    """
    deltas: DeltaMap = {pkg: cov - baseline.get(pkg, 0.0) for pkg, cov in current.items()}
    for pkg, base in baseline.items():
        if pkg not in current:
            deltas[pkg] = 0.0 - base
    return deltas


__all__ = ["compute_deltas"]
