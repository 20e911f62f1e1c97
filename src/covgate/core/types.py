from __future__ import annotations

from typing import TypeAlias

CoverageMap: TypeAlias = dict[str, float]
"""Package path -> coverage percentage (0..100)."""

ThresholdMap: TypeAlias = dict[str, float]
"""Package prefix -> signed offset added to a package's delta before checking it."""

DeltaMap: TypeAlias = dict[str, float]
"""Package path -> current minus baseline coverage."""

__all__ = ["CoverageMap", "DeltaMap", "ThresholdMap"]
