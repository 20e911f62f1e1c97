"""Centralised exception hierarchy for covgate."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from covgate.core.check import CheckResult


class CovgateError(Exception):
    """Base class for all custom covgate exceptions."""


class ConfigError(CovgateError):
    """Required configuration (an input path) is missing or unusable."""


class FileOpenError(CovgateError):
    """An input file could not be opened."""


class ScanError(CovgateError):
    """Reading an input file failed part-way through."""


class ParseFloatError(CovgateError, ValueError):
    """A numeric field in a report or threshold line is not a valid float."""


class CoverageRegressionError(CovgateError):
    """One or more packages dropped below their allowed threshold."""

    def __init__(self, result: CheckResult, message: str | None = None) -> None:
        super().__init__(message or "some test coverage has dropped more than the allowed threshold")
        self.result = result


__all__ = [
    "ConfigError",
    "CoverageRegressionError",
    "CovgateError",
    "FileOpenError",
    "ParseFloatError",
    "ScanError",
]
