"""Per-package coverage extraction from HTML coverage reports.

Only the package selector rows of the report are used, e.g.::

    <option value="file0">example.com/project/pkg/util.go (72.5%)</option>

Every other line is ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from covgate import logger
from covgate.core.files import iter_lines, open_text
from covgate.core.numbers import parse_float
from covgate.errors import ParseFloatError

if TYPE_CHECKING:
    from pathlib import Path

    from covgate.core.types import CoverageMap

# groups: option id, package path, percent
_OPTION_RE = re.compile(r' *<option value="(.*)">(.*) \((.*)%\)</option>')


def parse_report_line(line: str) -> tuple[str, float] | None:
    """Return ``(package, percent)`` for a package row, ``None`` for any other line.

    Raises :class:`ParseFloatError` when the row's percent is not a number.
    """
    m = _OPTION_RE.search(line)
    if m is None:
        return None
    _option_id, package, raw_percent = m.groups()
    try:
        percent = parse_float(raw_percent)
    except ValueError as exc:
        msg = f"invalid coverage percent for package {package!r}: {raw_percent!r}"
        raise ParseFloatError(msg) from exc
    return package, percent


def parse_report(path: Path, *, label: str = "report") -> CoverageMap:
    """Read *path* and map each reported package to its coverage percentage.

    When a package appears more than once the last row wins. *label* names the
    file's role ("report", "baseline") in error messages.
    """
    coverage: CoverageMap = {}
    with open_text(path, label=label) as handle:
        for line in iter_lines(handle, path=path, label=label):
            try:
                row = parse_report_line(line)
            except ParseFloatError as exc:
                msg = f"cannot parse {label} file {path}: {exc}"
                raise ParseFloatError(msg) from exc
            if row is not None:
                package, percent = row
                coverage[package] = percent

    logger.debug("parsed %d packages from %s file %s", len(coverage), label, path)
    return coverage


__all__ = ["parse_report", "parse_report_line"]
