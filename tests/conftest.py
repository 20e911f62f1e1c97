from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import pytest
from click.testing import CliRunner

from covgate import logger

ReportSpec = Mapping[str, float | str] | Iterable[tuple[str, float | str]]


@pytest.fixture(autouse=True)
def _reset_logger_level() -> Iterable[None]:
    """The CLI sets the package logger level; keep tests independent of each other."""
    yield
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def report_content() -> Callable[[ReportSpec], str]:
    def build(packages: ReportSpec) -> str:
        items = packages.items() if isinstance(packages, Mapping) else packages
        options = "\n".join(
            f'    <option value="file{i}">{pkg} ({pct}%)</option>' for i, (pkg, pct) in enumerate(items)
        )
        return (
            "<!DOCTYPE html>\n<html>\n<body>\n"
            '<div id="nav">\n<select id="files">\n'
            f"{options}\n"
            "</select>\n</div>\n</body>\n</html>\n"
        )

    return build


@pytest.fixture
def report_file(tmp_path: Path, report_content: Callable[[ReportSpec], str]) -> Callable[..., Path]:
    def write(packages: ReportSpec, *, filename: str = "coverage.html") -> Path:
        path = tmp_path / filename
        path.write_text(report_content(packages), encoding="utf-8")
        return path

    return write


@pytest.fixture
def threshold_file(tmp_path: Path) -> Callable[..., Path]:
    def write(*lines: str, filename: str = "codecov.threshold") -> Path:
        path = tmp_path / filename
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return write
