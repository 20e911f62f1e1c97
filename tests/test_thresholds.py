from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from covgate.core.thresholds import (
    DEFAULT_THRESHOLD,
    load_thresholds,
    parse_threshold_line,
    resolve_threshold,
)
from covgate.errors import FileOpenError, ParseFloatError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("pkg/a=-10", ("pkg/a", -10.0)),
        ("pkg/c = 0", ("pkg/c", 0.0)),
        ("   istio.io/istio/mixer=2.5   ", ("istio.io/istio/mixer", 2.5)),
        ("pkg/a=5.0", ("pkg/a", 5.0)),
        ("=1", ("", 1.0)),
    ],
)
def test_parse_threshold_line(line: str, expected: tuple[str, float]) -> None:
    assert parse_threshold_line(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "# comment", "  #pkg/a=5", "pkg/a", "no equals here"])
def test_parse_threshold_line_skips_non_entries(line: str) -> None:
    assert parse_threshold_line(line) is None


@pytest.mark.parametrize(
    ("line", "pattern"),
    [
        ("pkg/a=lots", "failed to parse threshold for package 'pkg/a': 'lots'"),
        ("pkg/a=", "failed to parse threshold for package 'pkg/a': ''"),
        ("pkg/a=1_0", "failed to parse threshold for package 'pkg/a': '1_0'"),
        # everything after the first '=' is the value
        ("pkg/a=b=-1", "failed to parse threshold for package 'pkg/a': 'b=-1'"),
    ],
)
def test_parse_threshold_line_rejects_bad_value(line: str, pattern: str) -> None:
    with pytest.raises(ParseFloatError, match=pattern):
        parse_threshold_line(line)


def test_load_thresholds_ignores_comments_and_blanks(threshold_file: Callable[..., Path]) -> None:
    path = threshold_file(
        "# comment",
        "",
        "pkg/c = 0",
        "   ",
        "pkg/a=-10",
        "not an entry",
    )
    assert load_thresholds(path) == {"pkg/c": 0.0, "pkg/a": -10.0}


def test_load_thresholds_last_duplicate_wins(threshold_file: Callable[..., Path]) -> None:
    path = threshold_file("pkg=1", "pkg=2")
    assert load_thresholds(path) == {"pkg": 2.0}


def test_load_thresholds_empty_file(threshold_file: Callable[..., Path]) -> None:
    assert load_thresholds(threshold_file()) == {}


def test_load_thresholds_bad_value_aborts(threshold_file: Callable[..., Path]) -> None:
    path = threshold_file("pkg/a=1", "pkg/b=oops", "pkg/c=2")
    with pytest.raises(ParseFloatError, match=r"cannot parse threshold file .*codecov\.threshold: .*'pkg/b'"):
        load_thresholds(path)


def test_load_thresholds_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileOpenError, match="failed to open threshold file"):
        load_thresholds(tmp_path / "missing.threshold")


def test_resolve_threshold_without_match_is_default() -> None:
    assert resolve_threshold({}, "pkg/a") == DEFAULT_THRESHOLD == 0.0
    assert resolve_threshold({"other": -5.0}, "pkg/a") == 0.0


def test_resolve_threshold_prefers_longest_prefix() -> None:
    thresholds = {"pkg": 1.0, "pkg/a": 2.0, "pkg/a/b": 3.0, "pkg/z": 9.0}
    assert resolve_threshold(thresholds, "pkg/a/b/c") == 3.0
    assert resolve_threshold(thresholds, "pkg/a/x") == 2.0
    assert resolve_threshold(thresholds, "pkg/q") == 1.0


def test_resolve_threshold_is_independent_of_order() -> None:
    forward = {"pkg": 1.0, "pkg/a": 2.0}
    backward = {"pkg/a": 2.0, "pkg": 1.0}
    assert resolve_threshold(forward, "pkg/a/b") == resolve_threshold(backward, "pkg/a/b") == 2.0


def test_resolve_threshold_is_plain_string_prefix() -> None:
    # no path-segment awareness: "pkg/a" also prefixes "pkg/ab"
    assert resolve_threshold({"pkg/a": 4.0}, "pkg/ab") == 4.0


def test_resolve_threshold_empty_key_never_matches() -> None:
    assert resolve_threshold({"": 50.0}, "pkg/a") == 0.0
