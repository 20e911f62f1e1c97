"""Scoped, line-oriented reading of input files."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from covgate import logger
from covgate.core.config import MAX_LINE_LENGTH
from covgate.errors import FileOpenError, ScanError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from typing import TextIO


@contextmanager
def open_text(path: Path, *, label: str) -> Iterator[TextIO]:
    """Open *path* for reading and always close it on exit.

    Failing to open raises :class:`FileOpenError`. Failing to close is only logged,
    so it never replaces the outcome of the block.
    """
    try:
        handle = path.open(encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        msg = f"failed to open {label} file {path}: {exc.strerror or exc}"
        raise FileOpenError(msg) from exc
    try:
        yield handle
    finally:
        try:
            handle.close()
        except OSError as exc:
            logger.warning("failed to close file %s: %s", path, exc)


def iter_lines(handle: TextIO, *, path: Path, label: str) -> Iterator[str]:
    """Yield the lines of *handle* without line terminators.

    Only a line feed ends a line. One carriage return right before it (or at the
    end of the file) is dropped; any other carriage return stays in the line.
    Undecodable bytes arrive as U+FFFD. Raises :class:`ScanError` when the stream
    cannot be read or a line exceeds ``MAX_LINE_LENGTH`` bytes of UTF-8.
    """
    try:
        for number, raw in enumerate(handle, start=1):
            line = raw.removesuffix("\n").removesuffix("\r")
            if len(line.encode("utf-8")) > MAX_LINE_LENGTH:
                msg = f"failed to read {label} file {path}: line {number} exceeds {MAX_LINE_LENGTH} bytes"
                raise ScanError(msg)
            yield line
    except OSError as exc:
        msg = f"failed to read {label} file {path}: {exc}"
        raise ScanError(msg) from exc


__all__ = ["iter_lines", "open_text"]
