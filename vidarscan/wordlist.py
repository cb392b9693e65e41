"""Reading of dictionary files and construction of candidate URLs."""

from __future__ import annotations

from typing import Iterator, TextIO


def _open(filename: str) -> TextIO:
    return open(filename, encoding="utf-8", errors="surrogateescape", newline="\n")


def _nonempty_lines(handle: TextIO) -> Iterator[str]:
    for raw in handle:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            yield line


def load_lines(filename: str) -> list[str]:
    """Return the non-empty lines of ``filename`` without line endings."""
    with _open(filename) as handle:
        return list(_nonempty_lines(handle))


def _urls(base_url: str, handle: TextIO) -> Iterator[str]:
    with handle:
        for line in _nonempty_lines(handle):
            yield base_url + line


def build_urls(base_url: str, filename: str) -> Iterator[str]:
    """Yield ``base_url`` joined with each non-empty line of ``filename``.

    The file is opened immediately, so a missing file raises here rather
    than on first iteration.
    """
    return _urls(base_url, _open(filename))