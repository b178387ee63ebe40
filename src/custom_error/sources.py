"""Line suppliers: fetch excerpt lines for context blocks.

The renderer only ever sees strings; reading files happens here, at the
caller's side of the boundary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from custom_error.models.errors import SourceUnavailableError


class LineSupplier(ABC):
    """Returns lines ``first..last`` (1-based, inclusive) of a named source."""

    @abstractmethod
    def lines(self, source: str, first: int, last: int) -> list[str]: ...


def _slice(all_lines: list[str], source: str, first: int, last: int) -> list[str]:
    if first < 1 or last < first:
        raise SourceUnavailableError(source, first, last, "invalid line range")
    if last > len(all_lines):
        raise SourceUnavailableError(
            source, first, last, f"source has only {len(all_lines)} lines"
        )
    return all_lines[first - 1 : last]


class TextLineSupplier(LineSupplier):
    """Serves lines from in-memory sources, keyed by name."""

    def __init__(self, sources: dict[str, str] | None = None) -> None:
        self._sources: dict[str, list[str]] = {}
        for name, text in (sources or {}).items():
            self.add(name, text)

    def add(self, source: str, text: str) -> None:
        self._sources[source] = text.splitlines()

    def lines(self, source: str, first: int, last: int) -> list[str]:
        if source not in self._sources:
            raise SourceUnavailableError(source, first, last, "unknown source")
        return _slice(self._sources[source], source, first, last)


class FileLineSupplier(LineSupplier):
    """Reads lines from files on disk, relative to ``root`` when given."""

    def __init__(self, root: Path | None = None, encoding: str = "utf-8") -> None:
        self._root = root
        self._encoding = encoding

    def lines(self, source: str, first: int, last: int) -> list[str]:
        path = Path(source)
        if self._root is not None and not path.is_absolute():
            path = self._root / path
        try:
            text = path.read_text(encoding=self._encoding)
        except OSError as exc:
            raise SourceUnavailableError(source, first, last, exc.strerror or str(exc)) from exc
        return _slice(text.splitlines(), source, first, last)
