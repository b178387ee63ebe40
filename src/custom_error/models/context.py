"""Source excerpts: numbered lines plus highlighted column ranges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from custom_error.models.errors import InvalidHighlight
from custom_error.models.level import Level

if TYPE_CHECKING:
    from custom_error.sources import LineSupplier


class Highlight(BaseModel):
    """A column range ``[start, end)`` on one line, optionally annotated."""

    model_config = ConfigDict(frozen=True)

    line: int
    start: int
    end: int
    note: str | None = None
    level: Level = Level.ERROR

    @property
    def width(self) -> int:
        """Number of marker glyphs drawn for this range (an empty range still gets one)."""
        return max(self.end - self.start, 1)


class SourceLine(BaseModel):
    """One excerpt line and the line number it had in its source."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1)
    text: str


class ContextBlock(BaseModel):
    """An excerpt of source lines with highlighted sub-spans and notes.

    Immutable: the ``with_*`` methods return a new, re-validated block.
    Lines are kept in the order given; they are not sorted by number.
    """

    model_config = ConfigDict(frozen=True)

    lines: tuple[SourceLine, ...] = ()
    highlights: tuple[Highlight, ...] = ()
    file: str | None = None

    @field_validator("lines", mode="before")
    @classmethod
    def _coerce_lines(cls, value: Any) -> Any:
        """Accept ``(number, text)`` pairs (tuples or lists) next to ``SourceLine`` instances."""
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return tuple(_as_source_line(item) for item in value)
        return value

    @model_validator(mode="after")
    def _check_highlights(self) -> Self:
        texts: dict[int, list[str]] = {}
        for line in self.lines:
            texts.setdefault(line.number, []).append(line.text)
        for highlight in self.highlights:
            _check_highlight(highlight, texts)
        return self

    # -- construction helpers ------------------------------------------------

    @classmethod
    def line(cls, text: str, number: int = 1) -> ContextBlock:
        """Block holding a single line."""
        return cls(lines=(SourceLine(number=number, text=text),))

    @classmethod
    def from_lines(cls, texts: Iterable[str], first_line: int = 1) -> ContextBlock:
        """Block of consecutive lines, numbered from ``first_line``."""
        return cls(
            lines=tuple(
                SourceLine(number=first_line + offset, text=text)
                for offset, text in enumerate(texts)
            )
        )

    @classmethod
    def from_supplier(
        cls, supplier: LineSupplier, path: str, first: int, last: int
    ) -> ContextBlock:
        """Block for lines ``first..last`` (inclusive) of ``path``, labelled with the path."""
        texts = supplier.lines(path, first, last)
        return cls.from_lines(texts, first_line=first).with_file(path)

    def with_file(self, file: str) -> ContextBlock:
        return self.model_copy(update={"file": file})

    def with_highlight(
        self,
        line: int,
        start: int,
        end: int,
        note: str | None = None,
        level: Level = Level.ERROR,
    ) -> ContextBlock:
        """Return a copy with one more highlight.

        Raises ``InvalidHighlight`` when the line is not in the block or the
        range does not fit its text.
        """
        return self.with_highlights(
            [Highlight(line=line, start=start, end=end, note=note, level=level)]
        )

    def with_highlights(self, highlights: Iterable[Highlight]) -> ContextBlock:
        return ContextBlock(
            lines=self.lines,
            highlights=(*self.highlights, *highlights),
            file=self.file,
        )

    # -- queries -------------------------------------------------------------

    @property
    def max_line_number(self) -> int:
        return max((line.number for line in self.lines), default=0)

    def highlights_for(self, number: int) -> list[Highlight]:
        """Highlights on line ``number``, in insertion order."""
        return [h for h in self.highlights if h.line == number]


def _as_source_line(item: Any) -> Any:
    if isinstance(item, Sequence) and not isinstance(item, (str, bytes)) and len(item) == 2:
        return SourceLine(number=item[0], text=item[1])
    return item


def _check_highlight(highlight: Highlight, texts: dict[int, list[str]]) -> None:
    candidates = texts.get(highlight.line)
    if candidates is None:
        raise InvalidHighlight(
            highlight.line, highlight.start, highlight.end, "line is not part of the block"
        )
    if highlight.start < 0:
        raise InvalidHighlight(
            highlight.line, highlight.start, highlight.end, "start column is negative"
        )
    if highlight.start > highlight.end:
        raise InvalidHighlight(
            highlight.line, highlight.start, highlight.end, "start column is after end column"
        )
    # The same number may appear twice; the range must fit every copy.
    length = min(len(text) for text in candidates)
    if highlight.end > length:
        raise InvalidHighlight(
            highlight.line,
            highlight.start,
            highlight.end,
            f"end column is past the end of the line ({length} columns)",
        )
