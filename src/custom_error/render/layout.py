"""Context block layout: gutter, source rows and marker rows.

A block renders as::

     --> parser.py:4:9
    4 | let x =
      |         ^ expected expression

The gutter is as wide as the largest line number in the block. Each line
carrying highlights gets exactly one marker row beneath it.
"""

from __future__ import annotations

from itertools import groupby

from custom_error.models.context import ContextBlock, Highlight, SourceLine
from custom_error.models.level import Level
from custom_error.style.base import Role, Style, marker_role

SEPARATOR = "|"
LOCATION_ARROW = "-->"
NOTE_CONNECTOR = " "
MARKER_GLYPHS = {
    Level.ERROR: "^",
    Level.WARNING: "~",
    Level.INFO: "-",
}


def gutter_width(block: ContextBlock) -> int:
    """Digits in the largest line number of the block (at least one)."""
    return len(str(block.max_line_number)) if block.lines else 1


def layout_context(block: ContextBlock, style: Style) -> list[str]:
    """Lay out ``block`` as rendered rows, in the order its lines were given."""
    width = gutter_width(block)
    rows: list[str] = []
    if block.file is not None:
        rows.append(_location_row(block, width, style))
    for line in block.lines:
        rows.append(_source_row(line, width, style))
        highlights = block.highlights_for(line.number)
        if highlights:
            rows.append(_marker_row(highlights, width, style))
    return rows


def _location_row(block: ContextBlock, width: int, style: Style) -> str:
    location = block.file or ""
    # A single highlight pins the location down to a column.
    if len(block.highlights) == 1:
        highlight = block.highlights[0]
        location += f":{highlight.line}:{highlight.start + 1}"
    return f"{' ' * width}{style.color(LOCATION_ARROW, Role.GUTTER)} {location}"


def _source_row(line: SourceLine, width: int, style: Style) -> str:
    number = style.color(f"{line.number:>{width}}", Role.GUTTER)
    bar = style.color(SEPARATOR, Role.GUTTER)
    if not line.text:
        return f"{number} {bar}"
    return f"{number} {bar} {line.text}"


def _marker_row(highlights: list[Highlight], width: int, style: Style) -> str:
    """One row of marker runs and notes for the highlights of a single line.

    Every run is drawn at its own start column so it stays under the source
    text it marks. A note follows its run after the connector. Later runs
    and notes overwrite whatever an earlier run or note left in their cells.
    """
    cells: list[tuple[str, Role | None]] = []

    def put(column: int, text: str, role: Role) -> None:
        while len(cells) < column:
            cells.append((" ", None))
        for offset, char in enumerate(text):
            index = column + offset
            if index < len(cells):
                cells[index] = (char, role)
            else:
                cells.append((char, role))

    for highlight in sorted(highlights, key=lambda h: h.start):
        column = highlight.start
        role = marker_role(highlight.level)
        put(column, MARKER_GLYPHS[highlight.level] * highlight.width, role)
        if highlight.note:
            note_column = column + highlight.width
            put(note_column, NOTE_CONNECTOR + highlight.note, role)

    parts: list[str] = []
    for role, group in groupby(cells, key=lambda cell: cell[1]):
        text = "".join(char for char, _ in group)
        parts.append(text if role is None else style.color(text, role))
    bar = style.color(SEPARATOR, Role.GUTTER)
    return f"{' ' * width} {bar} {''.join(parts)}".rstrip()
