"""Report rendering: Report + Style -> text."""

from __future__ import annotations

import sys
from typing import TextIO

from custom_error.models.collection import ReportCollection
from custom_error.models.level import Level
from custom_error.models.report import Report
from custom_error.render.layout import layout_context
from custom_error.settings import Settings
from custom_error.style.base import Role, Style, label_role
from custom_error.style.plain import PlainStyle
from custom_error.style.registry import select_style

CAUSE_DIVIDER = "caused by:"


class Renderer:
    """Renders reports with a style.

    Pure: no I/O, and the same report always renders to the same text.
    With :class:`PlainStyle` the output carries no escape sequences.
    """

    def __init__(self, style: Style | None = None) -> None:
        self._style = style if style is not None else PlainStyle()

    @property
    def style(self) -> Style:
        return self._style

    def render(self, report: Report) -> str:
        """Render ``report`` and its cause chain; no trailing newline."""
        return "\n".join(self.render_lines(report))

    def render_lines(self, report: Report) -> list[str]:
        lines: list[str] = []
        current: Report | None = report
        # Walk the chain iteratively; its length is up to the caller.
        while current is not None:
            if lines:
                lines.append(self._style.emphasize(CAUSE_DIVIDER))
            lines.extend(self._report_lines(current))
            current = current.cause
        return lines

    def render_collection(self, reports: ReportCollection) -> str:
        """Render every report, blank-line separated, then a summary line."""
        sections = [self.render(report) for report in reports]
        sections.append(self.summary(reports))
        return "\n\n".join(sections)

    def summary(self, reports: ReportCollection) -> str:
        if reports.is_empty():
            return self._style.color("no messages!", Role.SUCCESS)
        parts = [
            self._style.color(level.counted(count), label_role(level))
            for level in Level
            if (count := reports.count(level))
        ]
        return f"encountered: {', '.join(parts)}"

    # -- sections ------------------------------------------------------------

    def _report_lines(self, report: Report) -> list[str]:
        style = self._style
        lines = [self._header(report)]
        if report.definition_site is not None:
            lines.append(f"  {style.color('=', Role.GUTTER)} defined at {report.definition_site}")
        if report.message:
            lines.append(report.message)
        for block in report.contexts:
            lines.extend(layout_context(block, style))
        if report.help:
            lines.append(f"{style.color('help', Role.HELP_MARKER)}: {report.help}")
        if report.doc_url:
            lines.append(
                f"{style.color('url', Role.HELP_MARKER)}: {style.color(report.doc_url, Role.URL)}"
            )
        return lines

    def _header(self, report: Report) -> str:
        style = self._style
        level = style.color(report.level.value, label_role(report.level))
        identifier = style.color(report.identifier, Role.IDENTIFIER)
        return f"{level}[{identifier}]: {style.emphasize(report.title)}"


def render(report: Report, style: Style | None = None) -> str:
    """Render ``report`` with ``style`` (plain when omitted)."""
    return Renderer(style).render(report)


def render_collection(reports: ReportCollection, style: Style | None = None) -> str:
    return Renderer(style).render_collection(reports)


def emit(
    item: Report | ReportCollection,
    stream: TextIO | None = None,
    settings: Settings | None = None,
) -> None:
    """Write a report or collection to ``stream`` (default ``sys.stderr``).

    Color follows :func:`~custom_error.style.select_style` for that stream.
    """
    if stream is None:
        stream = sys.stderr
    renderer = Renderer(select_style(settings, stream))
    if isinstance(item, ReportCollection):
        text = renderer.render_collection(item)
    else:
        text = renderer.render(item)
    stream.write(text + "\n")
