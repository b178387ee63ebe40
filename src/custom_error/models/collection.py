"""Ordered aggregation of reports produced by one run (e.g. one parsed file)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Self

from custom_error.models.level import Level
from custom_error.models.report import Report


@dataclass
class ReportCollection:
    """Accumulates reports so a caller can keep going after the first problem."""

    _reports: list[Report] = field(default_factory=list)

    def append(self, report: Report) -> None:
        self._reports.append(report)

    def extend(self, reports: Iterable[Report]) -> None:
        self._reports.extend(reports)

    def __iadd__(self, report: Report) -> Self:
        self.append(report)
        return self

    def __iter__(self) -> Iterator[Report]:
        return iter(self._reports)

    def __len__(self) -> int:
        return len(self._reports)

    def is_empty(self) -> bool:
        return not self._reports

    def count(self, level: Level) -> int:
        return sum(1 for report in self._reports if report.level is level)

    @property
    def has_errors(self) -> bool:
        return self.count(Level.ERROR) > 0

    def convert(self, identifier: Any, title: str) -> ReportCollection:
        """Wrap every report under ``identifier``/``title``."""
        from custom_error.hierarchy import convert_all

        return ReportCollection(convert_all(identifier, title, self._reports))

    def __str__(self) -> str:
        from custom_error.render import render_collection

        return render_collection(self)
