"""The report model: one complete, immutable diagnostic."""

from __future__ import annotations

import inspect
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from custom_error.models.context import ContextBlock
from custom_error.models.errors import MissingRequiredField
from custom_error.models.level import Level


class DefinitionSite(BaseModel):
    """Where in the error-producing code a report was constructed."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    column: int

    @classmethod
    def from_caller(cls, depth: int = 0) -> DefinitionSite:
        """Capture the file, line and 1-based column of the calling code.

        ``depth`` skips further frames, for helpers that wrap this call.
        """
        frame = inspect.currentframe()
        try:
            target = frame.f_back if frame is not None else None
            for _ in range(depth):
                if target is None:
                    break
                target = target.f_back
            if target is None:
                return cls(file="<unknown>", line=0, column=0)
            info = inspect.getframeinfo(target, context=0)
            col_offset = info.positions.col_offset if info.positions else None
            return cls(
                file=info.filename,
                line=info.lineno,
                column=col_offset + 1 if col_offset is not None else 1,
            )
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class Report(BaseModel):
    """A diagnostic ready to render.

    ``identifier`` and ``title`` are mandatory; everything else is optional.
    ``cause`` links to the report this one was converted from, root cause last.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    title: str
    level: Level = Level.ERROR
    message: str | None = None
    help: str | None = None
    doc_url: str | None = None
    definition_site: DefinitionSite | None = None
    contexts: tuple[ContextBlock, ...] = ()
    cause: Report | None = None

    @model_validator(mode="before")
    @classmethod
    def _require_identity(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for name in ("identifier", "title"):
                if not data.get(name):
                    raise MissingRequiredField(name)
        return data

    @property
    def depth(self) -> int:
        """Number of reports in the cause chain below this one."""
        depth = 0
        cause = self.cause
        while cause is not None:
            depth += 1
            cause = cause.cause
        return depth

    def __str__(self) -> str:
        from custom_error.render import render

        return render(self)


class ReportedError(Exception):
    """Exception carrying a :class:`Report`.

    ``str()`` gives the plain rendering, so an uncaught ``ReportedError``
    still prints the whole diagnostic.
    """

    def __init__(self, report: Report) -> None:
        self.report = report
        super().__init__(report)

    def __str__(self) -> str:
        return str(self.report)

    def convert(self, identifier: Any, title: str) -> ReportedError:
        """Re-surface this error under a new identifier, keeping it as the cause."""
        from custom_error.hierarchy import convert

        return ReportedError(convert(identifier, title, self.report))
