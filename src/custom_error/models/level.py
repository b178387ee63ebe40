"""Severity levels shared by reports and highlights."""

from __future__ import annotations

from enum import StrEnum


class Level(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def counted(self, count: int) -> str:
        """Summary phrase such as ``1 error`` or ``3 info messages``."""
        noun = "info message" if self is Level.INFO else self.value
        return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
