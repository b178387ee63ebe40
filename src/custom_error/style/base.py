"""Abstract text-emphasis capability consumed by the renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum

from custom_error.models.level import Level


class Role(StrEnum):
    """What a piece of styled text is; styles map roles to colors."""

    IDENTIFIER = "identifier"
    HELP_MARKER = "help_marker"
    HIGHLIGHT_MARKER = "highlight_marker"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    GUTTER = "gutter"
    URL = "url"
    SUCCESS = "success"


_LABEL_ROLES = {
    Level.ERROR: Role.ERROR,
    Level.WARNING: Role.WARNING,
    Level.INFO: Role.INFO,
}

_MARKER_ROLES = {
    Level.ERROR: Role.HIGHLIGHT_MARKER,
    Level.WARNING: Role.WARNING,
    Level.INFO: Role.INFO,
}


def label_role(level: Level) -> Role:
    """Role for the level label in a report header or summary."""
    return _LABEL_ROLES[level]


def marker_role(level: Level) -> Role:
    """Role for a highlight's marker run and note."""
    return _MARKER_ROLES[level]


class Style(ABC):
    """Abstract base for all styles.

    Implementations must be pure: the same input always yields the same
    output, and empty text stays empty.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def emphasize(self, text: str) -> str:
        """Render ``text`` in bold."""

    @abstractmethod
    def color(self, text: str, role: Role) -> str:
        """Render ``text`` in the color assigned to ``role``."""
