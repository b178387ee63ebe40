"""ANSI terminal style backed by termcolor."""

from __future__ import annotations

from termcolor import colored

from custom_error.style.base import Role, Style
from custom_error.style.registry import StyleRegistry

# role -> (termcolor color, termcolor attributes)
_PALETTE: dict[Role, tuple[str, list[str]]] = {
    Role.IDENTIFIER: ("cyan", ["bold"]),
    Role.HELP_MARKER: ("blue", ["bold"]),
    Role.HIGHLIGHT_MARKER: ("red", ["bold"]),
    Role.ERROR: ("red", ["bold"]),
    Role.WARNING: ("yellow", ["bold"]),
    Role.INFO: ("blue", []),
    Role.GUTTER: ("blue", []),
    Role.URL: ("blue", ["underline"]),
    Role.SUCCESS: ("green", []),
}


@StyleRegistry.register
class AnsiStyle(Style):
    """Colors via ANSI escape codes.

    Color is always emitted; whether a terminal should get this style at all
    is decided by :func:`custom_error.style.select_style`.
    """

    @property
    def name(self) -> str:
        return "ansi"

    def emphasize(self, text: str) -> str:
        if not text:
            return text
        return colored(text, attrs=["bold"], force_color=True)

    def color(self, text: str, role: Role) -> str:
        if not text:
            return text
        color, attrs = _PALETTE[role]
        return colored(text, color, attrs=attrs, force_color=True)
