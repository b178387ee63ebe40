"""Style that leaves text untouched (no escape sequences)."""

from __future__ import annotations

from custom_error.style.base import Role, Style
from custom_error.style.registry import StyleRegistry


@StyleRegistry.register
class PlainStyle(Style):
    @property
    def name(self) -> str:
        return "plain"

    def emphasize(self, text: str) -> str:
        return text

    def color(self, text: str, role: Role) -> str:
        return text
