"""Text styling for rendered reports."""

# Import styles to trigger registration
import custom_error.style.ansi as _ansi  # noqa: F401
import custom_error.style.plain as _plain  # noqa: F401
from custom_error.style.ansi import AnsiStyle
from custom_error.style.base import Role, Style, label_role, marker_role
from custom_error.style.plain import PlainStyle
from custom_error.style.registry import StyleRegistry, color_enabled, select_style

__all__ = [
    "AnsiStyle",
    "PlainStyle",
    "Role",
    "Style",
    "StyleRegistry",
    "color_enabled",
    "label_role",
    "marker_role",
    "select_style",
]
