"""Style registry and terminal capability detection."""

from __future__ import annotations

import logging
import os
from typing import TextIO

from custom_error.models.errors import UnsupportedStyleError
from custom_error.settings import Settings
from custom_error.style.base import Style

logger = logging.getLogger(__name__)


class StyleRegistry:
    """Registry for style implementations."""

    _styles: dict[str, type[Style]] = {}

    @classmethod
    def register(cls, style_class: type[Style]) -> type[Style]:
        """Register a style class. Can be used as a decorator."""
        # Instantiate to read the name property
        instance = style_class()
        cls._styles[instance.name] = style_class
        return style_class

    @classmethod
    def get(cls, name: str) -> Style:
        """Get an instance of the named style."""
        if name not in cls._styles:
            raise UnsupportedStyleError(name, available=cls.available())
        return cls._styles[name]()

    @classmethod
    def available(cls) -> list[str]:
        """List registered style names."""
        return sorted(cls._styles.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered styles (for testing)."""
        cls._styles.clear()


def color_enabled(settings: Settings, stream: TextIO | None = None) -> bool:
    """Decide whether output to ``stream`` should carry color.

    ``color=never``, ``NO_COLOR`` and ``TERM=dumb`` switch color off;
    ``color=always`` and ``FORCE_COLOR`` switch it on; otherwise color
    follows whether the stream is a terminal.
    """
    if settings.color == "never":
        return False
    if settings.color == "always":
        return True
    if os.getenv("NO_COLOR") is not None or os.getenv("TERM") == "dumb":
        return False
    if os.getenv("FORCE_COLOR") is not None:
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


def select_style(settings: Settings | None = None, stream: TextIO | None = None) -> Style:
    """Return the configured style when color is enabled, else the plain style."""
    if settings is None:
        settings = Settings()
    name = settings.style if color_enabled(settings, stream) else "plain"
    logger.debug("Selected style %r (color=%s)", name, settings.color)
    return StyleRegistry.get(name)
