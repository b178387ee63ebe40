"""Exceptions raised while building reports and resolving their collaborators."""

from __future__ import annotations


class CustomErrorError(Exception):
    """Base class for errors raised by the library itself.

    Not a ``ValueError``: pydantic validators re-raise it untouched instead of
    folding it into a ``ValidationError``.
    """


class InvalidHighlight(CustomErrorError):
    """Raised when a highlight does not fit the context block it is added to."""

    def __init__(self, line: int, start: int, end: int, reason: str) -> None:
        self.line = line
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(f"Invalid highlight on line {line} [{start}, {end}): {reason}")


class MissingRequiredField(CustomErrorError):
    """Raised when a report is finalized without an identifier or a title."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Report is missing required field '{field}'")


class UnknownVariantError(CustomErrorError, KeyError):
    """Raised when no identifier provider is registered for a variant's type."""

    def __init__(self, variant: object, available: list[str]) -> None:
        self.variant = variant
        self.available = available
        super().__init__(
            f"No identifier provider for {type(variant).__qualname__}. "
            f"Registered: {', '.join(available) or '(none)'}"
        )

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class UnsupportedStyleError(CustomErrorError):
    """Raised when a requested style is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.style_name = name
        self.available = available
        super().__init__(f"Unsupported style '{name}'. Available: {', '.join(available)}")


class SourceUnavailableError(CustomErrorError):
    """Raised by a line supplier when the requested lines cannot be produced."""

    def __init__(self, source: str, first: int, last: int, reason: str) -> None:
        self.source = source
        self.first = first
        self.last = last
        super().__init__(f"Cannot read lines {first}-{last} of {source}: {reason}")
