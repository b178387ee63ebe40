"""Pydantic domain models for custom-error reports."""

from custom_error.models.collection import ReportCollection
from custom_error.models.context import ContextBlock, Highlight, SourceLine
from custom_error.models.errors import (
    CustomErrorError,
    InvalidHighlight,
    MissingRequiredField,
    SourceUnavailableError,
    UnknownVariantError,
    UnsupportedStyleError,
)
from custom_error.models.level import Level
from custom_error.models.report import DefinitionSite, Report, ReportedError

__all__ = [
    "ContextBlock",
    "CustomErrorError",
    "DefinitionSite",
    "Highlight",
    "InvalidHighlight",
    "Level",
    "MissingRequiredField",
    "Report",
    "ReportCollection",
    "ReportedError",
    "SourceLine",
    "SourceUnavailableError",
    "UnknownVariantError",
    "UnsupportedStyleError",
]
