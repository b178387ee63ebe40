"""custom-error: structured, human-facing diagnostic reports.

Build a :class:`Report` with :class:`ReportBuilder`, attach annotated source
excerpts as :class:`ContextBlock` values, wrap lower-level reports with
:func:`convert`, and turn the result into text with :func:`render`.
"""

from custom_error.builder import ReportBuilder
from custom_error.hierarchy import cause_chain, convert, convert_all, root_cause
from custom_error.identifiers import (
    DocLinker,
    EnumIdentifierProvider,
    IdentifierProvider,
    ProviderRegistry,
    ResolvedIdentifier,
    TableIdentifierProvider,
)
from custom_error.models import (
    ContextBlock,
    CustomErrorError,
    DefinitionSite,
    Highlight,
    InvalidHighlight,
    Level,
    MissingRequiredField,
    Report,
    ReportCollection,
    ReportedError,
    SourceLine,
)
from custom_error.render import Renderer, emit, render, render_collection
from custom_error.settings import Settings
from custom_error.style import AnsiStyle, PlainStyle, Role, Style, select_style

__version__ = "0.4.0"

__all__ = [
    "AnsiStyle",
    "ContextBlock",
    "CustomErrorError",
    "DefinitionSite",
    "DocLinker",
    "EnumIdentifierProvider",
    "Highlight",
    "IdentifierProvider",
    "InvalidHighlight",
    "Level",
    "MissingRequiredField",
    "PlainStyle",
    "ProviderRegistry",
    "Renderer",
    "Report",
    "ReportBuilder",
    "ReportCollection",
    "ReportedError",
    "ResolvedIdentifier",
    "Role",
    "Settings",
    "SourceLine",
    "Style",
    "TableIdentifierProvider",
    "__version__",
    "cause_chain",
    "convert",
    "convert_all",
    "emit",
    "render",
    "render_collection",
    "root_cause",
    "select_style",
]
