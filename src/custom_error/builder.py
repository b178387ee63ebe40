"""Fluent builder API for constructing reports."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Self

from custom_error.identifiers.registry import resolve_identifier
from custom_error.models.context import ContextBlock
from custom_error.models.errors import MissingRequiredField
from custom_error.models.level import Level
from custom_error.models.report import DefinitionSite, Report


@dataclass(frozen=True)
class ReportBuilder:
    """Immutable fluent accumulator for :class:`Report` values.

    Every method returns a new builder, so a half-built report can be shared
    or branched without one branch observing another's changes. Setters
    overwrite (last write wins) except :meth:`add_context`, which appends.
    """

    identifier: str | None = None
    title: str | None = None
    level: Level = Level.ERROR
    message: str | None = None
    help: str | None = None
    doc_url: str | None = None
    definition_site: DefinitionSite | None = None
    contexts: tuple[ContextBlock, ...] = ()

    @classmethod
    def for_variant(cls, variant: Any, title: str | None = None) -> ReportBuilder:
        """Start from a registered error variant, resolving its code and doc URL."""
        return cls(title=title).with_identifier(variant)

    def with_identifier(self, identifier: Any) -> Self:
        resolved = resolve_identifier(identifier)
        doc_url = resolved.doc_url if resolved.doc_url is not None else self.doc_url
        return replace(self, identifier=resolved.code, doc_url=doc_url)

    def with_title(self, title: str) -> Self:
        return replace(self, title=title)

    def with_message(self, message: str) -> Self:
        return replace(self, message=message)

    def with_help(self, help: str) -> Self:
        return replace(self, help=help)

    def with_doc_url(self, doc_url: str) -> Self:
        return replace(self, doc_url=doc_url)

    def with_definition_site(self, site: DefinitionSite) -> Self:
        return replace(self, definition_site=site)

    def here(self) -> Self:
        """Record the calling line as the definition site."""
        return replace(self, definition_site=DefinitionSite.from_caller(depth=1))

    def with_level(self, level: Level) -> Self:
        return replace(self, level=level)

    def warning(self) -> Self:
        return self.with_level(Level.WARNING)

    def info(self) -> Self:
        return self.with_level(Level.INFO)

    def add_context(self, block: ContextBlock) -> Self:
        return replace(self, contexts=(*self.contexts, block))

    def build(self, identifier: Any = None, title: str | None = None) -> Report:
        """Finalize the report.

        ``identifier`` and ``title`` given here override earlier values.
        Raises ``MissingRequiredField`` when either is still absent.
        """
        builder = self
        if identifier is not None:
            builder = builder.with_identifier(identifier)
        if title is not None:
            builder = builder.with_title(title)
        if not builder.identifier:
            raise MissingRequiredField("identifier")
        if not builder.title:
            raise MissingRequiredField("title")
        return Report(
            identifier=builder.identifier,
            title=builder.title,
            level=builder.level,
            message=builder.message,
            help=builder.help,
            doc_url=builder.doc_url,
            definition_site=builder.definition_site,
            contexts=builder.contexts,
        )
