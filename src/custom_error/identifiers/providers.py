"""Stock identifier providers: enum-derived codes and explicit lookup tables."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from custom_error.identifiers.base import IdentifierProvider, ResolvedIdentifier
from custom_error.identifiers.doclinks import DocLinker
from custom_error.models.errors import UnknownVariantError


def variant_key(variant: Any) -> tuple[str, str]:
    """``(namespace, name)`` pair identifying a variant independent of its value."""
    name = variant.name if isinstance(variant, Enum) else str(variant)
    return type(variant).__qualname__, name


class EnumIdentifierProvider(IdentifierProvider):
    """Codes for the members of one ``Enum`` class.

    A member whose value is a string uses that value as its code
    (``NOT_A_NUMBER = "E001"``); any other member becomes
    ``{namespace}::{MEMBER}``, the namespace defaulting to the class name.
    """

    def __init__(
        self,
        enum_class: type[Enum],
        namespace: str | None = None,
        doc_linker: DocLinker | None = None,
    ) -> None:
        self._enum_class = enum_class
        self._namespace = namespace or enum_class.__qualname__
        self._doc_linker = doc_linker

    @property
    def namespace(self) -> str:
        return self._namespace

    def code_for(self, member: Enum) -> str:
        if isinstance(member.value, str) and member.value:
            return member.value
        return f"{self._namespace}::{member.name}"

    def resolve(self, variant: Any) -> ResolvedIdentifier:
        if not isinstance(variant, self._enum_class):
            raise UnknownVariantError(variant, available=[self._enum_class.__qualname__])
        doc_url = None
        if self._doc_linker is not None:
            type_path = f"{self._enum_class.__module__}.{self._enum_class.__qualname__}"
            doc_url = self._doc_linker.link(type_path, variant.name)
        return ResolvedIdentifier(code=self.code_for(variant), doc_url=doc_url)


class TableIdentifierProvider(IdentifierProvider):
    """Codes looked up in a hand-written ``(namespace, variant) -> code`` table."""

    def __init__(
        self,
        codes: Mapping[tuple[str, str], str],
        doc_urls: Mapping[tuple[str, str], str] | None = None,
    ) -> None:
        self._codes = dict(codes)
        self._doc_urls = dict(doc_urls or {})

    def resolve(self, variant: Any) -> ResolvedIdentifier:
        key = variant_key(variant)
        if key not in self._codes:
            raise UnknownVariantError(
                variant, available=sorted(f"{ns}::{name}" for ns, name in self._codes)
            )
        return ResolvedIdentifier(code=self._codes[key], doc_url=self._doc_urls.get(key))
