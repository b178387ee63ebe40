"""Identifier providers: turn user-defined error variants into stable codes."""

from custom_error.identifiers.base import IdentifierProvider, ResolvedIdentifier
from custom_error.identifiers.doclinks import DocLinker
from custom_error.identifiers.providers import (
    EnumIdentifierProvider,
    TableIdentifierProvider,
    variant_key,
)
from custom_error.identifiers.registry import ProviderRegistry, resolve_identifier

__all__ = [
    "DocLinker",
    "EnumIdentifierProvider",
    "IdentifierProvider",
    "ProviderRegistry",
    "ResolvedIdentifier",
    "TableIdentifierProvider",
    "resolve_identifier",
    "variant_key",
]
