"""Provider registry: maps variant types to their identifier providers."""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, TypeVar

from custom_error.identifiers.base import IdentifierProvider, ResolvedIdentifier
from custom_error.identifiers.providers import EnumIdentifierProvider
from custom_error.models.errors import UnknownVariantError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class ProviderRegistry:
    """Registry of identifier providers keyed by variant type.

    Resolution happens once per distinct variant; later lookups are served
    from a cache.  Thread-safe.
    """

    _providers: dict[type, IdentifierProvider] = {}
    _resolved: dict[tuple[type, Any], ResolvedIdentifier] = {}
    _lock = threading.Lock()

    @classmethod
    def register(cls, variant_type: T, provider: IdentifierProvider | None = None) -> T:
        """Register ``provider`` for ``variant_type``. Can be used as a decorator.

        Enum classes registered without a provider get an
        :class:`EnumIdentifierProvider`.
        """
        if provider is None:
            if not issubclass(variant_type, Enum):
                raise TypeError(
                    f"{variant_type.__qualname__} is not an Enum; pass a provider explicitly"
                )
            provider = EnumIdentifierProvider(variant_type)
        with cls._lock:
            cls._providers[variant_type] = provider
            cls._resolved.clear()
        logger.debug(
            "Registered %s for %s", type(provider).__name__, variant_type.__qualname__
        )
        return variant_type

    @classmethod
    def provider_for(cls, variant: Any) -> IdentifierProvider:
        """Provider registered for the type of ``variant`` (or a base class)."""
        for klass in type(variant).__mro__:
            provider = cls._providers.get(klass)
            if provider is not None:
                return provider
        raise UnknownVariantError(variant, available=cls.available())

    @classmethod
    def resolve(cls, variant: Any) -> ResolvedIdentifier:
        """Resolve ``variant`` to its code and doc URL."""
        # Keyed by type too: members of two str enums can compare equal.
        key = (type(variant), variant)
        with cls._lock:
            cached = cls._resolved.get(key)
        if cached is not None:
            return cached
        resolved = cls.provider_for(variant).resolve(variant)
        logger.debug("Resolved %r -> %s", variant, resolved.code)
        with cls._lock:
            cls._resolved[key] = resolved
        return resolved

    @classmethod
    def available(cls) -> list[str]:
        """List the qualified names of registered variant types."""
        return sorted(klass.__qualname__ for klass in cls._providers)

    @classmethod
    def reset(cls) -> None:
        """Clear all providers and cached resolutions (for testing)."""
        with cls._lock:
            cls._providers.clear()
            cls._resolved.clear()


def resolve_identifier(identifier: Any) -> ResolvedIdentifier:
    """Accept either a ready-made code string or a registered variant."""
    if isinstance(identifier, str):
        return ResolvedIdentifier(code=identifier)
    return ProviderRegistry.resolve(identifier)
