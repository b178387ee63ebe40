"""Identifier provider interface: error variant -> stable code (+ doc URL)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResolvedIdentifier:
    """The stable code for a variant and, when known, its documentation link."""

    code: str
    doc_url: str | None = None


class IdentifierProvider(ABC):
    """Turns user-defined error variants into identifiers.

    ``resolve`` must be deterministic and free of side effects; results are
    cached by :class:`~custom_error.identifiers.registry.ProviderRegistry`.
    """

    @abstractmethod
    def resolve(self, variant: Any) -> ResolvedIdentifier:
        """Return the identifier for ``variant``."""
