"""Tests for identifier providers, the provider registry and doc links."""

from __future__ import annotations

from enum import Enum, IntEnum, StrEnum
from typing import Any

import pytest

from custom_error.identifiers import (
    DocLinker,
    EnumIdentifierProvider,
    IdentifierProvider,
    ProviderRegistry,
    ResolvedIdentifier,
    TableIdentifierProvider,
    resolve_identifier,
    variant_key,
)
from custom_error.models import UnknownVariantError
from custom_error.settings import Settings


class ParseError(Enum):
    NOT_A_NUMBER = "P001"
    UNKNOWN_COMMAND = "P002"


class Type1(Enum):
    ERROR1 = 1
    ERROR2 = 2


class Color(StrEnum):
    RED = "red"


class Shade(StrEnum):
    RED = "red"


class Priority(IntEnum):
    LOW = 1


class CountingProvider(IdentifierProvider):
    def __init__(self) -> None:
        self.calls = 0

    def resolve(self, variant: Any) -> ResolvedIdentifier:
        self.calls += 1
        return ResolvedIdentifier(code=f"C{self.calls:03d}")


class TestEnumIdentifierProvider:
    def test_string_value_is_the_code(self) -> None:
        provider = EnumIdentifierProvider(ParseError)
        assert provider.resolve(ParseError.NOT_A_NUMBER) == ResolvedIdentifier(code="P001")

    def test_non_string_value_uses_namespace(self) -> None:
        provider = EnumIdentifierProvider(Type1)
        assert provider.resolve(Type1.ERROR2).code == "Type1::ERROR2"

    def test_custom_namespace(self) -> None:
        provider = EnumIdentifierProvider(Type1, namespace="io")
        assert provider.namespace == "io"
        assert provider.resolve(Type1.ERROR1).code == "io::ERROR1"

    def test_foreign_member_is_rejected(self) -> None:
        provider = EnumIdentifierProvider(ParseError)
        with pytest.raises(UnknownVariantError):
            provider.resolve(Type1.ERROR1)

    def test_doc_linker_adds_url(self) -> None:
        linker = DocLinker(package="calc", version="2.1.0")
        provider = EnumIdentifierProvider(ParseError, doc_linker=linker)
        resolved = provider.resolve(ParseError.UNKNOWN_COMMAND)
        assert resolved.doc_url is not None
        assert resolved.doc_url.startswith("https://calc.readthedocs.io/en/2.1.0/")
        assert resolved.doc_url.endswith("ParseError.html#UNKNOWN_COMMAND")


class TestTableIdentifierProvider:
    def test_lookup(self) -> None:
        provider = TableIdentifierProvider(
            {("Type1", "ERROR1"): "T100"},
            doc_urls={("Type1", "ERROR1"): "https://example.org/T100"},
        )
        resolved = provider.resolve(Type1.ERROR1)
        assert resolved == ResolvedIdentifier(code="T100", doc_url="https://example.org/T100")

    def test_missing_entry(self) -> None:
        provider = TableIdentifierProvider({("Type1", "ERROR1"): "T100"})
        with pytest.raises(UnknownVariantError) as exc_info:
            provider.resolve(Type1.ERROR2)
        assert exc_info.value.available == ["Type1::ERROR1"]

    def test_variant_key(self) -> None:
        assert variant_key(Type1.ERROR1) == ("Type1", "ERROR1")
        assert variant_key("plain") == ("str", "plain")


class TestProviderRegistry:
    def test_register_enum_without_provider(self) -> None:
        ProviderRegistry.register(ParseError)
        assert ProviderRegistry.resolve(ParseError.NOT_A_NUMBER).code == "P001"
        assert ProviderRegistry.available() == ["ParseError"]

    def test_register_as_decorator(self) -> None:
        @ProviderRegistry.register
        class Local(Enum):
            BROKEN = "L001"

        assert ProviderRegistry.resolve(Local.BROKEN).code == "L001"

    def test_non_enum_needs_a_provider(self) -> None:
        with pytest.raises(TypeError):
            ProviderRegistry.register(int)

    def test_unregistered_type(self) -> None:
        with pytest.raises(UnknownVariantError) as exc_info:
            ProviderRegistry.resolve(Type1.ERROR1)
        assert "Type1" in str(exc_info.value)
        assert "(none)" in str(exc_info.value)

    def test_unknown_variant_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            ProviderRegistry.resolve(Type1.ERROR1)

    def test_resolution_is_cached(self) -> None:
        provider = CountingProvider()
        ProviderRegistry.register(Type1, provider)
        first = ProviderRegistry.resolve(Type1.ERROR1)
        second = ProviderRegistry.resolve(Type1.ERROR1)
        assert first == second
        assert provider.calls == 1

    def test_distinct_variants_resolve_separately(self) -> None:
        provider = CountingProvider()
        ProviderRegistry.register(Type1, provider)
        ProviderRegistry.resolve(Type1.ERROR1)
        ProviderRegistry.resolve(Type1.ERROR2)
        assert provider.calls == 2

    def test_equal_members_of_different_enums_are_kept_apart(self) -> None:
        ProviderRegistry.register(Color, EnumIdentifierProvider(Color, namespace="color"))
        ProviderRegistry.register(Shade, EnumIdentifierProvider(Shade, namespace="shade"))
        assert Color.RED == Shade.RED
        assert ProviderRegistry.resolve(Color.RED).code == "red"
        # Same string value; both use it as the code, but each resolved via its own provider.
        assert ProviderRegistry.provider_for(Shade.RED) is not ProviderRegistry.provider_for(
            Color.RED
        )

    def test_int_enum_member_uses_namespace(self) -> None:
        ProviderRegistry.register(Priority)
        assert ProviderRegistry.resolve(Priority.LOW).code == "Priority::LOW"

    def test_reregistering_clears_the_cache(self) -> None:
        ProviderRegistry.register(Type1)
        assert ProviderRegistry.resolve(Type1.ERROR1).code == "Type1::ERROR1"
        ProviderRegistry.register(Type1, EnumIdentifierProvider(Type1, namespace="v2"))
        assert ProviderRegistry.resolve(Type1.ERROR1).code == "v2::ERROR1"

    def test_resolve_identifier_passes_strings_through(self) -> None:
        assert resolve_identifier("E001") == ResolvedIdentifier(code="E001")


class TestDocLinker:
    def test_link(self) -> None:
        linker = DocLinker(package="calc", version="1.0.0")
        assert (
            linker.link("calc.errors.ParseError", "NOT_A_NUMBER")
            == "https://calc.readthedocs.io/en/1.0.0/calc/errors/ParseError.html#NOT_A_NUMBER"
        )

    def test_custom_template(self) -> None:
        linker = DocLinker(package="calc", version="1.0.0", template="{package}/{anchor}")
        assert linker.link("x.Y", "Z") == "calc/Z"

    def test_from_installed_distribution(self) -> None:
        from importlib.metadata import version

        linker = DocLinker.from_distribution("pydantic")
        assert linker.package == "pydantic"
        assert linker.version == version("pydantic")

    def test_missing_distribution_links_to_latest(self) -> None:
        linker = DocLinker.from_distribution("surely-not-an-installed-distribution")
        assert linker.version == "latest"

    def test_template_comes_from_settings(self) -> None:
        settings = Settings(docs_url_template="https://docs.example/{version}/{anchor}")
        linker = DocLinker.from_distribution("pydantic", settings=settings)
        assert linker.link("a.B", "C") == f"https://docs.example/{linker.version}/C"
