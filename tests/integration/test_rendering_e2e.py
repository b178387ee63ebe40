"""End-to-end scenarios: build, convert and render through the public API."""

from __future__ import annotations

from enum import Enum

from custom_error import (
    ContextBlock,
    DocLinker,
    EnumIdentifierProvider,
    Level,
    ProviderRegistry,
    ReportBuilder,
    ReportCollection,
    ReportedError,
    convert,
    render,
    render_collection,
)
from custom_error.sources import TextLineSupplier
from tests.conftest import UNEXPECTED_TOKEN_TEXT

CONFIG = """\
[server]
port = "eighty"
host = localhost
"""


class ConfigError(Enum):
    INVALID = "E100"
    BAD_PORT = "E101"


class TestEndToEnd:
    def test_unexpected_token(self) -> None:
        report = (
            ReportBuilder()
            .add_context(
                ContextBlock(lines=[(4, "let x = ")]).with_highlight(
                    4, 8, 8, note="expected expression"
                )
            )
            .build("E001", "unexpected token")
        )
        assert render(report) == UNEXPECTED_TOKEN_TEXT

    def test_conversion_keeps_the_original_verbatim(self) -> None:
        original = ReportBuilder().add_context(
            ContextBlock(lines=[(4, "let x = ")]).with_highlight(
                4, 8, 8, note="expected expression"
            )
        ).build("E001", "unexpected token")
        ProviderRegistry.register(ConfigError)
        wrapped = convert(ConfigError.INVALID, "invalid config", original)
        assert render(wrapped) == (
            "error[E100]: invalid config\ncaused by:\n" + UNEXPECTED_TOKEN_TEXT
        )

    def test_report_from_supplied_lines(self) -> None:
        linker = DocLinker(package="confparse", version="0.9.0")
        ProviderRegistry.register(
            ConfigError, EnumIdentifierProvider(ConfigError, doc_linker=linker)
        )
        supplier = TextLineSupplier({"server.toml": CONFIG})
        block = ContextBlock.from_supplier(supplier, "server.toml", 2, 3).with_highlight(
            2, 7, 15, note="not a number"
        )
        report = (
            ReportBuilder.for_variant(ConfigError.BAD_PORT, "invalid port")
            .with_help("use an integer between 1 and 65535")
            .add_context(block)
            .build()
        )
        lines = render(report).splitlines()
        assert lines[:5] == [
            "error[E101]: invalid port",
            " --> server.toml:2:8",
            '2 | port = "eighty"',
            "  |        ^^^^^^^^ not a number",
            "3 | host = localhost",
        ]
        assert lines[5] == "help: use an integer between 1 and 65535"
        assert lines[6].startswith("url: https://confparse.readthedocs.io/en/0.9.0/")
        assert lines[6].endswith("ConfigError.html#BAD_PORT")

    def test_raised_error_prints_whole_diagnostic(self) -> None:
        report = ReportBuilder(identifier="E200", title="startup failed").warning().build()
        try:
            raise ReportedError(report)
        except ReportedError as exc:
            assert str(exc) == "warning[E200]: startup failed"

    def test_collection_of_mixed_levels(self) -> None:
        reports = ReportCollection()
        reports += ReportBuilder().build("E1", "broken")
        reports += ReportBuilder().warning().build("W1", "deprecated")
        reports += ReportBuilder().with_level(Level.INFO).build("I1", "note")
        assert render_collection(reports) == (
            "error[E1]: broken\n\n"
            "warning[W1]: deprecated\n\n"
            "info[I1]: note\n\n"
            "encountered: 1 error, 1 warning, 1 info message"
        )
