"""Shared test fixtures for custom-error."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from custom_error.identifiers import ProviderRegistry
from custom_error.models import ContextBlock, Report
from custom_error.render import Renderer
from custom_error.style import PlainStyle

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"

UNEXPECTED_TOKEN_TEXT = """\
error[E001]: unexpected token
4 | let x = 
  |         ^ expected expression"""


@pytest.fixture(autouse=True)
def _clean_provider_registry() -> Iterator[None]:
    """Every test starts and ends with no identifier providers registered."""
    ProviderRegistry.reset()
    yield
    ProviderRegistry.reset()


@pytest.fixture
def renderer() -> Renderer:
    return Renderer(PlainStyle())


@pytest.fixture
def unexpected_token_block() -> ContextBlock:
    return ContextBlock(lines=[(4, "let x = ")]).with_highlight(
        4, 8, 8, note="expected expression"
    )


@pytest.fixture
def unexpected_token(unexpected_token_block: ContextBlock) -> Report:
    """Low-level parser report used across rendering and conversion tests."""
    return Report(
        identifier="E001",
        title="unexpected token",
        contexts=(unexpected_token_block,),
    )
