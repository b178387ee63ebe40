"""Standalone reports: a context line, help text and a documentation link."""

from __future__ import annotations

import logging
import sys
from enum import Enum

from custom_error import ContextBlock, Level, ProviderRegistry, ReportBuilder, Settings, emit


@ProviderRegistry.register
class ErrorType(Enum):
    PARSE_ERROR = "E0001"
    INTEGER_OVERFLOW = "E0002"
    DIVIDE_BY_ZERO = "E0003"


def main() -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    raw = "oops"
    try:
        int(raw)
    except ValueError as exc:
        emit(
            ReportBuilder.for_variant(ErrorType.PARSE_ERROR, "could not parse number")
            .with_message("I did really expect to parse it as an integer.")
            .add_context(ContextBlock.line(str(exc)))
            .build(),
            stream=sys.stdout,
            settings=settings,
        )

    emit(
        ReportBuilder.for_variant(ErrorType.DIVIDE_BY_ZERO, "division by zero")
        .with_help("Divide by 0 is mathematically undefined so it cannot be completed.")
        .with_doc_url("https://www.mathsisfun.com/numbers/dividing-by-zero.html")
        .build(),
        stream=sys.stdout,
        settings=settings,
    )

    declaration = (
        ContextBlock.from_lines(["import math", "#[deny(overflow)]", ""], first_line=5)
        .with_highlight(6, 7, 15, note="overflow deny is set here", level=Level.INFO)
    )
    usage = (
        ContextBlock.from_lines(
            [
                "def calc(test):",
                "    n = 123",
                "    x = n * test",
                "    print(x)",
            ],
            first_line=121,
        )
        .with_highlight(123, 8, 16, note="overflow happened here")
        .with_highlight(122, 4, 5, note="'n' is small", level=Level.INFO)
        .with_highlight(121, 9, 13, note="'test' is unconstrained", level=Level.INFO)
    )
    emit(
        ReportBuilder.for_variant(ErrorType.INTEGER_OVERFLOW, "integer overflow")
        .here()
        .add_context(declaration)
        .add_context(usage)
        .build(),
        stream=sys.stdout,
        settings=settings,
    )


if __name__ == "__main__":
    main()
