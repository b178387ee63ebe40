"""Line-oriented parser that collects every problem before reporting."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path

from custom_error import (
    ContextBlock,
    ProviderRegistry,
    ReportBuilder,
    ReportCollection,
    Settings,
    emit,
)

logger = logging.getLogger("custom_error.examples.parser")

INPUT_FILE = Path(__file__).parent / "example_input_file.txt"


@ProviderRegistry.register
class ParseError(Enum):
    NOT_A_NUMBER = "P001"
    MISSING_HELP = "P002"
    INCORRECT_NUMBER_OF_ARGUMENTS = "P003"


def parse(path: Path) -> tuple[list[int], ReportCollection]:
    output: list[int] = []
    errors = ReportCollection()
    for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        if line.startswith("#"):
            continue
        context = ContextBlock.line(line, number=number).with_file(path.name)
        pieces = line.split()
        if len(pieces) != 2:
            errors += (
                ReportBuilder.for_variant(
                    ParseError.INCORRECT_NUMBER_OF_ARGUMENTS, "Incorrect number of arguments"
                )
                .here()
                .add_context(context.with_highlight(number, 0, len(line), note="expected 2 words"))
                .build()
            )
            continue
        keyword, value = pieces
        if keyword != "help":
            errors += (
                ReportBuilder.for_variant(ParseError.MISSING_HELP, "Missing help")
                .with_message("A line should always start with 'help'")
                .add_context(context.with_highlight(number, 0, len(keyword)))
                .build()
            )
        try:
            output.append(int(value))
        except ValueError as exc:
            start = line.index(value, len(keyword))
            errors += (
                ReportBuilder.for_variant(ParseError.NOT_A_NUMBER, "Not a valid number")
                .with_message("After the 'help' a number should be written")
                .with_help(str(exc))
                .add_context(context.with_highlight(number, start, start + len(value)))
                .build()
            )
    logger.info("Parsed %d values with %d problems", len(output), len(errors))
    return output, errors


def main(path: Path = INPUT_FILE) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    values, errors = parse(path)
    if not errors.is_empty():
        emit(errors, stream=sys.stdout, settings=settings)
        return
    for value in values:
        print(value)


if __name__ == "__main__":
    main()
