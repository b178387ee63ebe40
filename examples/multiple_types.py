"""Errors from two independent enums re-surfaced under one umbrella enum."""

from __future__ import annotations

import logging
import sys
from enum import Enum

from custom_error import ProviderRegistry, Report, ReportBuilder, Settings, convert, emit


@ProviderRegistry.register
class Type1(Enum):
    ERROR1 = 1


@ProviderRegistry.register
class Type2(Enum):
    ERROR1 = 1


@ProviderRegistry.register
class SuperError(Enum):
    TYPE1 = "S001"
    TYPE2 = "S002"


def fn1() -> Report:
    return ReportBuilder.for_variant(Type1.ERROR1, "One error").build()


def fn2() -> Report:
    return ReportBuilder.for_variant(Type2.ERROR1, "Another error").build()


def fn3(one: bool) -> Report:
    if one:
        return convert(SuperError.TYPE1, "first subsystem failed", fn1())
    return convert(SuperError.TYPE2, "second subsystem failed", fn2())


def main() -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    emit(fn3(True), stream=sys.stdout, settings=settings)
    emit(fn3(False), stream=sys.stdout, settings=settings)


if __name__ == "__main__":
    main()
