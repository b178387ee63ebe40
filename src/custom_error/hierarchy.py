"""Hierarchy conversion: re-identify a report while keeping it as the cause.

A low-level report ("unexpected token") can be re-surfaced under a
higher-level identifier ("invalid configuration") without losing any of its
detail; the renderer prints the original after a ``caused by:`` divider.

``cause`` always points at a report that was fully built before the wrapper,
so a chain can never loop back on itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from custom_error.identifiers.registry import resolve_identifier
from custom_error.models.report import Report

logger = logging.getLogger(__name__)


def convert(identifier: Any, title: str, original: Report) -> Report:
    """Wrap ``original`` under ``identifier``/``title``.

    ``identifier`` is a code string or a registered variant. The wrapper
    carries no message, help, URL, definition site or contexts of its own;
    it inherits the level of the report it wraps.
    """
    resolved = resolve_identifier(identifier)
    wrapped = Report(
        identifier=resolved.code,
        title=title,
        level=original.level,
        cause=original,
    )
    logger.debug(
        "Converted %s -> %s (chain depth %d)", original.identifier, wrapped.identifier, wrapped.depth
    )
    return wrapped


def convert_all(identifier: Any, title: str, reports: Iterable[Report]) -> list[Report]:
    """Wrap each report of ``reports`` under the same identifier and title."""
    return [convert(identifier, title, report) for report in reports]


def cause_chain(report: Report) -> Iterator[Report]:
    """Yield ``report`` and then each cause, root cause last."""
    current: Report | None = report
    while current is not None:
        yield current
        current = current.cause


def root_cause(report: Report) -> Report:
    """The innermost report of the chain (``report`` itself when unwrapped)."""
    *_, last = cause_chain(report)
    return last
