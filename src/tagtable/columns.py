"""Column mini-language: ``[%LENGTH]TAG[(TITLE)]`` descriptors joined by ``|``.

Example: ``%25urgent(Now)|waiting|done(Done)`` describes three columns.
The parser is deliberately permissive and never raises; a descriptor that
does not fit the grammar simply becomes a tag with default settings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 1000

# Titles containing ")" are cut at the first ")" that lets the pattern reach
# the end of the descriptor; existing column specs rely on this.
_DESCRIPTOR_RE = re.compile(r"(?:%(\d+))?(.+?)(?:\((.+?)\))?", re.DOTALL)


@dataclass(frozen=True)
class Column:
    """A rendering rule: selector tag, header title and maximum cell width."""

    tag: str
    title: str
    max_length: int = DEFAULT_MAX_LENGTH


def parse_descriptor(descriptor: str) -> Column | None:
    """Parse one descriptor, returning ``None`` only for an empty one."""
    match = _DESCRIPTOR_RE.fullmatch(descriptor)
    if match is None:
        return None
    length, tag, title = match.groups()
    return Column(
        tag=tag,
        title=title if title is not None else tag,
        max_length=int(length) if length is not None else DEFAULT_MAX_LENGTH,
    )


def parse_columns(spec: str) -> list[Column]:
    """Parse a ``|``-separated column spec into columns, left to right."""
    columns: list[Column] = []
    for descriptor in spec.split("|"):
        column = parse_descriptor(descriptor)
        if column is None:
            logger.debug("Skipping empty column descriptor in %r", spec)
            continue
        columns.append(column)
    return columns


def format_columns(columns: Iterable[Column]) -> str:
    """Render columns back into the mini-language, omitting defaults."""
    parts: list[str] = []
    for column in columns:
        part = column.tag
        if column.max_length != DEFAULT_MAX_LENGTH:
            part = f"%{column.max_length}{part}"
        if column.title != column.tag:
            part = f"{part}({column.title})"
        parts.append(part)
    return "|".join(parts)
