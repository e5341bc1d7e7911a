"""Table generation: one row per item, heading placed under matching tags.

Each column tests the item's tag set independently.  A cell holds the
item's heading (truncated to the column's ``max_length``) when the column's
tag is present, and is blank otherwise.  Rows whose cells all come out
blank (no matching column, an empty heading, a zero-width column) are left
out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

from tagtable.align import align_table
from tagtable.columns import Column
from tagtable.utils import truncate_to_width

logger = logging.getLogger(__name__)

SEPARATOR = "|--|"


@dataclass(frozen=True)
class Item:
    """An outline entry: display heading plus its tags."""

    heading: str
    tags: frozenset[str] = field(default_factory=frozenset)


ItemLike = Union[Item, tuple[str, Iterable[str]]]


def _as_item(item: ItemLike) -> Item:
    if isinstance(item, Item):
        return item
    heading, tags = item
    return Item(heading=heading, tags=frozenset(tags))


def _join_cells(cells: Iterable[str]) -> str:
    return "|" + "|".join(cells) + "|"


@dataclass(frozen=True)
class Table:
    """Rendered-table value: the columns plus the surviving body rows."""

    columns: tuple[Column, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def header(self) -> str:
        return _join_cells(column.title for column in self.columns)

    @property
    def separator(self) -> str:
        return SEPARATOR

    @property
    def body(self) -> str:
        return "\n".join(_join_cells(row) for row in self.rows)

    def render(self) -> str:
        return f"{self.header}\n{self.separator}\n{self.body}"

    def __str__(self) -> str:
        return self.render()


def generate(
    columns: Sequence[Column],
    items: Iterable[ItemLike],
    *,
    ellipsis: str = "...",
) -> Table:
    """Build the table for *items* laid out by *columns*.

    *items* may be :class:`Item` instances or plain ``(heading, tags)``
    pairs.  Rows keep the item order; a row whose cells all come out
    blank is dropped.
    """
    columns = tuple(columns)
    column_tags = {column.tag for column in columns}
    rows: list[tuple[str, ...]] = []
    seen = 0

    for raw in items:
        seen += 1
        item = _as_item(raw)
        if column_tags.isdisjoint(item.tags):
            continue
        cells = tuple(
            truncate_to_width(item.heading, column.max_length, ellipsis)
            if column.tag in item.tags
            else ""
            for column in columns
        )
        if not any(cells):
            continue
        rows.append(cells)

    logger.debug("Generated %d of %d rows for %d columns", len(rows), seen, len(columns))
    return Table(columns=columns, rows=tuple(rows))


def render_table(
    columns: Sequence[Column],
    items: Iterable[ItemLike],
    *,
    ellipsis: str = "...",
    align: bool = False,
) -> str:
    """Generate and render the table text, optionally aligned."""
    text = generate(columns, items, ellipsis=ellipsis).render()
    if align:
        text = align_table(text)
    return text
