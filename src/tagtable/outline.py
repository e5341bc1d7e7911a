"""Minimal org-style outline reader producing table items.

Only heading lines are considered::

    * TODO Write report        :urgent:work:
    ** Nested entry            :waiting:

Body text, drawers and anything else is ignored.
"""

from __future__ import annotations

import re

from tagtable.table import Item

_HEADING_RE = re.compile(r"^\*+[ \t]+(?P<rest>.*?)[ \t]*$")
_TAGS_RE = re.compile(r"(?:^|[ \t]+):(?P<tags>(?:[^\s:]+:)+)$")


def parse_heading(line: str) -> Item | None:
    """Return the item for an outline heading line, or ``None``."""
    match = _HEADING_RE.match(line)
    if match is None:
        return None
    rest = match.group("rest")
    tags: frozenset[str] = frozenset()
    tag_match = _TAGS_RE.search(rest)
    if tag_match is not None:
        tags = frozenset(t for t in tag_match.group("tags").split(":") if t)
        rest = rest[: tag_match.start()]
    return Item(heading=rest.rstrip(), tags=tags)


def read_outline(text: str) -> list[Item]:
    """Collect an item for every heading in *text*, in document order."""
    items: list[Item] = []
    for line in text.splitlines():
        item = parse_heading(line)
        if item is not None:
            items.append(item)
    return items
