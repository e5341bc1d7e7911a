"""Org-style alignment for pipe tables.

Turns the compact ``|a|b|`` / ``|--|`` output into padded columns::

    | Title | Other |
    |-------+-------|
    | x     |       |
"""

from __future__ import annotations

import re

from tagtable.utils import pad_to_width, visible_width

_RULE_CELL_RE = re.compile(r"^-[-+]*$")


def _split_cells(line: str) -> list[str]:
    inner = line[1:-1] if len(line) > 1 and line.endswith("|") else line[1:]
    return [cell.strip() for cell in inner.split("|")]


def _is_rule(cells: list[str]) -> bool:
    return all(_RULE_CELL_RE.match(cell) for cell in cells)


def align_table(text: str) -> str:
    """Pad every table line of *text* so columns line up.

    Lines not starting with ``|`` pass through untouched; rows with fewer
    cells than the widest row are filled with blanks.
    """
    lines = text.split("\n")
    parsed: list[list[str] | None] = [
        _split_cells(line) if line.startswith("|") else None for line in lines
    ]
    data_rows = [cells for cells in parsed if cells is not None and not _is_rule(cells)]
    if not data_rows:
        return text

    ncols = max(len(cells) for cells in data_rows)
    widths = [0] * ncols
    for cells in data_rows:
        for i, cell in enumerate(cells):
            widths[i] = max(widths[i], visible_width(cell))

    out: list[str] = []
    for line, cells in zip(lines, parsed):
        if cells is None:
            out.append(line)
        elif _is_rule(cells):
            out.append("|" + "+".join("-" * (w + 2) for w in widths) + "|")
        else:
            cells = cells + [""] * (ncols - len(cells))
            out.append(
                "|" + "|".join(f" {pad_to_width(c, w)} " for c, w in zip(cells, widths)) + "|"
            )
    return "\n".join(out)
