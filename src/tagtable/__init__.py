"""tagtable: pipe-table summaries of tagged outline headings."""

from tagtable.align import align_table
from tagtable.columns import (
    DEFAULT_MAX_LENGTH,
    Column,
    format_columns,
    parse_columns,
    parse_descriptor,
)
from tagtable.outline import parse_heading, read_outline
from tagtable.table import Item, Table, generate, render_table
from tagtable.utils import pad_to_width, truncate_to_width, visible_width

__all__ = [
    # Columns
    "DEFAULT_MAX_LENGTH",
    "Column",
    "format_columns",
    "parse_columns",
    "parse_descriptor",
    # Table
    "Item",
    "Table",
    "generate",
    "render_table",
    "align_table",
    # Outline
    "parse_heading",
    "read_outline",
    # Utilities
    "pad_to_width",
    "truncate_to_width",
    "visible_width",
]
