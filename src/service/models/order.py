"""
Order record model for the order-lookup flow.

An order record is one spreadsheet data row keyed by the slugified header
names. Records are built fresh from the sheet on every request.
"""

import re
from typing import Dict, List, Sequence

OrderRecord = Dict[str, str]

_NON_SLUG_CHARS = re.compile(r'[^a-z0-9\s]')
_WHITESPACE_RUN = re.compile(r'\s+')


def slugify(text: str) -> str:
    """
    Normalize a header name into a record key.

    "Order Number" -> "order_number", "E-Mail!" -> "email".
    """
    slug = _NON_SLUG_CHARS.sub('', text.lower())
    slug = _WHITESPACE_RUN.sub('_', slug)
    return slug.strip()


def build_order_record(header_row: Sequence[str], row: Sequence[str]) -> OrderRecord:
    """
    Pair header names with a data row's cells by position.

    Args:
        header_row: Sheet header row
        row: Data row, possibly shorter than the header

    Returns:
        Mapping of slugified header to cell value ("" for missing cells)
    """
    record: OrderRecord = {}
    for index, header in enumerate(header_row):
        record[slugify(str(header))] = cell_value(row, index)
    return record


def cell_value(row: Sequence[str], index: int) -> str:
    """Return the cell at index as a string, "" when the row is short or the cell empty."""
    if index < len(row) and row[index] is not None:
        return str(row[index])
    return ''


def build_order_records(header_row: Sequence[str], rows: Sequence[Sequence[str]]) -> List[OrderRecord]:
    """Build one record per row."""
    return [build_order_record(header_row, row) for row in rows]
