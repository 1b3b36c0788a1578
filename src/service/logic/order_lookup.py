"""
Business logic for the order status lookup.

Reads the order sheet, finds the requested order by its ID column and, when
the customer's email is given, the customer's other orders.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from aws_lambda_powertools.metrics import MetricUnit

from service.dal import SheetReader
from service.handlers.utils.errors import SheetLayoutError
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.input import OrderLookupQuery
from service.models.order import build_order_record, build_order_records, cell_value
from service.models.output import OrderLookupOutput

ORDER_NUMBER_HEADER = 'ID'
EMAIL_HEADER = 'Email'


def locate_column(header_row: Sequence[str], header: str) -> int:
    """
    Return the index of an exactly named header.

    Raises:
        SheetLayoutError: If the header is not present
    """
    for index, name in enumerate(header_row):
        if name == header:
            return index
    raise SheetLayoutError(header)


def find_orders(
    values: Sequence[Sequence[str]],
    order_number: str,
    email: Optional[str] = None,
) -> OrderLookupOutput:
    """
    Match sheet rows against a lookup.

    Args:
        values: Sheet rows, header row first; must not be empty
        order_number: Value matched against the ID column
        email: Optional value matched against the Email column

    Returns:
        The first row with a matching ID, and every row with a matching
        email whose ID differs from the requested one
    """
    header_row = values[0]
    data_rows = values[1:]
    id_index = locate_column(header_row, ORDER_NUMBER_HEADER)

    matching_row = next(
        (row for row in data_rows if cell_value(row, id_index) == order_number),
        None,
    )

    other_rows: List[Sequence[str]] = []
    if email:
        email_index = locate_column(header_row, EMAIL_HEADER)
        other_rows = [
            row for row in data_rows
            if cell_value(row, email_index) == email and cell_value(row, id_index) != order_number
        ]

    return OrderLookupOutput(
        order=build_order_record(header_row, matching_row) if matching_row is not None else None,
        other_orders=build_order_records(header_row, other_rows),
    )


class OrderLookupService:
    """Answers order status lookups from the order sheet."""

    def __init__(self, sheet_reader: SheetReader, empty_sheet_as_list: bool = True):
        self.sheet_reader = sheet_reader
        self.empty_sheet_as_list = empty_sheet_as_list

    @tracer.capture_method
    def lookup_order(self, query: OrderLookupQuery) -> Union[Dict[str, Any], List[Any]]:
        """
        Look up an order and the customer's other orders.

        Returns:
            ``{"order": ..., "other_orders": [...]}``; for an empty sheet a
            bare ``[]`` unless the unified shape is configured
        """
        values = self.sheet_reader.get_values()
        metrics.add_metric(name='OrderLookup', unit=MetricUnit.Count, value=1)

        if not values:
            logger.warning('Order sheet is empty')
            if self.empty_sheet_as_list:
                return []
            return OrderLookupOutput().model_dump()

        result = find_orders(values, query.order_number, query.email)

        if result.order is None:
            metrics.add_metric(name='OrderLookupMiss', unit=MetricUnit.Count, value=1)
        else:
            metrics.add_metric(name='OrderLookupHit', unit=MetricUnit.Count, value=1)

        logger.info('Order lookup completed', extra={
            'order_number': query.order_number,
            'found': result.order is not None,
            'other_orders_count': len(result.other_orders),
        })
        return result.model_dump()
