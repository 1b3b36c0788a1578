"""
Business Logic Layer Module.

This module contains the two request flows of the storefront service. It
implements the middle layer of the three-layer architecture:

- upload_notification: parse a payment-slip upload and relay it by email
- order_lookup: find an order and the customer's other orders in the sheet
- email_template: HTML body of the notification email

The logic layer knows nothing about Lambda events; handlers pass it plain
values and the external services it should talk to.
"""

from service.logic.order_lookup import OrderLookupService, find_orders
from service.logic.upload_notification import UploadNotificationService, parse_upload_request

__all__ = [
    "OrderLookupService",
    "UploadNotificationService",
    "find_orders",
    "parse_upload_request",
]
