"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including parsed input models, the outbound email model, output response
models, and the order record helpers.
"""

from .input import OrderLookupQuery, UploadedFile, UploadRequest
from .output import ErrorOutput, OrderLookupOutput, SendEmailOutput
from .notification import EmailAttachment, EmailMessage, NotificationSettings
from .order import OrderRecord, build_order_record, slugify

__all__ = [
    # Input models
    "UploadRequest",
    "UploadedFile",
    "OrderLookupQuery",

    # Output models
    "SendEmailOutput",
    "OrderLookupOutput",
    "ErrorOutput",

    # Notification models
    "EmailMessage",
    "EmailAttachment",
    "NotificationSettings",

    # Order records
    "OrderRecord",
    "build_order_record",
    "slugify",
]
