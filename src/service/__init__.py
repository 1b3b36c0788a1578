"""
Storefront Lambda Service Module.

This package contains the two storefront endpoints, payment-slip upload
notification and order status lookup, following the three-layer
architecture pattern:

- handlers: API handlers and entry points
- logic: Request flows and domain rules
- dal: Email delivery and spreadsheet access
- models: Data models and schemas
- security: Credential resolution
"""

__version__ = "1.0.0"
__description__ = "Storefront payment-slip notification and order tracking API"

# Re-export commonly used classes for convenience
from service.models.input import OrderLookupQuery, UploadRequest
from service.models.output import OrderLookupOutput, SendEmailOutput
from service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "OrderLookupQuery",
    "UploadRequest",
    "OrderLookupOutput",
    "SendEmailOutput",
    "logger",
    "tracer",
    "metrics",
]
