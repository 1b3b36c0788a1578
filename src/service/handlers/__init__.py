"""
AWS Lambda Handlers Module.

This module contains the Lambda function handlers that serve as entry points
for the storefront service. Each handler implements the three-layer
architecture pattern:

1. Handler Layer (this module): Request/response handling, CORS, error mapping
2. Logic Layer: Upload notification and order lookup flows
3. Data Access Layer: Email delivery and spreadsheet integration

Handlers:
- send_email_handler.lambda_handler: OPTIONS/POST /send-email
- track_order_handler.lambda_handler: OPTIONS/GET /track-order
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from service.handlers.utils.observability import logger, tracer, metrics
from service.handlers.utils.rest_api_resolver import SEND_EMAIL_PATH, TRACK_ORDER_PATH

__all__ = [
    "logger",
    "tracer",
    "metrics",
    "SEND_EMAIL_PATH",
    "TRACK_ORDER_PATH",
]
