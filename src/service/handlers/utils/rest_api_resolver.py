"""
REST API resolver utilities for the storefront Lambda handlers.

Each endpoint runs as its own Lambda function with its own resolver; this
module holds the path constants and the factory both handlers use.
"""

import base64

from aws_lambda_powertools.event_handler import APIGatewayRestResolver
from aws_lambda_powertools.utilities.data_classes.common import BaseProxyEvent

# API path constants
SEND_EMAIL_PATH = '/send-email'
TRACK_ORDER_PATH = '/track-order'


def create_resolver() -> APIGatewayRestResolver:
    """
    Create an API Gateway REST resolver for one endpoint.

    CORS is not delegated to the resolver: the storefront expects a fixed
    header set on every response, preflight included, whatever the request
    Origin is.
    """
    return APIGatewayRestResolver(debug=False)


def get_raw_body(event: BaseProxyEvent) -> bytes:
    """Return the request body as bytes, undoing API Gateway's base64 encoding."""
    body = event.body
    if not body:
        return b''
    if event.is_base64_encoded:
        return base64.b64decode(body)
    return body.encode('utf-8')
