"""
CORS header construction shared by both endpoints.

The storefront calls the API cross-origin from a single known domain with
credentials, so the allowed origin is one value and never ``*``.
"""

from typing import Dict

DEFAULT_ALLOW_ORIGIN = 'https://cocooriginalmm.com'
ALLOW_HEADERS = 'Content-Type, Authorization, X-Requested-With'

SEND_EMAIL_METHODS = 'POST, OPTIONS'
TRACK_ORDER_METHODS = 'GET, POST, PUT, DELETE, OPTIONS'


def build_cors_headers(
    allow_origin: str = DEFAULT_ALLOW_ORIGIN,
    allow_methods: str = SEND_EMAIL_METHODS,
    include_content_type: bool = True,
) -> Dict[str, str]:
    """
    Build the CORS header set attached to every response.

    Args:
        allow_origin: The single storefront origin allowed to call the API
        allow_methods: Value for Access-Control-Allow-Methods
        include_content_type: Whether to add the JSON Content-Type header

    Returns:
        Header name to value mapping
    """
    headers = {
        'Access-Control-Allow-Origin': allow_origin,
        'Access-Control-Allow-Methods': allow_methods,
        'Access-Control-Allow-Headers': ALLOW_HEADERS,
        'Access-Control-Allow-Credentials': 'true',
    }
    if include_content_type:
        headers['Content-Type'] = 'application/json'
    return headers
