"""
Track Order Handler - Lambda function for order status lookups.

This module implements the handler layer of the lookup endpoint. Client
errors are reported with their message; every other failure is answered
with a generic internal server error and logged with its cause.
"""

import json
from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.dal.sheets_handler import GoogleSheetsHandler
from service.handlers.models.env_vars import get_cors_env_vars, get_track_order_env_vars
from service.handlers.utils.cors import TRACK_ORDER_METHODS, build_cors_headers
from service.handlers.utils.errors import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    RequestValidationError,
    create_api_response,
    handle_service_errors,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.rest_api_resolver import TRACK_ORDER_PATH, create_resolver
from service.logic.order_lookup import OrderLookupService
from service.models.input import OrderLookupQuery
from service.models.output import ErrorOutput
from service.security.secrets_manager import resolve_credential

app = create_resolver()


def cors_headers() -> Dict[str, str]:
    """CORS header set of the lookup endpoint."""
    env_vars = get_cors_env_vars()
    return build_cors_headers(allow_origin=env_vars.CORS_ALLOW_ORIGIN, allow_methods=TRACK_ORDER_METHODS)


def create_order_lookup_service() -> OrderLookupService:
    """Wire the lookup service to the configured spreadsheet."""
    env_vars = get_track_order_env_vars()
    sheet_reader = GoogleSheetsHandler(
        client_email=env_vars.SERVICE_ACCOUNT_EMAIL,
        private_key=resolve_credential(
            env_vars.SERVICE_ACCOUNT_KEY,
            env_vars.SERVICE_ACCOUNT_KEY_SECRET_NAME,
            key_name='private_key',
        ),
        spreadsheet_id=env_vars.SPREADSHEET_ID,
        sheet_range=env_vars.SHEET_RANGE,
    )
    return OrderLookupService(sheet_reader=sheet_reader, empty_sheet_as_list=env_vars.empty_sheet_as_list)


@app.route(TRACK_ORDER_PATH, method='OPTIONS')
def track_order_preflight() -> Response:
    """Answer the CORS preflight with headers only."""
    env_vars = get_cors_env_vars()
    headers = build_cors_headers(
        allow_origin=env_vars.CORS_ALLOW_ORIGIN,
        allow_methods=TRACK_ORDER_METHODS,
        include_content_type=False,
    )
    return create_api_response(200, None, headers)


@app.get(TRACK_ORDER_PATH)
@tracer.capture_method
@handle_service_errors(cors_headers, mask_server_errors=True)
def track_order() -> Response:
    """
    Look up an order by number, optionally with the customer's other orders.

    Returns:
        200 with ``{"order": ..., "other_orders": [...]}``
    """
    order_number = app.current_event.get_query_string_value(name='orderNumber', default_value=None)
    email = app.current_event.get_query_string_value(name='email', default_value=None)

    if not order_number:
        raise RequestValidationError('orderNumber parameter is required')

    query = OrderLookupQuery(order_number=order_number, email=email or None)
    tracer.put_annotation("order_number", query.order_number)
    logger.info("Order lookup request received", extra={
        "order_number": query.order_number,
        "with_email": query.email is not None,
    })

    body = create_order_lookup_service().lookup_order(query)
    return create_api_response(200, body, cors_headers())


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway response
    """
    try:
        metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)
        tracer.put_annotation("service", "track-order")

        return app.resolve(event, context)

    except Exception as e:
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})

        return {
            "statusCode": 500,
            "headers": build_cors_headers(allow_methods=TRACK_ORDER_METHODS),
            "body": json.dumps(ErrorOutput(error=INTERNAL_SERVER_ERROR_MESSAGE).model_dump()),
        }
