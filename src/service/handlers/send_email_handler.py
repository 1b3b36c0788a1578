"""
Send Email Handler - Lambda function for payment-slip upload notifications.

This module implements the handler layer of the upload endpoint: CORS
preflight, request decoding, and mapping of the notification flow's outcome
to HTTP responses.
"""

import json
from typing import Any, Dict

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.handlers.models.env_vars import get_cors_env_vars, get_send_email_env_vars
from service.handlers.utils.cors import SEND_EMAIL_METHODS, build_cors_headers
from service.handlers.utils.errors import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    create_api_response,
    handle_service_errors,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.handlers.utils.rest_api_resolver import SEND_EMAIL_PATH, create_resolver, get_raw_body
from service.logic.upload_notification import UploadNotificationService
from service.models.notification import NotificationSettings
from service.models.output import ErrorOutput, SendEmailOutput
from service.security.secrets_manager import resolve_credential

app = create_resolver()


def cors_headers() -> Dict[str, str]:
    """CORS header set of the upload endpoint."""
    env_vars = get_cors_env_vars()
    return build_cors_headers(allow_origin=env_vars.CORS_ALLOW_ORIGIN, allow_methods=SEND_EMAIL_METHODS)


def load_notification_settings() -> NotificationSettings:
    """Build notification settings from the environment, resolving the API key secret."""
    env_vars = get_send_email_env_vars()
    return NotificationSettings(
        api_key=resolve_credential(
            env_vars.RESEND_API_KEY,
            env_vars.RESEND_API_KEY_SECRET_NAME,
            key_name='api_key',
        ),
        sender=env_vars.RESEND_FROM,
        shop_owner_email=env_vars.SHOP_OWNER_EMAIL,
        shop_name=env_vars.SHOP_NAME,
    )


@app.route(SEND_EMAIL_PATH, method='OPTIONS')
def send_email_preflight() -> Response:
    """Answer the CORS preflight with headers only."""
    return create_api_response(200, None, cors_headers())


@app.post(SEND_EMAIL_PATH)
@tracer.capture_method
@handle_service_errors(cors_headers)
def send_email() -> Response:
    """
    Relay a customer's payment-slip upload to the shop owner.

    Returns:
        200 with the delivery service's response data
    """
    logger.info("Upload notification request received")

    content_type = app.current_event.get_header_value(name='content-type', default_value='')
    service = UploadNotificationService(settings=load_notification_settings())
    data = service.send_upload_notification(content_type, get_raw_body(app.current_event))

    return create_api_response(200, SendEmailOutput(data=data).model_dump(), cors_headers())


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
        tracer.put_annotation("service", "send-email")

        return app.resolve(event, context)

    except Exception as e:
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)
        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})

        return {
            "statusCode": 500,
            "headers": build_cors_headers(allow_methods=SEND_EMAIL_METHODS),
            "body": json.dumps(ErrorOutput(error=INTERNAL_SERVER_ERROR_MESSAGE).model_dump()),
        }
