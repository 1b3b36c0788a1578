"""
Error handling utilities for the storefront Lambda handlers.

This module defines the service error hierarchy and the helpers that turn
errors into logged, counted, CORS-enabled JSON responses.
"""

import functools
import json
import uuid
from enum import Enum
from typing import Any, Callable, Dict, Optional

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from service.handlers.utils.observability import logger, metrics, tracer
from service.models.output import ErrorOutput

INTERNAL_SERVER_ERROR_MESSAGE = 'Internal server error'
MISSING_CONFIGURATION_MESSAGE = 'Server configuration is missing'


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    VALIDATION = "VALIDATION"
    CONFIGURATION = "CONFIGURATION"
    EXTERNAL_SERVICE = "EXTERNAL_SERVICE"
    INFRASTRUCTURE = "INFRASTRUCTURE"


class BaseServiceError(Exception):
    """Base exception class for service errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory = ErrorCategory.INFRASTRUCTURE,
        payload: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.payload = payload
        self.error_id = str(uuid.uuid4())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
        }


class RequestValidationError(BaseServiceError):
    """Raised when the caller sent a missing or malformed field."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
        )


class ConfigurationError(BaseServiceError):
    """Raised when the deployment is missing or has malformed settings."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            category=ErrorCategory.CONFIGURATION,
        )


class ExternalServiceError(BaseServiceError):
    """Raised when an upstream service rejects or fails a call."""

    def __init__(
        self,
        message: str,
        service_name: str,
        payload: Optional[Any] = None,
    ):
        super().__init__(
            message=message,
            error_code="EXTERNAL_SERVICE_ERROR",
            category=ErrorCategory.EXTERNAL_SERVICE,
            payload=payload,
        )
        self.service_name = service_name


class SheetLayoutError(BaseServiceError):
    """Raised when the order sheet lacks a header the lookup depends on."""

    def __init__(self, header: str):
        super().__init__(
            message=f"Required header '{header}' not found in order sheet",
            error_code="SHEET_LAYOUT_ERROR",
            category=ErrorCategory.INFRASTRUCTURE,
        )
        self.header = header


@tracer.capture_method
def log_error_metrics(error: BaseServiceError) -> None:
    """Log error metrics for monitoring and alerting."""

    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=f"Error{error.category.value}Count", unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code)
    tracer.put_annotation("error_category", error.category.value)
    tracer.put_metadata("error_details", error.to_dict())

    logger.error(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code,
            "error_category": error.category.value,
            "error_message": error.message,
        }
    )


def get_http_status_code(error: BaseServiceError) -> int:
    """Get appropriate HTTP status code for error."""

    status_mapping = {
        "VALIDATION_ERROR": 400,
        "CONFIGURATION_ERROR": 500,
        "EXTERNAL_SERVICE_ERROR": 500,
        "SHEET_LAYOUT_ERROR": 500,
    }

    return status_mapping.get(error.error_code, 500)


def format_error_response(error: BaseServiceError) -> Dict[str, Any]:
    """Format error for API response; upstream payloads are echoed as-is."""
    error_body = error.payload if error.payload is not None else error.message
    return ErrorOutput(error=error_body).model_dump()


def create_api_response(
    status_code: int,
    body: Optional[Any],
    cors_headers: Dict[str, str],
) -> Response:
    """
    Create a resolver response carrying the endpoint's CORS headers.

    Args:
        status_code: HTTP status code
        body: JSON-serializable body, or None for an empty body
        cors_headers: Header set built by ``build_cors_headers``

    Returns:
        Powertools Response
    """
    content_type = cors_headers.get('Content-Type')
    return Response(
        status_code=status_code,
        content_type=content_type,
        body='' if body is None else json.dumps(body),
        headers=dict(cors_headers),
    )


def handle_service_errors(
    cors_headers_factory: Callable[[], Dict[str, str]],
    mask_server_errors: bool = False,
):
    """
    Decorator converting errors raised by a route into JSON error responses.

    Args:
        cors_headers_factory: Builds the endpoint's CORS header set
        mask_server_errors: Answer every non-client error with the generic
            internal server error message instead of the error's own message
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except BaseServiceError as e:
                log_error_metrics(e)
                status_code = get_http_status_code(e)
                if mask_server_errors and status_code >= 500:
                    body = ErrorOutput(error=INTERNAL_SERVER_ERROR_MESSAGE).model_dump()
                else:
                    body = format_error_response(e)
                return create_api_response(status_code, body, cors_headers_factory())
            except Exception as e:
                logger.exception("Unexpected error in handler", extra={
                    "error": str(e),
                    "function_name": func.__name__,
                })
                metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)
                return create_api_response(
                    500,
                    ErrorOutput(error=INTERNAL_SERVER_ERROR_MESSAGE).model_dump(),
                    cors_headers_factory(),
                )

        return wrapper

    return decorator
