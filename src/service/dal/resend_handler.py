"""
Resend implementation of the email delivery interface.

The Resend SDK keeps its API key at module level, so the key is set for the
duration of one send and restored afterwards.
"""

from typing import Any, Dict

import resend
from aws_lambda_powertools.metrics import MetricUnit
from resend.exceptions import ResendError

from service.handlers.utils.errors import ExternalServiceError
from service.handlers.utils.observability import logger, metrics, tracer
from service.models.notification import EmailMessage

SERVICE_NAME = 'resend'


class ResendEmailHandler:
    """Sends notification emails through the Resend API."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    @tracer.capture_method
    def send_email(self, message: EmailMessage) -> Dict[str, Any]:
        """
        Send a message through Resend.

        Args:
            message: Composed notification email

        Returns:
            Resend response data, e.g. ``{"id": "..."}``

        Raises:
            ExternalServiceError: If Resend rejects the send; the error
                payload is kept for the caller
        """
        previous_api_key = getattr(resend, 'api_key', None)
        resend.api_key = self.api_key
        try:
            response = resend.Emails.send(message.to_resend_params())
        except ResendError as e:
            payload = {
                'name': e.error_type,
                'message': e.message,
                'statusCode': e.code,
            }
            logger.error('Resend rejected the email', extra={'resend_error': payload})
            metrics.add_metric(name="UploadNotificationFailed", unit=MetricUnit.Count, value=1)
            raise ExternalServiceError(
                message=f'Email delivery failed: {e.message}',
                service_name=SERVICE_NAME,
                payload=payload,
            ) from e
        finally:
            resend.api_key = previous_api_key

        data = dict(response) if response else {}
        logger.info('Email accepted by Resend', extra={'email_id': data.get('id')})
        return data
