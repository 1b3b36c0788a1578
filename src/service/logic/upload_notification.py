"""
Business logic for the payment-slip upload notification.

Parses the customer's upload (multipart form or JSON), validates the required
fields, and relays it to the shop owner as an HTML email.
"""

import io
import json
import re
from typing import Any, Dict, Optional, Tuple

from aws_lambda_powertools.metrics import MetricUnit
from werkzeug.datastructures import MultiDict
from werkzeug.formparser import parse_form_data

from service.dal import EmailHandler
from service.dal.resend_handler import ResendEmailHandler
from service.handlers.utils.errors import (
    MISSING_CONFIGURATION_MESSAGE,
    ConfigurationError,
    RequestValidationError,
)
from service.handlers.utils.observability import logger, metrics, tracer
from service.logic.email_template import render_notification_html
from service.models.input import UploadedFile, UploadRequest
from service.models.notification import EmailAttachment, EmailMessage, NotificationSettings

MULTIPART_FORM_DATA = 'multipart/form-data'
DEFAULT_ATTACHMENT_NAME = 'attachment'

_QUOTED = re.compile(r"""['"`](.*)['"`]""")
_EMAIL = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
_ANGLE_BRACKETED_EMAIL = re.compile(r'<[^<>@\s]+@[^<>@\s]+\.[^<>@\s]+>')


def strip_quotes(value: Optional[str]) -> str:
    """Trim whitespace and one pair of surrounding quote characters."""
    if not value:
        return ''
    trimmed = value.strip()
    match = _QUOTED.fullmatch(trimmed)
    return match.group(1) if match else trimmed


def is_valid_email(value: str) -> bool:
    """Check for a bare ``local@domain.tld`` address."""
    return _EMAIL.fullmatch(value) is not None


def is_valid_sender(value: str) -> bool:
    """Accept a bare address or one containing ``<local@domain.tld>``."""
    return is_valid_email(value) or _ANGLE_BRACKETED_EMAIL.search(value) is not None


def is_multipart(content_type: Optional[str]) -> bool:
    return MULTIPART_FORM_DATA in (content_type or '').lower()


def _as_text(value: Any) -> Optional[str]:
    # Empty values count as absent; numbers from JSON become strings
    if value is None or (not value and isinstance(value, (str, int, float))):
        return None
    return value if isinstance(value, str) else str(value)


def _first_present(*values: Any) -> Optional[str]:
    for value in values:
        text = _as_text(value)
        if text is not None:
            return text
    return None


def parse_multipart_form(content_type: str, body: bytes) -> Tuple[MultiDict, MultiDict]:
    """
    Parse a multipart/form-data body into its text fields and files.

    ``MultiDict.get`` returns the first value, so the first part wins when a
    field name repeats.

    Returns:
        ``(form, files)`` as parsed by werkzeug

    Raises:
        RequestValidationError: If the body is not a well-formed multipart form
    """
    environ = {
        'REQUEST_METHOD': 'POST',
        'CONTENT_TYPE': content_type,
        'CONTENT_LENGTH': str(len(body)),
        'wsgi.input': io.BytesIO(body),
    }
    try:
        _, form, files = parse_form_data(environ, silent=False)
    except ValueError as e:
        logger.info('Multipart body rejected', extra={'reason': str(e)})
        raise RequestValidationError('Invalid request body') from e
    return form, files


def _parse_multipart_request(content_type: str, body: bytes) -> Dict[str, Any]:
    form, files = parse_multipart_form(content_type, body)

    uploaded_file = None
    file_storage = files.get('file')
    if file_storage is not None:
        uploaded_file = UploadedFile(
            name=file_storage.filename or DEFAULT_ATTACHMENT_NAME,
            content=file_storage.read(),
        )

    return {
        'order_number': _as_text(form.get('orderNumber')),
        'order_email': _first_present(form.get('orderEmail'), form.get('email')),
        'file': uploaded_file,
        'upload_image': None,
    }


def _parse_json_request(body: bytes) -> Dict[str, Any]:
    try:
        payload = json.loads(body.decode('utf-8')) if body else None
    except (UnicodeDecodeError, json.JSONDecodeError):
        payload = None
    if not isinstance(payload, dict):
        raise RequestValidationError('Invalid request body')

    return {
        'order_number': _as_text(payload.get('orderNumber')),
        'order_email': _first_present(payload.get('orderEmail'), payload.get('email')),
        'file': None,
        'upload_image': _as_text(payload.get('uploadImage')),
    }


def parse_upload_request(content_type: Optional[str], body: Optional[bytes]) -> UploadRequest:
    """
    Parse and validate an upload request.

    The encoding is chosen by content type: multipart requests carry a file,
    anything else is read as JSON and may carry an image URL.

    Args:
        content_type: Request Content-Type header value
        body: Raw request body

    Returns:
        Validated upload request

    Raises:
        RequestValidationError: On an unparsable body or a missing field,
            checked in order: orderNumber, orderEmail/email, file
    """
    multipart = is_multipart(content_type)
    if multipart:
        fields = _parse_multipart_request(content_type or '', body or b'')
    else:
        fields = _parse_json_request(body or b'')

    if not fields['order_number']:
        raise RequestValidationError('orderNumber is required')
    if not fields['order_email']:
        raise RequestValidationError('orderEmail is required')
    if multipart and fields['file'] is None:
        raise RequestValidationError('file is required')

    return UploadRequest(**fields)


def compose_notification(
    request: UploadRequest,
    sender: str,
    shop_owner_email: str,
    shop_name: str = 'Coco Original',
) -> EmailMessage:
    """
    Build the notification email for a validated upload.

    The customer address becomes the reply-to only when it is a valid email;
    it is shown in the body either way.
    """
    customer_email = strip_quotes(request.order_email)
    reply_to = customer_email if is_valid_email(customer_email) else None

    attachments = []
    if request.file is not None:
        attachments.append(EmailAttachment(
            filename=request.file.name or DEFAULT_ATTACHMENT_NAME,
            content=request.file.content,
        ))

    return EmailMessage(
        sender=sender,
        to=shop_owner_email,
        subject=f'Order {request.order_number} upload from customer',
        html=render_notification_html(
            order_number=request.order_number,
            customer_email=customer_email,
            upload_image=request.upload_image,
            shop_name=shop_name,
        ),
        reply_to=reply_to,
        attachments=attachments,
    )


class UploadNotificationService:
    """Relays payment-slip uploads to the shop owner by email."""

    def __init__(
        self,
        settings: NotificationSettings,
        email_handler: Optional[EmailHandler] = None,
    ):
        self.settings = settings
        self._email_handler = email_handler

    @property
    def email_handler(self) -> EmailHandler:
        if self._email_handler is None:
            self._email_handler = ResendEmailHandler(api_key=self.settings.api_key)
        return self._email_handler

    @tracer.capture_method
    def send_upload_notification(
        self,
        content_type: Optional[str],
        body: Optional[bytes],
    ) -> Dict[str, Any]:
        """
        Run the whole upload flow for one request.

        Args:
            content_type: Request Content-Type header value
            body: Raw request body

        Returns:
            Delivery service response data

        Raises:
            ConfigurationError: Missing credentials or destination, or a
                malformed sender address
            RequestValidationError: Unparsable body or missing field
            ExternalServiceError: The delivery service rejected the email
        """
        if not self.settings.api_key or not self.settings.shop_owner_email:
            raise ConfigurationError(MISSING_CONFIGURATION_MESSAGE)

        request = parse_upload_request(content_type, body)

        sender = strip_quotes(self.settings.sender)
        if not is_valid_sender(sender):
            raise ConfigurationError('Invalid RESEND_FROM format')

        tracer.put_annotation('order_number', request.order_number)
        logger.info('Upload notification request parsed', extra={
            'order_number': request.order_number,
            'has_file': request.file is not None,
            'has_upload_image': request.upload_image is not None,
        })

        message = compose_notification(
            request=request,
            sender=sender,
            shop_owner_email=self.settings.shop_owner_email,
            shop_name=self.settings.shop_name,
        )
        data = self.email_handler.send_email(message)

        metrics.add_metric(name='UploadNotificationSent', unit=MetricUnit.Count, value=1)
        return data
