"""
Environment variable models for type-safe configuration.

This module defines Pydantic models for the environment variables read by the
two storefront Lambda handlers.
"""

from typing import Annotated

from aws_lambda_env_modeler import BaseModel as BaseEnvModel, get_environment_variables
from pydantic import Field

from service.handlers.utils.cors import DEFAULT_ALLOW_ORIGIN


class CorsEnvVars(BaseEnvModel):
    """Environment variables read when building CORS headers, preflight included."""

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default=DEFAULT_ALLOW_ORIGIN,
        description='Storefront origin allowed to call the API'
    )] = DEFAULT_ALLOW_ORIGIN


class SendEmailEnvVars(BaseEnvModel):
    """Environment variables for the upload-notification handler."""

    # Empty values are reported by the handler as missing configuration
    RESEND_API_KEY: Annotated[str, Field(
        default='',
        description='Resend API key used to deliver notification emails'
    )] = ''

    RESEND_API_KEY_SECRET_NAME: Annotated[str, Field(
        default='',
        description='Secrets Manager secret holding the Resend API key'
    )] = ''

    RESEND_FROM: Annotated[str, Field(
        default='',
        description='Sender address, bare or as "Name <local@domain>"'
    )] = ''

    SHOP_OWNER_EMAIL: Annotated[str, Field(
        default='',
        description='Destination address for payment-slip notifications'
    )] = ''

    SHOP_NAME: Annotated[str, Field(
        default='Coco Original',
        description='Shop name rendered in the notification email'
    )] = 'Coco Original'


class TrackOrderEnvVars(BaseEnvModel):
    """Environment variables for the order-lookup handler."""

    SERVICE_ACCOUNT_EMAIL: Annotated[str, Field(
        default='',
        description='Google service account client email'
    )] = ''

    SERVICE_ACCOUNT_KEY: Annotated[str, Field(
        default='',
        description=r'Service account private key, newlines may be escaped as \n'
    )] = ''

    SERVICE_ACCOUNT_KEY_SECRET_NAME: Annotated[str, Field(
        default='',
        description='Secrets Manager secret holding the service account private key'
    )] = ''

    SPREADSHEET_ID: Annotated[str, Field(
        default='',
        description='Identifier of the order spreadsheet'
    )] = ''

    SHEET_RANGE: Annotated[str, Field(
        default='Sheet1',
        description='A1 range read from the order spreadsheet',
        min_length=1
    )] = 'Sheet1'

    EMPTY_SHEET_AS_LIST: Annotated[str, Field(
        default='true',
        description='Answer an empty sheet with a bare [] (true/false)',
        pattern=r'(?i)^(true|false)$'
    )] = 'true'

    @property
    def empty_sheet_as_list(self) -> bool:
        """Check if an empty sheet keeps the legacy bare list response."""
        return self.EMPTY_SHEET_AS_LIST.lower() == 'true'


def get_cors_env_vars() -> CorsEnvVars:
    """Get the allowed origin without validating the rest of the configuration."""
    return get_environment_variables(model=CorsEnvVars)


def get_send_email_env_vars() -> SendEmailEnvVars:
    """Get typed environment variables for the upload-notification handler."""
    return get_environment_variables(model=SendEmailEnvVars)


def get_track_order_env_vars() -> TrackOrderEnvVars:
    """Get typed environment variables for the order-lookup handler."""
    return get_environment_variables(model=TrackOrderEnvVars)
