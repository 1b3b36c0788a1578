"""
AWS Secrets Manager integration for credential resolution.

Credentials for the email and spreadsheet services may be given directly in
the environment or as the name of a Secrets Manager secret. A secret may hold
a plain string or a JSON object; for JSON secrets the value is read from one
key.
"""

import json
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from service.handlers.utils.errors import MISSING_CONFIGURATION_MESSAGE, ConfigurationError
from service.handlers.utils.observability import logger, tracer


class SecretNotFoundError(ConfigurationError):
    """Exception raised when a configured secret cannot be read.

    The secret name is kept for logging only; callers see the generic
    missing-configuration message.
    """

    def __init__(self, secret_name: str):
        super().__init__(MISSING_CONFIGURATION_MESSAGE)
        self.secret_name = secret_name


@tracer.capture_method
def get_secret_string(secret_name: str, key_name: Optional[str] = None) -> str:
    """
    Read a secret value from AWS Secrets Manager.

    Args:
        secret_name: Name or ARN of the secret
        key_name: Key to read when the secret is a JSON object

    Returns:
        Secret string

    Raises:
        SecretNotFoundError: If the secret does not exist, cannot be read, or
            lacks the requested key
    """
    client = boto3.client('secretsmanager')
    try:
        response = client.get_secret_value(SecretId=secret_name)
    except (ClientError, BotoCoreError) as e:
        logger.error('Failed to read secret', extra={'secret_name': secret_name, 'error': str(e)})
        raise SecretNotFoundError(secret_name) from e

    secret_value = response.get('SecretString', '')
    if key_name:
        try:
            parsed = json.loads(secret_value)
        except json.JSONDecodeError:
            return secret_value
        if not isinstance(parsed, dict) or key_name not in parsed:
            logger.error('Secret is missing key', extra={'secret_name': secret_name, 'key_name': key_name})
            raise SecretNotFoundError(secret_name)
        return str(parsed[key_name])
    return secret_value


def resolve_credential(value: str, secret_name: str, key_name: Optional[str] = None) -> str:
    """
    Resolve a credential from its direct value or its secret name.

    The direct value wins; without either, an empty string is returned so the
    caller can report missing configuration.
    """
    if value:
        return value
    if secret_name:
        return get_secret_string(secret_name, key_name=key_name)
    return ''
