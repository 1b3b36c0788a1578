"""
Security Module for the storefront service.

Credential resolution from AWS Secrets Manager for the email delivery and
spreadsheet service accounts.
"""

from .secrets_manager import SecretNotFoundError, get_secret_string, resolve_credential

__all__ = [
    "SecretNotFoundError",
    "get_secret_string",
    "resolve_credential",
]
