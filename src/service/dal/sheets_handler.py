"""
Google Sheets implementation of the spreadsheet read interface.

Authenticates with a service account and reads one range of the order
spreadsheet. No caching: every call fetches the current sheet contents.
"""

from typing import List

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from service.handlers.utils.errors import ConfigurationError, ExternalServiceError
from service.handlers.utils.observability import logger, tracer

SERVICE_NAME = 'google-sheets'
SPREADSHEETS_SCOPE = 'https://www.googleapis.com/auth/spreadsheets'
TOKEN_URI = 'https://oauth2.googleapis.com/token'


def unescape_private_key(private_key: str) -> str:
    """Turn literal backslash-n sequences (as stored in env vars) into newlines."""
    return private_key.replace('\\n', '\n')


class GoogleSheetsHandler:
    """Reads order rows from a Google spreadsheet."""

    def __init__(
        self,
        client_email: str,
        private_key: str,
        spreadsheet_id: str,
        sheet_range: str = 'Sheet1',
    ) -> None:
        self.client_email = client_email
        self.private_key = private_key
        self.spreadsheet_id = spreadsheet_id
        self.sheet_range = sheet_range

    def _credentials(self) -> service_account.Credentials:
        if not self.client_email or not self.private_key or not self.spreadsheet_id:
            raise ConfigurationError('Spreadsheet credentials or identifier are missing')
        try:
            return service_account.Credentials.from_service_account_info(
                {
                    'client_email': self.client_email,
                    'private_key': unescape_private_key(self.private_key),
                    'token_uri': TOKEN_URI,
                },
                scopes=[SPREADSHEETS_SCOPE],
            )
        except ValueError as e:
            raise ConfigurationError(f'Invalid service account key: {e}') from e

    @tracer.capture_method
    def get_values(self) -> List[List[str]]:
        """
        Fetch the configured range.

        Returns:
            Rows of cell strings; row 0 is the header row. Empty list for an
            empty sheet.

        Raises:
            ConfigurationError: If credentials are missing or malformed
            ExternalServiceError: If authentication or the API call fails
        """
        credentials = self._credentials()
        try:
            service = build('sheets', 'v4', credentials=credentials, cache_discovery=False)
            result = service.spreadsheets().values().get(
                spreadsheetId=self.spreadsheet_id,
                range=self.sheet_range,
            ).execute()
        except (HttpError, GoogleAuthError) as e:
            raise ExternalServiceError(
                message=f'Spreadsheet read failed: {e}',
                service_name=SERVICE_NAME,
            ) from e

        values = result.get('values') or []
        logger.debug('Spreadsheet values fetched', extra={
            'spreadsheet_id': self.spreadsheet_id,
            'sheet_range': self.sheet_range,
            'row_count': len(values),
        })
        return values
