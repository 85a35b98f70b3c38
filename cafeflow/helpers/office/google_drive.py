"""Google Drive helper (Drive API v3 via google-api-python-client).

Authentication uses an OAuth client secrets file (`GD_CREDENTIALS_PATH`).
The first run opens the browser consent flow; the resulting token is cached
in `GD_TOKENS_DIR/token.json` and refreshed automatically afterwards.
"""

import io
import logging
from pathlib import Path
from typing import Any

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import Resource, build
from googleapiclient.http import MediaFileUpload, MediaIoBaseDownload

from cafeflow.core.base import BaseHelper
from cafeflow.core.configs import AppConfig, app_config

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/drive']
OAUTH_PORT = 8888


def build_drive_service(credentials_path: str, tokens_dir: str) -> Resource:
    """Authorize and build a Drive v3 service."""
    token_file = Path(tokens_dir) / 'token.json'
    creds = None
    if token_file.exists():
        creds = Credentials.from_authorized_user_file(str(token_file), SCOPES)
    if not creds or not creds.valid:
        if creds and creds.expired and creds.refresh_token:
            creds.refresh(Request())
        else:
            if not Path(credentials_path).exists():
                raise FileNotFoundError(f'Credentials file not found: {credentials_path}')
            flow = InstalledAppFlow.from_client_secrets_file(credentials_path, SCOPES)
            creds = flow.run_local_server(port=OAUTH_PORT)
        token_file.parent.mkdir(parents=True, exist_ok=True)
        token_file.write_text(creds.to_json())

    return build('drive', 'v3', credentials=creds, cache_discovery=False)


class GoogleDriveHelper(BaseHelper):
    """Lists, uploads and downloads Drive files.

    The Drive client is built on first use. If that fails (no credentials,
    consent refused, ...) a warning is logged and every method returns its
    empty value instead of raising.
    """

    service_name = 'google_drive'

    def __init__(self, drive_service: Resource | None = None, config: AppConfig | None = None) -> None:
        self._config = config or app_config
        self._drive = drive_service
        self._init_attempted = drive_service is not None

    def _get_drive(self) -> Resource | None:
        if not self._init_attempted:
            self._init_attempted = True
            credentials_path = self._config.GD_CREDENTIALS_PATH
            if not credentials_path:
                logger.warning('GD_CREDENTIALS_PATH is not set. GoogleDriveHelper will not be functional.')
                return None
            try:
                self._drive = build_drive_service(credentials_path, self._config.GD_TOKENS_DIR)
                logger.info('GoogleDriveHelper initialized successfully.')
            except Exception as e:
                logger.warning(f'Failed to initialize GoogleDriveHelper: {e}. Ensure {credentials_path} exists.')
        return self._drive

    def list_files(self, page_size: int = 10) -> list[dict[str, Any]]:
        """List files (id and name) from the user's Drive."""
        drive = self._get_drive()
        if drive is None:
            return []

        def work() -> list[dict[str, Any]]:
            result = drive.files().list(pageSize=page_size, fields='nextPageToken, files(id, name)').execute()
            return result.get('files', [])

        return self._execute('list_files', work)

    def upload_file(self, name: str, mime_type: str, path: str | Path) -> dict[str, Any] | None:
        """Upload a local file; returns the created file's metadata (`id`)."""
        drive = self._get_drive()
        if drive is None:
            return None

        def work() -> dict[str, Any]:
            media = MediaFileUpload(str(path), mimetype=mime_type)
            return drive.files().create(body={'name': name}, media_body=media, fields='id').execute()

        return self._execute('upload_file', work)

    def download_file(self, file_id: str) -> bytes:
        """Download a file's content."""
        drive = self._get_drive()
        if drive is None:
            return b''

        def work() -> bytes:
            buffer = io.BytesIO()
            downloader = MediaIoBaseDownload(buffer, drive.files().get_media(fileId=file_id))
            done = False
            while not done:
                _, done = downloader.next_chunk()
            return buffer.getvalue()

        return self._execute('download_file', work)
