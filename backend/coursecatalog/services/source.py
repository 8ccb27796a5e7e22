"""
Workbook source for the Course Catalog.

Retrieves the course spreadsheet from its well-known path relative to the
serving root. When a base URL is configured the file is fetched over HTTP,
otherwise it is read from the local public directory that the app serves.
"""
import logging
from pathlib import Path
from typing import Optional

import requests

from coursecatalog.core.config import Settings, settings as default_settings
from coursecatalog.core.exceptions import FetchError


logger = logging.getLogger(__name__)


class WorkbookSource:
    """Fetches the raw workbook bytes. No retries."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    @property
    def location(self) -> str:
        return self.config.workbook_url or str(self.config.workbook_path)

    @property
    def max_bytes(self) -> int:
        return self.config.max_workbook_size_mb * 1024 * 1024

    def fetch(self) -> bytes:
        """
        Retrieve the workbook.

        Raises:
            FetchError: on a non-success status, a connection failure,
                a missing local file or an oversized payload
        """
        logger.info(f"Fetching Excel file from {self.location}")

        if self.config.workbook_url:
            content = self._fetch_http(self.config.workbook_url)
        else:
            content = self._read_local(self.config.workbook_path)

        if len(content) > self.max_bytes:
            raise FetchError(
                message=f"Excel file too large. Maximum size is {self.config.max_workbook_size_mb}MB",
                source=self.location,
                upstream_status=413,
                reason="Payload Too Large"
            )

        logger.info(f"File fetched, {len(content)} bytes")
        return content

    def _fetch_http(self, url: str) -> bytes:
        try:
            response = requests.get(url, timeout=self.config.fetch_timeout_seconds)
        except requests.RequestException as e:
            raise FetchError(
                message=f"Failed to fetch Excel file: {str(e)}",
                source=url
            )

        if not response.ok:
            raise FetchError(
                message=f"Failed to fetch Excel file: {response.status_code} {response.reason}",
                source=url,
                upstream_status=response.status_code,
                reason=response.reason
            )

        return response.content

    def _read_local(self, path: Path) -> bytes:
        if not path.is_file():
            raise FetchError(
                message="Failed to fetch Excel file: 404 Not Found",
                source=str(path),
                upstream_status=404,
                reason="Not Found"
            )

        try:
            return path.read_bytes()
        except OSError as e:
            raise FetchError(
                message=f"Failed to fetch Excel file: {str(e)}",
                source=str(path)
            )
