"""Google Sheets row source.

Reads the signup sheet through the Sheets v4 API with service account
credentials. Two calls are used:
1. spreadsheets.get to discover the first tab's title (once per source)
2. spreadsheets.values.get to read a fixed, generous column span

Every upstream failure is re-raised as RowSourceError.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiClientError
from httplib2 import HttpLib2Error

from signup_dashboard.sources.base import RawRow, RowSourceBase, RowSourceError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Wider than the header on purpose so added columns are still read
READ_SPAN = "A1:Z"

# ValueError covers 200 responses whose body is not JSON
_UPSTREAM_ERRORS = (GoogleApiClientError, GoogleAuthError, HttpLib2Error, OSError, ValueError)


def build_credentials(client_email: str, private_key: str) -> service_account.Credentials:
    """Build read-only service account credentials.

    Args:
        client_email: Service account identity.
        private_key: PEM signing key. Literal "\\n" sequences, as found in
            single-line environment variables, are expanded to newlines.

    Returns:
        Credentials scoped to read spreadsheets.
    """
    info = {
        "type": "service_account",
        "client_email": client_email,
        "private_key": private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }
    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


def quote_sheet_title(title: str) -> str:
    """Quote a tab title for use in A1 notation."""
    return "'" + title.replace("'", "''") + "'"


def first_sheet_title(metadata: Any) -> str | None:
    """Extract the first tab's title from spreadsheet metadata.

    Returns None when no sheets are reported or the payload is malformed.
    """
    if not isinstance(metadata, dict):
        return None
    sheets = metadata.get("sheets") or []
    if not isinstance(sheets, list) or not sheets:
        return None
    first = sheets[0]
    if not isinstance(first, dict):
        return None
    properties = first.get("properties")
    if not isinstance(properties, dict):
        return None
    title = properties.get("title")
    if not title:
        return None
    return str(title)


class GoogleSheetsRowSource(RowSourceBase):
    """Row source backed by a single Google spreadsheet.

    The first tab's title is looked up once and reused for the life of
    the instance; renaming the tab afterwards is not detected. If the
    spreadsheet reports no tabs, nothing is cached and the read falls back
    to an untitled range.
    """

    def __init__(
        self,
        spreadsheet_id: str,
        credentials: service_account.Credentials | None = None,
        service: Any | None = None,
        read_span: str = READ_SPAN,
    ):
        """Initialize the source.

        Args:
            spreadsheet_id: Spreadsheet to read.
            credentials: Credentials used to build the API client lazily.
            service: Prebuilt Sheets API client. Takes precedence over
                credentials.
            read_span: Column span read from the tab.
        """
        if service is None and credentials is None:
            raise ValueError("either credentials or service is required")
        self.spreadsheet_id = spreadsheet_id
        self.read_span = read_span
        self._credentials = credentials
        self._service = service
        self._sheet_title: str | None = None
        self._title_lock = threading.Lock()

    @property
    def sheet_title(self) -> str | None:
        """Cached tab title, None until resolved."""
        return self._sheet_title

    def _sheets_service(self) -> Any:
        if self._service is None:
            self._service = build(
                "sheets",
                "v4",
                credentials=self._credentials,
                cache_discovery=False,
            )
        return self._service

    def resolve_sheet_title(self) -> str | None:
        """Return the first tab's title, looking it up on first use.

        Raises:
            RowSourceError: If the metadata lookup fails. Nothing is cached
                and the next call tries again.
        """
        with self._title_lock:
            if self._sheet_title:
                return self._sheet_title

            try:
                metadata = (
                    self._sheets_service()
                    .spreadsheets()
                    .get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties.title")
                    .execute()
                )
            except _UPSTREAM_ERRORS as e:
                raise RowSourceError(f"spreadsheet metadata lookup failed: {e}") from e

            title = first_sheet_title(metadata)
            if title:
                logger.info("Resolved sheet title %r for %s", title, self.spreadsheet_id)
                self._sheet_title = title
            else:
                logger.warning("Spreadsheet %s reports no sheets", self.spreadsheet_id)
            return title

    def read_range(self) -> str:
        """Resolve the A1 range covering the signup tab."""
        title = self.resolve_sheet_title()
        if title:
            return f"{quote_sheet_title(title)}!{self.read_span}"
        return self.read_span

    def fetch_rows(self) -> list[RawRow]:
        range_name = self.read_range()
        try:
            payload = (
                self._sheets_service()
                .spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name, majorDimension="ROWS")
                .execute()
            )
        except _UPSTREAM_ERRORS as e:
            raise RowSourceError(f"reading {range_name} failed: {e}") from e

        if not isinstance(payload, dict):
            raise RowSourceError(f"unexpected values payload for {range_name}")

        values = payload.get("values") or []
        return [
            ["" if cell is None else str(cell) for cell in row]
            for row in values
            if isinstance(row, list)
        ]
