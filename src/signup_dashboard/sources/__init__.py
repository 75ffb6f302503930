"""Row sources for the signup dashboard.

A row source produces the raw tabular contents of the signup sheet:
a list of rows, each a list of cell strings, header row first.

Structure:
- base:          narrow interface `fetch_rows() -> rows` and RowSourceError
- google_sheets: Google Sheets v4 API implementation
- static:        in-memory rows for tests
"""

from signup_dashboard.sources.base import RawRow, RowSourceBase, RowSourceError
from signup_dashboard.sources.google_sheets import GoogleSheetsRowSource
from signup_dashboard.sources.static import StaticRowSource

__all__ = [
    "RawRow",
    "RowSourceBase",
    "RowSourceError",
    "GoogleSheetsRowSource",
    "StaticRowSource",
]
