"""In-memory row source for testing.

Serves a fixed set of rows without calling any external service,
and counts how often it was asked to fetch.
"""

from __future__ import annotations

from collections.abc import Sequence

from signup_dashboard.sources.base import RawRow, RowSourceBase, RowSourceError


class StaticRowSource(RowSourceBase):
    """Row source returning a fixed copy of the given rows.

    Set `error` to make every fetch fail with that error, which is how
    tests simulate an unreachable sheet.
    """

    def __init__(
        self,
        rows: Sequence[Sequence[str]] | None = None,
        error: RowSourceError | None = None,
    ):
        self.rows = [list(row) for row in rows or []]
        self.error = error
        self.fetch_count = 0

    def fetch_rows(self) -> list[RawRow]:
        self.fetch_count += 1
        if self.error is not None:
            raise self.error
        return [list(row) for row in self.rows]
