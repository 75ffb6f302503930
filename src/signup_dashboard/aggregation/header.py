"""Header-driven column lookup.

Columns are found by name rather than position, so people editing the
sheet can reorder or insert columns without breaking aggregation.
"""

from __future__ import annotations

from collections.abc import Sequence


def normalize_header(header: object) -> str:
    """Trim and case-fold a header cell."""
    if header is None:
        return ""
    return str(header).strip().lower()


class HeaderIndex:
    """Mapping from normalized column name to its position in a row.

    Built once per fetch from the header row. When a name appears more
    than once the first occurrence wins. Lookups never raise: an absent
    column, or a row too short to reach it, reads as "".
    """

    def __init__(self, header_row: Sequence[object]):
        self._positions: dict[str, int] = {}
        for idx, cell in enumerate(header_row):
            name = normalize_header(cell)
            if name and name not in self._positions:
                self._positions[name] = idx

    def __contains__(self, name: object) -> bool:
        return normalize_header(name) in self._positions

    @property
    def columns(self) -> list[str]:
        """Normalized column names in header order."""
        return list(self._positions)

    def column_index(self, name: str) -> int | None:
        """Position of the named column, or None if absent."""
        return self._positions.get(normalize_header(name))

    def value(self, row: Sequence[object], name: str) -> str:
        """Raw text of the named column in `row`, "" if missing."""
        idx = self.column_index(name)
        if idx is None or idx >= len(row):
            return ""
        cell = row[idx]
        if cell is None:
            return ""
        return str(cell)
