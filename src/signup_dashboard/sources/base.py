"""Base row source interface.

Row sources have a narrow interface: fetch_rows() -> rows.

Forbidden: validation, aggregation, caching of rows between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

RawRow = list[str]


class RowSourceError(Exception):
    """Raised when the row source cannot produce rows.

    Wraps every upstream failure (auth, network, quota, malformed
    range) so callers only have one error type to handle.
    """


class RowSourceBase(ABC):
    """Abstract base class for row sources."""

    @abstractmethod
    def fetch_rows(self) -> list[RawRow]:
        """Fetch the current contents of the sheet.

        Returns:
            Rows as received, header row first. Empty list if the
            source reports no values.

        Raises:
            RowSourceError: If the fetch fails for any reason.
        """
        pass
