"""Aggregation module for the signup summary.

- header:  header-name to column-position lookup
- summary: pure row-to-Summary aggregation
- cache:   SummaryService, the TTL cache in front of a row source

Forbidden: HTTP concerns, talking to the sheet directly.
"""

from signup_dashboard.aggregation.cache import DEFAULT_TTL_SECONDS, SummaryService
from signup_dashboard.aggregation.header import HeaderIndex
from signup_dashboard.aggregation.summary import empty_summary, summarize_rows

__all__ = [
    "DEFAULT_TTL_SECONDS",
    "HeaderIndex",
    "SummaryService",
    "empty_summary",
    "summarize_rows",
]
