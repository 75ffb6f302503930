"""Signup dashboard service.

Reads signup rows from a Google Sheet, aggregates them into a summary
(totals, marketing opt-in rate, per-country distribution) and serves the
summary as JSON with a time-to-live cache in front of the sheet.
"""

__version__ = "0.1.0"
