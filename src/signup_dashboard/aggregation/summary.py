"""Signup summary aggregation.

Turns raw sheet rows into a Summary: total signups, marketing opt-ins,
opt-in rate and per-country counts.

Pure functions - no sheet access, no clock. The caller passes `now`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from datetime import datetime

from signup_dashboard.aggregation.header import HeaderIndex
from signup_dashboard.models.domain import SignupRecord
from signup_dashboard.models.types import CountryCount, Summary

logger = logging.getLogger(__name__)

# Header names (matched after trim + lowercase)
EMAIL_COLUMN = "email"
TIMESTAMP_COLUMN = "timestamp"
CONSENT_COLUMN = "acepta_marketing"
COUNTRY_COLUMN = "ip_country"
EXPECTED_COLUMNS = (EMAIL_COLUMN, TIMESTAMP_COLUMN, CONSENT_COLUMN, COUNTRY_COLUMN)

UNKNOWN_COUNTRY = "UNKNOWN"

# Consent answers counted as opt-in (case-insensitive)
TRUTHY_VALUES = frozenset({"true", "1", "yes", "si"})


def is_truthy(value: object) -> bool:
    """Whether a consent cell means opt-in. Anything unrecognized is no."""
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_VALUES


def normalize_country(value: object) -> str:
    """Trim and uppercase a country code; blank becomes UNKNOWN."""
    code = "" if value is None else str(value).strip().upper()
    return code or UNKNOWN_COUNTRY


def is_blank_row(row: Sequence[object]) -> bool:
    """True for rows with no cells or only whitespace cells."""
    return all(cell is None or not str(cell).strip() for cell in row)


def iter_signup_records(rows: Sequence[Sequence[object]]) -> Iterator[SignupRecord]:
    """Yield a SignupRecord for every qualifying data row.

    Row 0 is the header. A data row qualifies when it has at least one
    non-blank cell and a non-blank email or timestamp. Other rows are
    separators or formatting leftovers and are skipped.

    Args:
        rows: Raw rows, header first.

    Yields:
        One record per qualifying row, in sheet order.
    """
    if not rows:
        return

    header = HeaderIndex(rows[0])
    missing = [name for name in EXPECTED_COLUMNS if name not in header]
    if missing:
        logger.warning(
            "Sheet header lacks columns %s (found %s), reading them as empty",
            missing,
            header.columns,
        )

    for row in rows[1:]:
        if not row or is_blank_row(row):
            continue

        email = header.value(row, EMAIL_COLUMN)
        timestamp = header.value(row, TIMESTAMP_COLUMN)
        if not email.strip() and not timestamp.strip():
            continue

        yield SignupRecord(
            email=email,
            timestamp=timestamp,
            marketing_consent=header.value(row, CONSENT_COLUMN),
            country_code=header.value(row, COUNTRY_COLUMN),
        )


def empty_summary(now: datetime) -> Summary:
    """Summary for a sheet without signups."""
    return Summary(
        total=0,
        marketing_yes=0,
        marketing_rate=0.0,
        countries=[],
        unknown_count=0,
        top_country=None,
        updated_at=now,
    )


def summarize_rows(rows: Sequence[Sequence[object]], now: datetime) -> Summary:
    """Aggregate raw sheet rows into a Summary.

    Countries are sorted by count, descending. Ties keep the order in
    which the codes first appear in the sheet.

    Args:
        rows: Raw rows, header first. May be empty.
        now: Computation time stamped on the summary.

    Returns:
        The computed Summary.
    """
    if not rows:
        return empty_summary(now)

    total = 0
    marketing_yes = 0
    unknown_count = 0
    country_counts: dict[str, int] = {}

    for record in iter_signup_records(rows):
        total += 1

        if is_truthy(record.marketing_consent):
            marketing_yes += 1

        country = normalize_country(record.country_code)
        if country == UNKNOWN_COUNTRY:
            unknown_count += 1
            continue

        country_counts[country] = country_counts.get(country, 0) + 1

    countries = sorted(
        (CountryCount(code=code, count=count) for code, count in country_counts.items()),
        key=lambda c: c.count,
        reverse=True,
    )

    return Summary(
        total=total,
        marketing_yes=marketing_yes,
        marketing_rate=marketing_yes / total if total else 0.0,
        countries=countries,
        unknown_count=unknown_count,
        top_country=countries[0] if countries else None,
        updated_at=now,
    )
