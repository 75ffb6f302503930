#!/usr/bin/env python3
"""Smoke test against the configured signup sheet.

Reads the sheet once with the configured credentials, prints the summary
and checks that its counts add up.

Usage:
    python scripts/smoke_summary.py

Exit codes:
    0: All checks passed
    1: Some checks failed
    2: Configuration missing
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from signup_dashboard.api.app import build_summary_service  # noqa: E402
from signup_dashboard.config import ConfigError, load_settings  # noqa: E402
from signup_dashboard.models.types import Summary  # noqa: E402
from signup_dashboard.sources.base import RowSourceError  # noqa: E402


def check_buckets_add_up(summary: Summary) -> bool:
    """Check that every signup is in exactly one country bucket."""
    bucketed = summary.unknown_count + sum(c.count for c in summary.countries)
    if bucketed != summary.total:
        print(f"FAIL: buckets hold {bucketed} signups, total is {summary.total}")
        return False
    print(f"OK: {summary.total} signups across {len(summary.countries)} countries")
    return True


def check_countries_sorted(summary: Summary) -> bool:
    """Check that countries are sorted by count, descending."""
    counts = [c.count for c in summary.countries]
    if counts != sorted(counts, reverse=True):
        print(f"FAIL: countries not sorted: {counts}")
        return False
    top = summary.top_country.code if summary.top_country else "-"
    print(f"OK: countries sorted, top country {top}")
    return True


def check_marketing_rate(summary: Summary) -> bool:
    """Check the opt-in rate against the raw counts."""
    expected = summary.marketing_yes / summary.total if summary.total else 0.0
    if summary.marketing_rate != expected:
        print(f"FAIL: marketing rate {summary.marketing_rate}, expected {expected}")
        return False
    print(f"OK: marketing rate {summary.marketing_rate:.1%}")
    return True


def main() -> int:
    try:
        settings = load_settings(PROJECT_ROOT / ".env.local")
        service = build_summary_service(settings)
    except ConfigError as e:
        print(f"FAIL: {e}")
        return 2

    try:
        summary = service.get_summary()
    except RowSourceError as e:
        print(f"FAIL: could not read sheet: {e}")
        return 1

    print(summary.model_dump_json(by_alias=True, indent=2))

    checks = [
        check_buckets_add_up(summary),
        check_countries_sorted(summary),
        check_marketing_rate(summary),
    ]
    if all(checks):
        print("All checks passed")
        return 0
    print(f"{checks.count(False)} check(s) failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
