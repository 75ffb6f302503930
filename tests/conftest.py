"""Shared pytest fixtures for signup dashboard tests."""

from datetime import datetime, timedelta, timezone

import pytest

from signup_dashboard.aggregation.cache import SummaryService
from signup_dashboard.sources.static import StaticRowSource

HEADER = ["email", "timestamp", "acepta_marketing", "ip_country"]

EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """Controllable clock driving both freshness checks and updated_at."""

    def __init__(self, start: float = 1000.0):
        self.seconds = start

    def advance(self, seconds: float) -> None:
        self.seconds += seconds

    def monotonic(self) -> float:
        return self.seconds

    def utcnow(self) -> datetime:
        return EPOCH + timedelta(seconds=self.seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def signup_rows() -> list[list[str]]:
    """Header plus two MX signups, a blank row and an unknown-country signup."""
    return [
        HEADER,
        ["a@x.com", "t1", "true", "MX"],
        ["b@x.com", "t2", "no", "MX"],
        ["", "", "", ""],
        ["c@x.com", "t3", "1", ""],
    ]


@pytest.fixture
def source(signup_rows) -> StaticRowSource:
    return StaticRowSource(signup_rows)


@pytest.fixture
def service(source, clock) -> SummaryService:
    return SummaryService(source, ttl_seconds=60, clock=clock.monotonic, now=clock.utcnow)
