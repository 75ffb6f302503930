"""Domain models for the signup dashboard.

Pure Python dataclasses used by the aggregation layer. They never
leave the process; the API only sees models.types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from signup_dashboard.models.types import Summary

# ============================================================================
# Signup Domain
# ============================================================================


@dataclass(frozen=True)
class SignupRecord:
    """One qualifying signup row, with fields pulled by header name.

    Values are the raw cell text; normalization happens at aggregation.
    """

    email: str
    timestamp: str
    marketing_consent: str
    country_code: str


# ============================================================================
# Cache Domain
# ============================================================================

CacheState = Literal["EMPTY", "FRESH", "STALE"]


@dataclass(frozen=True)
class CacheEntry:
    """Single cache slot holding the last computed summary.

    fetched_at is a reading of the service clock (monotonic seconds),
    taken when the recompute that produced the summary started.
    """

    summary: Summary
    fetched_at: float
