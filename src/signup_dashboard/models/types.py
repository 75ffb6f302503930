"""Pydantic models for the signup dashboard API.

Field names are snake_case in Python and camelCase on the wire,
which is the shape the dashboard front end reads.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model serializing to camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CountryCount(ApiModel):
    """Number of signups attributed to one country code."""

    code: str
    count: int


class Summary(ApiModel):
    """Aggregated view of the signup sheet.

    Every counted signup lands in exactly one bucket, so
    total == unknown_count + sum(c.count for c in countries).
    """

    total: int
    marketing_yes: int
    marketing_rate: float
    countries: list[CountryCount]
    unknown_count: int
    top_country: CountryCount | None
    updated_at: datetime


class ErrorResponse(BaseModel):
    """Error payload returned when the summary cannot be produced."""

    error: str
