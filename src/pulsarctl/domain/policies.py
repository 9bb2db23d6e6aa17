"""Namespace policy value types.

INVARIANT: ``-1`` means infinite and ``0`` means disabled for every
retention field.  The two fields are independent; combinations the
broker refuses (retention below the backlog quota) are reported by the
admin API, not checked here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pulsarctl.domain.units import INFINITE

BYTES_PER_MB = 1024 * 1024
SECONDS_PER_MINUTE = 60


class RetentionPolicy(BaseModel):
    """Retention policy in the units the admin API stores.

    Serializes to the broker's camelCase field names via
    ``model_dump(by_alias=True)``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    retention_time_in_minutes: int = Field(alias="retentionTimeInMinutes")
    retention_size_in_mb: int = Field(alias="retentionSizeInMB")


def normalize_retention(size_bytes: int, time_seconds: int) -> RetentionPolicy:
    """Convert parsed byte and second counts into a :class:`RetentionPolicy`.

    Either value may independently be ``-1``.  Other values are
    truncated, never rounded up, so anything under one megabyte becomes 0.
    """
    if time_seconds == INFINITE:
        minutes = INFINITE
    else:
        minutes = time_seconds // SECONDS_PER_MINUTE

    if size_bytes == INFINITE:
        megabytes = INFINITE
    else:
        megabytes = size_bytes // BYTES_PER_MB

    return RetentionPolicy(
        retention_time_in_minutes=minutes,
        retention_size_in_mb=megabytes,
    )
