"""
TIME INFORMATION UTILITY
========================

Timezone-aware "now" helpers. Every timestamp the store writes (created_at,
updated_at, expires_at) comes from here so comparisons never mix naive and
aware datetimes.
"""

import datetime


def utc_now() -> datetime.datetime:
    """Return the current time in UTC (timezone-aware)."""
    return datetime.datetime.now(datetime.timezone.utc)


def days_from_now(days: int) -> datetime.datetime:
    """Return the UTC time `days` days in the future (used for session expiry)."""
    return utc_now() + datetime.timedelta(days=days)
