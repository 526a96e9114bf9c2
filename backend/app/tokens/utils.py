from datetime import datetime, timedelta, timezone
import uuid

MILLISECONDS_PER_MINUTE = 60_000


def calculate_expires_at(created_at: datetime, expires_in_minutes: int) -> datetime:
    """
    Returns the instant after which a token created at `created_at` is no longer active.
    `expires_in_minutes` is assumed positive; callers validate it.
    """
    return created_at + timedelta(milliseconds=expires_in_minutes * MILLISECONDS_PER_MINUTE)


def utc_now() -> datetime:
    """Current UTC time truncated to whole milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def generate_token_value() -> str:
    # Not a cryptographically signed credential, just a unique opaque value
    return str(uuid.uuid4())


def as_utc(value: datetime) -> datetime:
    # SQLite hands datetimes back naive; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2025-01-01T11:00:00.000Z"""
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")
