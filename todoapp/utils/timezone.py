from datetime import datetime, timezone
import pytz
from todoapp.core.config import settings


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def get_app_timezone():
    return pytz.timezone(settings.APP_TIMEZONE)


def local_now() -> datetime:
    """Current wall-clock time in the configured application timezone."""
    return datetime.now(get_app_timezone())


def to_utc(value: datetime | None) -> datetime | None:
    """
    Normalize a client-supplied datetime to aware UTC.
    Naive values are taken to be in the application timezone.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = get_app_timezone().localize(value)
    return value.astimezone(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to a stored value; SQLite hands datetimes back naive."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_local(value: datetime) -> datetime:
    return as_utc(value).astimezone(get_app_timezone())
