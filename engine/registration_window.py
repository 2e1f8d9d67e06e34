"""Weekly registration window with an optional admin override."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from config.defaults import (
    WINDOW_UTC_OFFSET_HOURS, WINDOW_OPEN_WEEKDAY, WINDOW_CLOSE_WEEKDAY,
    WINDOW_BOUNDARY_HOUR, OVERRIDE_OPEN, OVERRIDE_CLOSED,
)

WINDOW_TZ = timezone(timedelta(hours=WINDOW_UTC_OFFSET_HOURS))


def is_window_open(now: Optional[datetime] = None) -> bool:
    """True between Friday 12:00 and Sunday 12:00 in the window's fixed timezone.

    Naive datetimes are treated as UTC.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(WINDOW_TZ)
    hour = local.hour + local.minute / 60
    day = local.weekday()

    if day == WINDOW_OPEN_WEEKDAY:
        return hour >= WINDOW_BOUNDARY_HOUR
    if day == WINDOW_CLOSE_WEEKDAY:
        return hour < WINDOW_BOUNDARY_HOUR
    return WINDOW_OPEN_WEEKDAY < day < WINDOW_CLOSE_WEEKDAY


def is_registration_open(now: Optional[datetime] = None, override: Optional[str] = None) -> bool:
    """Apply the admin override ("open"/"closed") on top of the automatic window."""
    if override == OVERRIDE_OPEN:
        return True
    if override == OVERRIDE_CLOSED:
        return False
    return is_window_open(now)


def describe_window(override: Optional[str], is_open: bool) -> str:
    if override == OVERRIDE_OPEN:
        return "Registration was opened manually by an admin."
    if override == OVERRIDE_CLOSED:
        return "Registration was closed manually by an admin."
    if is_open:
        return "Registration window: Friday 12:00 PST to Sunday 12:00 PST."
    return "Registration opens Friday 12:00 PST and closes Sunday 12:00 PST."
