# app/helpers/time.py
from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def today() -> date:
    return utcnow().date()
