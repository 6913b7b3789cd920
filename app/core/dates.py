import calendar
from datetime import date, datetime, time, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TIME_FRAME_DAYS = {
    "today": 0,
    "twoDays": 2,
    "week": 7,
}
MONTH_TIME_FRAME = "month"


def ensure_utc(value):
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Convert to UTC; naive values are local wall-clock times."""
    return value.astimezone(timezone.utc)


def _one_month_earlier(day: date) -> date:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def time_frame_start(time_frame, now=None) -> datetime:
    """Start of a named listing window, counted from midnight.

    A naive ``now`` (the default) is local wall-clock time; an aware one keeps
    its own zone. The day arithmetic happens on dates and the offset is
    resolved for the start day itself, so windows crossing a DST change still
    begin at that day's midnight. Unknown names fall back to the epoch so
    that every record matches.
    """
    if now is None:
        now = datetime.now()

    if time_frame in TIME_FRAME_DAYS:
        start_day = now.date() - timedelta(days=TIME_FRAME_DAYS[time_frame])
    elif time_frame == MONTH_TIME_FRAME:
        start_day = _one_month_earlier(now.date())
    else:
        return EPOCH
    return to_utc(datetime.combine(start_day, time.min, tzinfo=now.tzinfo))


def parse_boundary(value) -> datetime:
    """Parse an ISO date or datetime; naive values are taken as UTC."""
    if value is None:
        raise ValueError("date value is required")
    text = str(value).strip()
    if not text:
        raise ValueError("date value is required")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def explicit_range(start_value, end_value) -> tuple[datetime, datetime]:
    """Half-open ``[start, end + 1 day)`` window so the whole end day is included."""
    start = parse_boundary(start_value)
    end = parse_boundary(end_value) + timedelta(days=1)
    return start, end
