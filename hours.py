import re
from datetime import datetime, time, timedelta

CURRENT_DAY = "Current Day"

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_HHMM = re.compile(r"^(\d{2})(\d{2})$")


class HoursFormatError(ValueError):
    pass


def parse_time(value, reference):
    """Turn ``HHMM`` into a datetime on ``reference``'s date.

    ``2400`` is accepted and means midnight at the end of that day.
    """
    match = _HHMM.match(value) if isinstance(value, str) else None
    if not match:
        raise HoursFormatError(f"Invalid time {value!r}, expected HHMM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59 or hours > 24 or (hours == 24 and minutes):
        raise HoursFormatError(f"Invalid time {value!r}, out of range")
    midnight = datetime.combine(reference.date(), time(), tzinfo=reference.tzinfo)
    return midnight + timedelta(hours=hours, minutes=minutes)


def current_time(now):
    return now.strftime("%H%M")


def current_day(now):
    return DAY_NAMES[now.weekday()]


def resolve_day(day_filter, now):
    if day_filter == CURRENT_DAY:
        return current_day(now)
    return day_filter


# windows are day-local: [open, close)
def is_open(hours, now):
    if not hours:
        return False
    parsed_now = parse_time(current_time(now), now)
    parsed_open = parse_time(hours["open"], now)
    parsed_close = parse_time(hours["close"], now)
    if parsed_close <= parsed_open:
        return False
    return parsed_open <= parsed_now < parsed_close


def closing_minutes(hours):
    """Closing time as minutes after midnight, or None when there are no hours."""
    if not hours:
        return None
    midnight = datetime(2000, 1, 1)
    return int((parse_time(hours["close"], midnight) - midnight).total_seconds() // 60)


def format_hours(hours):
    if not hours:
        return "Closed"
    return f"{hours['open']} - {hours['close']}"


def validate_hours(hours):
    reference = datetime(2000, 1, 1)
    for day, window in hours.items():
        if day not in DAY_NAMES:
            raise HoursFormatError(f"Unknown day {day!r}")
        if not isinstance(window, dict) or "open" not in window or "close" not in window:
            raise HoursFormatError(f"Hours for {day} need both 'open' and 'close'")
        parse_time(window["open"], reference)
        parse_time(window["close"], reference)
