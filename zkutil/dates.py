"""Date providers and parsing of human-written dates."""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timedelta, timezone, tzinfo

_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)

_LOCAL_FORMATS = [
    re.compile(r"(?P<y>\d{4})-(?P<mo>\d{2})-(?P<d>\d{2})T(?P<h>\d{1,2}):(?P<mi>\d{2}):(?P<s>\d{2})(?:\.(?P<f>\d+))?"),
    re.compile(r"(?P<y>\d{4})-(?P<mo>\d{2})-(?P<d>\d{2})T(?P<h>\d{1,2}):(?P<mi>\d{2})"),
    re.compile(r"(?P<y>\d{4})-(?P<mo>\d{2})-(?P<d>\d{2})"),
    re.compile(r"(?P<y>\d{4})-(?P<mo>\d{2})"),
    re.compile(r"(?P<y>\d{4})"),
    re.compile(r"(?P<h>\d{1,2}):(?P<mi>\d{2})"),
]

_NUMBER_WORDS = {
    "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}
_NUM = r"\d+|an?|one|two|three|four|five|six|seven|eight|nine|ten"
_UNIT = r"second|minute|hour|day|week|month|year"
_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

_AGO_RE = re.compile(rf"({_NUM}) ({_UNIT})s? ago")
_IN_RE = re.compile(rf"in ({_NUM}) ({_UNIT})s?")
_FROM_NOW_RE = re.compile(rf"({_NUM}) ({_UNIT})s? from now")
_RELATIVE_RE = re.compile(rf"(last|past|previous|next) ({_UNIT})")
_WEEKDAY_RE = re.compile(rf"(?:(last|past|previous|next) )?({'|'.join(_WEEKDAYS)})")

_FIXED_UNITS = {
    "second": timedelta(seconds=1),
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}


def _now() -> datetime:
    return datetime.now().astimezone()


class NowProvider:
    """A date provider returning the current date."""

    def date(self) -> datetime:
        return _now()


class FrozenProvider:
    """A date provider always returning the same date, by default the time of creation."""

    def __init__(self, date: datetime | None = None) -> None:
        self._date = date if date is not None else _now()

    def date(self) -> datetime:
        return self._date


def _local(year: int, month: int, day: int, hour: int = 0, minute: int = 0,
           second: int = 0, microsecond: int = 0) -> datetime:
    naive = datetime(year, month, day, hour, minute, second, microsecond)
    try:
        return naive.astimezone()
    except (OverflowError, OSError, ValueError):
        local_tz: tzinfo | None = _now().tzinfo
        return naive.replace(tzinfo=local_tz)


def _microseconds(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    try:
        return datetime(int(year), int(month), int(day), int(hour), int(minute),
                        int(second), _microseconds(fraction), tzinfo=tz)
    except ValueError:
        return None


def _parse_local(text: str) -> datetime | None:
    for pattern in _LOCAL_FORMATS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        fields = match.groupdict()
        try:
            return _local(
                int(fields.get("y") or 1),
                int(fields.get("mo") or 1),
                int(fields.get("d") or 1),
                int(fields.get("h") or 0),
                int(fields.get("mi") or 0),
                int(fields.get("s") or 0),
                _microseconds(fields.get("f")),
            )
        except ValueError:
            continue
    return None


def _number(word: str) -> int:
    return int(word) if word.isdigit() else _NUMBER_WORDS[word]


def _add_months(ref: datetime, months: int) -> datetime:
    total = ref.year * 12 + ref.month - 1 + months
    year, month = divmod(total, 12)
    month += 1
    day = min(ref.day, calendar.monthrange(year, month)[1])
    return ref.replace(year=year, month=month, day=day)


def _shift(ref: datetime, amount: int, unit: str) -> datetime:
    if unit == "month":
        return _add_months(ref, amount)
    if unit == "year":
        return _add_months(ref, 12 * amount)
    return ref + amount * _FIXED_UNITS[unit]


def _parse_natural(text: str, now: datetime) -> datetime:
    phrase = " ".join(text.lower().split())
    if phrase in ("now", "today"):
        return now
    if phrase == "yesterday":
        return now - timedelta(days=1)
    if phrase == "tomorrow":
        return now + timedelta(days=1)

    if match := _AGO_RE.fullmatch(phrase):
        return _shift(now, -_number(match.group(1)), match.group(2))
    if match := (_IN_RE.fullmatch(phrase) or _FROM_NOW_RE.fullmatch(phrase)):
        return _shift(now, _number(match.group(1)), match.group(2))
    if match := _RELATIVE_RE.fullmatch(phrase):
        step = 1 if match.group(1) == "next" else -1
        return _shift(now, step, match.group(2))
    if match := _WEEKDAY_RE.fullmatch(phrase):
        modifier, name = match.groups()
        target = _WEEKDAYS.index(name)
        if modifier == "next":
            days = (target - now.weekday()) % 7 or 7
            return now + timedelta(days=days)
        days = (now.weekday() - target) % 7
        if modifier is not None and days == 0:
            days = 7
        return now - timedelta(days=days)

    raise ValueError(f"cannot parse date: {text!r}")


def time_from_natural(date: str) -> datetime:
    """Parse a human-written date; ambiguous phrases point to the past.

    Accepts RFC 3339 timestamps, local ISO-like dates and times, and phrases
    such as ``yesterday``, ``3 days ago`` or ``last monday``. An empty string
    yields the current time. Raises ``ValueError`` for anything else.
    """
    if date == "":
        return _now()
    parsed = _parse_rfc3339(date) or _parse_local(date)
    if parsed is not None:
        return parsed
    return _parse_natural(date, _now())