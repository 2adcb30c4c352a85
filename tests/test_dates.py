from datetime import datetime, timedelta, timezone

import pytest

from zkutil.dates import FrozenProvider, NowProvider, time_from_natural


def test_now_provider_returns_current_time():
    before = datetime.now().astimezone()
    value = NowProvider().date()
    after = datetime.now().astimezone()
    assert before <= value <= after


def test_frozen_provider_returns_same_date():
    fixed = datetime(2020, 5, 6, 7, 8, tzinfo=timezone.utc)
    provider = FrozenProvider(fixed)
    assert provider.date() == fixed
    assert provider.date() is provider.date()


def test_frozen_provider_defaults_to_creation_time():
    before = datetime.now().astimezone()
    provider = FrozenProvider()
    after = datetime.now().astimezone()
    first = provider.date()
    assert before <= first <= after
    assert provider.date() == first


def test_empty_string_is_now():
    before = datetime.now().astimezone()
    value = time_from_natural("")
    after = datetime.now().astimezone()
    assert before <= value <= after


def test_rfc3339_utc():
    value = time_from_natural("2021-03-04T05:06:07Z")
    assert value == datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    assert value.utcoffset() == timedelta(0)


def test_rfc3339_offset_and_fraction():
    value = time_from_natural("2021-03-04T05:06:07.5+02:00")
    expected = datetime(2021, 3, 4, 5, 6, 7, 500000, tzinfo=timezone(timedelta(hours=2)))
    assert value == expected


@pytest.mark.parametrize(
    "text, fields",
    [
        ("2021-03-04T05:06:07", (2021, 3, 4, 5, 6, 7)),
        ("2021-03-04T05:06", (2021, 3, 4, 5, 6, 0)),
        ("2021-03-04", (2021, 3, 4, 0, 0, 0)),
        ("2021-03", (2021, 3, 1, 0, 0, 0)),
        ("2021", (2021, 1, 1, 0, 0, 0)),
    ],
)
def test_local_formats(text, fields):
    value = time_from_natural(text)
    assert (value.year, value.month, value.day, value.hour, value.minute, value.second) == fields
    assert value.tzinfo is not None


def test_clock_time_only():
    value = time_from_natural("15:04")
    assert (value.hour, value.minute) == (15, 4)


def test_yesterday_and_days_ago():
    today = datetime.now().astimezone().date()
    assert time_from_natural("yesterday").date() == today - timedelta(days=1)
    assert time_from_natural("3 days ago").date() == today - timedelta(days=3)
    assert time_from_natural("two weeks ago").date() == today - timedelta(weeks=2)


def test_last_weekday_is_in_the_past():
    today = datetime.now().astimezone().date()
    value = time_from_natural("last monday").date()
    assert value.weekday() == 0
    assert today - timedelta(days=7) <= value < today


@pytest.mark.parametrize("text", ["gibberish", "2021-13-01", "someday soon"])
def test_unparsable_raises(text):
    with pytest.raises(ValueError):
        time_from_natural(text)