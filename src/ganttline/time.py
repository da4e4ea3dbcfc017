# SPDX-License-Identifier: MIT

import datetime
from typing import cast

import pendulum

SECONDS_PER_DAY = 60 * 60 * 24
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30.44
DAYS_PER_YEAR = 365.25
HOURS_PER_DAY = 24


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def duration_in_days(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    """Signed length of ``start -> end`` in fractional days."""
    return (end.timestamp() - start.timestamp()) / SECONDS_PER_DAY


def duration_in_months(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    """Signed length of ``start -> end`` in average-length months."""
    return duration_in_days(start, end) / DAYS_PER_MONTH


def datetime_from_timestamp(
    timestamp: float, reference: pendulum.DateTime
) -> pendulum.DateTime:
    """Build a datetime for ``timestamp`` in the timezone of ``reference``."""
    tz = reference.timezone if reference.timezone is not None else "UTC"
    return pendulum.from_timestamp(timestamp, tz=tz)


def datetime_from_str(datetime_str: str, tz: str = "local") -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime_str, tz=tz))


def datetime_from_value(
    value: str | datetime.date | datetime.datetime, tz: str = "local"
) -> pendulum.DateTime:
    """Convert a raw date value (as loaded from YAML) into a pendulum.DateTime.

    YAML turns unquoted ISO dates into ``datetime.date`` or
    ``datetime.datetime`` objects, quoted ones stay strings.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            return pendulum.instance(value)
        return pendulum.instance(value, tz=tz)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)
    if isinstance(value, str):
        return datetime_from_str(value, tz=tz)
    raise ValueError(f"Unsupported date value: {value!r}")


def datetime_to_display_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("YYYY-MM-DD ddd")

