"""
================================================================================
Date Factory
================================================================================

Date and time helpers for data objects. date_factory() turns one moment into
the many string forms a web UI tends to show, so a data object can store one
dict and pick whichever representation a page needs.

Usage:
    from testfactory.date_factory import tomorrow

    due = tomorrow()
    page.due_date.fill(due["date_w_slashes"])

Author: Automation Team
License: MIT
================================================================================
"""

import random
from datetime import datetime, timedelta
from typing import Any, Dict


MONTHS = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]

HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(days=7)
YEAR = timedelta(days=365)


def _round_down_5(moment: datetime) -> datetime:
    return moment.replace(minute=moment.minute - moment.minute % 5, second=0, microsecond=0)


def _hour_12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def make_date(moment: datetime) -> str:
    """
    Long date string, e.g. "Jun 8, 2012 12:02 pm".

    Useful for verifying creation dates and such.
    """
    return (
        f"{moment.strftime('%b')} {moment.day}, {moment.year} "
        f"{_hour_12(moment)}:{moment.strftime('%M')} {moment.strftime('%p').lower()}"
    )


def date_factory(moment: datetime) -> Dict[str, Any]:
    """
    Break a moment into its commonly displayed parts.

    Args:
        moment: The datetime to convert

    Returns:
        Dict of representations, e.g. for 2013-02-08 19:02:05:
            long_date          "Feb 8, 2013 7:02 pm"
            long_date_rounded  "Feb 8, 2013 7:00 pm" (minutes floored to 5)
            short_date         "Feb 8, 2013"
            timestamp_12h      "02/08/2013 07:02:05 PM"
            MON / Mon / Month  "FEB" / "Feb" / "February"
            month_int          2
            day_of_month       8 (not zero-padded)
            weekday / wkdy     "Friday" / "Fri"
            year               2013
            hour               7 (12-hour clock)
            minute             "02"
            minute_rounded     "00"
            meridian / MERIDIAN "pm" / "PM"
            date_w_slashes     "02/08/2013"
            custom             the datetime itself
    """
    rounded = _round_down_5(moment)
    return {
        "long_date": make_date(moment),
        "long_date_rounded": make_date(moment.replace(minute=rounded.minute)),
        "short_date": f"{moment.strftime('%b')} {moment.day}, {moment.year}",
        "timestamp_12h": moment.strftime("%m/%d/%Y %I:%M:%S %p"),
        "MON": moment.strftime("%b").upper(),
        "Mon": moment.strftime("%b"),
        "Month": moment.strftime("%B"),
        "month_int": moment.month,
        "day_of_month": moment.day,
        "weekday": moment.strftime("%A"),
        "wkdy": moment.strftime("%a"),
        "year": moment.year,
        "hour": _hour_12(moment),
        "minute": moment.strftime("%M"),
        "minute_rounded": rounded.strftime("%M"),
        "meridian": moment.strftime("%p").lower(),
        "MERIDIAN": moment.strftime("%p").upper(),
        "date_w_slashes": moment.strftime("%m/%d/%Y"),
        "custom": moment,
    }


def right_now() -> Dict[str, Any]:
    return date_factory(datetime.now())


def an_hour_ago() -> Dict[str, Any]:
    return date_factory(datetime.now() - HOUR)


last_hour = an_hour_ago


def in_an_hour() -> Dict[str, Any]:
    return date_factory(datetime.now() + HOUR)


next_hour = in_an_hour


def hours_ago(hours: float) -> Dict[str, Any]:
    return date_factory(datetime.now() - hours * HOUR)


def hours_from_now(hours: float) -> Dict[str, Any]:
    return date_factory(datetime.now() + hours * HOUR)


def minutes_ago(mins: float) -> Dict[str, Any]:
    """date_factory dict for `mins` minutes before now."""
    return date_factory(datetime.now() - timedelta(minutes=mins))


def minutes_from_now(mins: float) -> Dict[str, Any]:
    return date_factory(datetime.now() + timedelta(minutes=mins))


def yesterday() -> Dict[str, Any]:
    return date_factory(datetime.now() - DAY)


def tomorrow() -> Dict[str, Any]:
    return date_factory(datetime.now() + DAY)


def in_a_week() -> Dict[str, Any]:
    return date_factory(datetime.now() + WEEK)


next_week = in_a_week


def a_week_ago() -> Dict[str, Any]:
    return date_factory(datetime.now() - WEEK)


def last_year() -> Dict[str, Any]:
    return date_factory(datetime.now() - YEAR)


a_year_ago = last_year


def in_a_year() -> Dict[str, Any]:
    return date_factory(datetime.now() + YEAR)


next_year = in_a_year


def in_the_last_year() -> Dict[str, Any]:
    """A randomly selected date from within the last year."""
    return date_factory(datetime.now() - timedelta(seconds=random.randint(0, int(YEAR.total_seconds()))))


def next_monday() -> Dict[str, Any]:
    """The coming Monday (a week from today when today is Monday)."""
    now = datetime.now()
    return date_factory(now + timedelta(days=7 - now.weekday()))


def current_month() -> str:
    """The current month as an upper-case 3-letter string, e.g. "JUL"."""
    return MONTHS[datetime.now().month - 1]


def last_month() -> str:
    return MONTHS[(datetime.now().month - 2) % 12]


def next_month() -> str:
    return MONTHS[datetime.now().month % 12]
