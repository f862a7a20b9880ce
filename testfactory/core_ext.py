"""
================================================================================
Core Helpers
================================================================================

Small helpers used by data objects and test steps:
    - random_time: random dates and date series
    - alphabetize: natural sort order
    - commas / groom: currency-style number formatting and parsing
    - binary_transform: checkbox/radio values to "set"/"clear"

================================================================================
"""

import calendar
import random
import re
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Optional, Union

from .errors import UnsupportedBinaryValue


SET = "set"
CLEAR = "clear"

_YES = re.compile(r"yes|on", re.IGNORECASE)
_NO = re.compile(r"no|off", re.IGNORECASE)
_CHUNK = re.compile(r"(\d+|\D+)")


def random_time(
    year_range: int = 5,
    series: Optional[Iterable[Union[int, float, timedelta]]] = None,
) -> Union[datetime, List[datetime]]:
    """
    Random local midnight within the last `year_range` years.

    With `series`, returns a list: the random date first, then one entry per
    span in `series`, each later than the previous by a random amount of up
    to that span.

    Examples:
        random_time()                          # some day in the last 5 years
        random_time(year_range=80)             # birthdays
        random_time(series=[timedelta(days=20), timedelta(days=3 * 365)])
        random_time(series=[3600, 3600, 3600]) # events during a few hours
    """
    now = datetime.now()
    year = random.randint(now.year - year_range + 1, now.year)
    month = random.randint(1, 12)
    day = random.randint(1, calendar.monthrange(year, month)[1])
    date = datetime(year, month, day)

    if series is None:
        return date

    result = [date]
    for span in series:
        seconds = span.total_seconds() if isinstance(span, timedelta) else span
        step = max(1, int(random.random() * seconds + 0.999999))
        result.append(result[-1] + timedelta(seconds=step))
    return result


def _natural_key(item: Any) -> List[Any]:
    key = []
    for chunk in _CHUNK.findall(str(item).lower()):
        key.append((0, int(chunk), "") if chunk.isdigit() else (1, 0, chunk))
    return key


def alphabetize(items: Iterable[Any]) -> List[Any]:
    """
    Sort in natural order rather than ASCII order.

    >>> alphabetize(["item10", "Item2", "item1"])
    ['item1', 'Item2', 'item10']
    """
    return sorted(items, key=_natural_key)


def alphabetize_in_place(items: List[Any]) -> None:
    """Like alphabetize, sorting the list in place."""
    items.sort(key=_natural_key)


def commas(number: Union[int, float]) -> str:
    """
    Format a number with thousands separators and two decimals.

    >>> commas(1234567)
    '1,234,567.00'
    """
    return f"{number:,.2f}"


def groom(text: str) -> float:
    """
    Remove dollar signs and commas from a number string and return a float.

    >>> groom("$1,234.50")
    1234.5
    """
    return float(re.sub(r"[$,]", "", text))


def binary_transform(value: Any) -> Optional[str]:
    """
    Map a checkbox/radio value to SET, CLEAR or None.

    Accepts True/False, "set"/"clear", and strings containing yes/on or
    no/off (case insensitive). None means "leave the element alone".

    Raises:
        UnsupportedBinaryValue: For anything else
    """
    if value is None:
        return None
    if value is True or value == SET or (isinstance(value, str) and _YES.search(value)):
        return SET
    if value is False or value == CLEAR or (isinstance(value, str) and _NO.search(value)):
        return CLEAR
    raise UnsupportedBinaryValue(value)
