from __future__ import annotations

from calendar import isleap
from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Optional, Union

DateLike = Union[date, str, None]

ISO_FORMAT = '%Y-%m-%d'
DAYS_PER_YEAR = 365.25


def parse_date(value: DateLike) -> Optional[date]:
    """Return a calendar date for `value`, or None when it is unset.

    Accepts a `date`, a `YYYY-MM-DD` string, or an empty value.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    raw = str(value).strip()
    if not raw:
        return None
    try:
        return datetime.strptime(raw, ISO_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f'date must use the YYYY-MM-DD form (got {raw!r})') from exc


def add_years(value: DateLike, years: int) -> Optional[date]:
    """Shift a date by whole calendar years.

    Day and month are kept. 29 February rolls over to 1 March when the target
    year is not a leap year. An unset date stays unset. Years past the
    calendar range clamp to `date.max` (and before `date.min` to `date.min`).
    """

    d = parse_date(value)
    if d is None:
        return None

    target_year = d.year + int(years)
    if target_year > MAXYEAR:
        return date.max
    if target_year < MINYEAR:
        return date.min
    if d.month == 2 and d.day == 29 and not isleap(target_year):
        return date(target_year, 3, 1)
    return d.replace(year=target_year)


def before(d1: DateLike, d2: DateLike) -> bool:
    """True iff d1 is strictly earlier than d2. False when either is unset."""

    a, b = parse_date(d1), parse_date(d2)
    if a is None or b is None:
        return False
    return a < b


def before_or_equal(d1: DateLike, d2: DateLike) -> bool:
    """True iff d1 <= d2. False when either is unset."""

    a, b = parse_date(d1), parse_date(d2)
    if a is None or b is None:
        return False
    return a <= b


def exact_age(birth: DateLike, today: DateLike) -> str:
    """Fractional age for display, e.g. '13.99'. Never used for branching."""

    b, t = parse_date(birth), parse_date(today)
    if b is None or t is None:
        return '0'
    return f'{(t - b).days / DAYS_PER_YEAR:.2f}'


def calendar_age(birth: DateLike, today: DateLike) -> int:
    b, t = parse_date(birth), parse_date(today)
    if b is None or t is None:
        return 0
    age = t.year - b.year
    if (t.month, t.day) < (b.month, b.day):
        age -= 1
    return age


def format_date(value: DateLike) -> str:
    """Render DD/MM/YYYY for narratives; unset renders as ''."""

    d = parse_date(value)
    if d is None:
        return ''
    return d.strftime('%d/%m/%Y')
