"""
Calendar arithmetic for ages and years of service.

All differences are civil calendar differences, not fixed-length
approximations: a month is whatever length the traversed month has,
and adding months to a late day of the month clamps to the last valid
day (31 January plus one month is 28 or 29 February).

Each public method accepts an explicit ``today``; when omitted, the
clock supplied at construction time is consulted.
"""

from datetime import date
from typing import Callable, NamedTuple, Optional

from dateutil.relativedelta import relativedelta

from people_api.app.core.errors import InvalidInputError


Clock = Callable[[], date]


class Age(NamedTuple):
    years: int
    months: int
    days: int


def _months_between(start: date, end: date) -> int:
    """Whole months from ``start`` to ``end``, truncated toward zero.

    A month is complete once the day of month of ``start`` is reached
    again, so 2023-01-31 to 2023-02-28 is 0 months.
    """
    packed_start = (start.year * 12 + start.month - 1) * 32 + start.day
    packed_end = (end.year * 12 + end.month - 1) * 32 + end.day
    return int((packed_end - packed_start) / 32)


def _period_between(start: date, end: date) -> Age:
    # Callers guarantee start <= end.
    total_months = (end.year * 12 + end.month) - (start.year * 12 + start.month)
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end - (start + relativedelta(months=total_months))).days
    years, months = divmod(total_months, 12)
    return Age(years, months, days)


class AgeService:
    """Age and seniority calculations."""

    def __init__(self, clock: Clock = date.today) -> None:
        if clock is None:
            raise TypeError("clock")
        self._clock = clock

    def today(self) -> date:
        return self._clock()

    def diff(self, birth_date: date, today: Optional[date] = None) -> Age:
        """Return the age at ``today`` as years, months and days.

        Raises ``InvalidInputError`` if ``birth_date`` is missing or in
        the future.
        """
        if birth_date is None:
            raise InvalidInputError("Data de nascimento não pode ser nula")
        today = today or self.today()
        if birth_date > today:
            raise InvalidInputError("Data de nascimento não pode ser no futuro")
        return _period_between(birth_date, today)

    def years_of_service(self, admission_date: date, today: Optional[date] = None) -> int:
        """Return whole calendar years elapsed since ``admission_date``."""
        if admission_date is None:
            raise InvalidInputError("Data de admissão não pode ser nula")
        today = today or self.today()
        if admission_date > today:
            raise InvalidInputError("Data de admissão não pode ser no futuro")
        return _period_between(admission_date, today).years

    def total_days(self, start: date, today: Optional[date] = None) -> int:
        today = today or self.today()
        return (today - start).days

    def total_months(self, start: date, today: Optional[date] = None) -> int:
        today = today or self.today()
        return _months_between(start, today)
