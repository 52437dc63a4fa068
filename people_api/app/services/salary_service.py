"""
Salary projection.

Every employee starts at ``BASE_SALARY``.  Each completed year of
service compounds ``ANNUAL_INCREASE_RATE`` on top of the current value
and then adds ``ANNUAL_FIXED_INCREASE``.  The result is reported either
in currency (``full``) or as a multiple of ``MINIMUM_WAGE`` (``min``),
always rounded up to the next cent.

Arithmetic is done in ``Decimal``; a value exact to the cent stays
exact before the ceiling is taken (one year of service is 2338.44).
"""

from datetime import date
from decimal import ROUND_CEILING, Decimal
from typing import Optional

from people_api.app.core.errors import InvalidInputError
from people_api.app.services.age_service import AgeService


BASE_SALARY = Decimal("1558.00")
MINIMUM_WAGE = Decimal("1302.00")
ANNUAL_INCREASE_RATE = Decimal("0.18")
ANNUAL_FIXED_INCREASE = Decimal("500.00")

SALARY_OUTPUTS = ("full", "min")

_CENT = Decimal("0.01")


def round_up_to_cents(value: Decimal) -> float:
    """Round toward positive infinity at the second decimal place."""
    return float(value.quantize(_CENT, rounding=ROUND_CEILING))


class SalaryService:
    """Computes salaries from admission dates."""

    def __init__(self, age_service: Optional[AgeService] = None) -> None:
        self._age_service = age_service or AgeService()

    def calculate_salary(self, admission_date: date, output_kind: str, today: Optional[date] = None) -> float:
        """Return the projected salary for ``admission_date``.

        ``output_kind`` is ``"full"`` for the amount in currency or
        ``"min"`` for the amount in minimum wages (case insensitive).
        Raises ``InvalidInputError`` for any other value, or when the
        admission date is missing or lies after ``today``.
        """
        years = self._age_service.years_of_service(admission_date, today)
        salary = self.project(years)
        return self._format(salary, output_kind)

    @staticmethod
    def project(years: int) -> Decimal:
        """Unrounded salary after ``years`` completed years of service."""
        salary = BASE_SALARY
        for _ in range(years):
            salary = salary * (1 + ANNUAL_INCREASE_RATE) + ANNUAL_FIXED_INCREASE
        return salary

    @staticmethod
    def _format(salary: Decimal, output_kind: str) -> float:
        kind = (output_kind or "").lower()
        if kind == "full":
            return round_up_to_cents(salary)
        if kind == "min":
            return round_up_to_cents(salary / MINIMUM_WAGE)
        raise InvalidInputError(
            f"Tipo de saída inválido: {output_kind}. Valores aceitos: {', '.join(SALARY_OUTPUTS)}"
        )
