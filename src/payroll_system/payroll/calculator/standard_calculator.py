from __future__ import annotations

from .base import SalaryCalculator
from ...employees.model import Income


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: base + bonus + allowances - tax - loan (may go negative)."""

    def net_salary(self, income: Income) -> float:
        earnings = income.base_salary + income.bonus + income.medical_allowance + income.travel_allowance
        deductions = income.tax + income.loan
        return earnings - deductions
