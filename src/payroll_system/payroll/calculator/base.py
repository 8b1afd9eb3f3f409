from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Income


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_salary(self, income: Income) -> float:
        raise NotImplementedError
