from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeRecord


class EmployeeRepository(Protocol):
    """Repository interface for EmployeeRecord.

    The service layer depends on this interface, not on a concrete file format.
    """

    def add(self, record: EmployeeRecord) -> None:
        raise NotImplementedError

    def find_by_code(self, code: int) -> Optional[EmployeeRecord]:
        raise NotImplementedError

    def delete_by_code(self, code: int) -> int:
        """Remove records with ``code``; return 1 if any were removed, else 0."""

        raise NotImplementedError

    def list_sorted_by_grade_desc(self) -> Sequence[EmployeeRecord]:
        raise NotImplementedError
