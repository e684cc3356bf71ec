from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for the employee roster.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> int:
        """Insert ``employee`` (its id is ignored) and return the new id."""

        raise NotImplementedError

    def update(self, employee_id: int, changes: dict[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: int) -> bool:
        raise NotImplementedError
