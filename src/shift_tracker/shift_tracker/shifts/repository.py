from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_shifts(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Shift]:
        """Shifts ordered by date; ``start``/``end`` are inclusive."""

        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def create(self, shift: Shift) -> int:
        raise NotImplementedError

    def delete(self, shift_id: int) -> bool:
        raise NotImplementedError
