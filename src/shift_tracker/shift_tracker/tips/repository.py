from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TipEntry


class TipRepository(Protocol):
    def list_tips(self, *, tip_date: Optional[date] = None) -> Sequence[TipEntry]:
        """Newest first, optionally for a single day."""

        raise NotImplementedError

    def get_by_id(self, tip_id: int) -> Optional[TipEntry]:
        raise NotImplementedError

    def create(self, *, amount: float, tip_date: date, notes: Optional[str] = None) -> int:
        raise NotImplementedError
