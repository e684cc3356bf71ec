from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class TipEntry:
    """Domain entity: tips collected on a day. Never edited after creation."""

    tip_id: int
    amount: float
    tip_date: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.tip_id,
            "amount": self.amount,
            "date": self.tip_date.strftime("%Y-%m-%d"),
            "notes": self.notes,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
