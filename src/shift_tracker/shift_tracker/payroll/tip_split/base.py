from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping


class TipSplitPolicy(ABC):
    """How a day's tip pool is shared out (Strategy Pattern)."""

    @abstractmethod
    def split(self, tips_total: float, minutes_by_employee: Mapping[int, float]) -> dict[int, float]:
        """Return each employee's share, keyed like ``minutes_by_employee``."""

        raise NotImplementedError
