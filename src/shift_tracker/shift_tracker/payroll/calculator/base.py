from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ...timeclock.model import Punch


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_minutes(self, punch: Punch, *, now: Optional[datetime] = None) -> float:
        """Net minutes worked, as of clock-out or ``now`` for an open punch."""

        raise NotImplementedError
