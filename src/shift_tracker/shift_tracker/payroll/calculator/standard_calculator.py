from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ...common.datetime_utils import now_local
from ...timeclock.model import Punch
from .base import PayrollCalculator


def _minutes(delta: timedelta) -> float:
    return delta.total_seconds() / 60


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (out or now) - in - closed breaks, not below 0.

    A break that has not ended yet is not subtracted at all.
    """

    def worked_minutes(self, punch: Punch, *, now: Optional[datetime] = None) -> float:
        end = punch.clock_out or now or now_local()
        break_minutes = sum(
            _minutes(brk.end - brk.start)
            for brk in punch.breaks
            if brk.start is not None and brk.end is not None
        )
        return max(0.0, _minutes(end - punch.clock_in) - break_minutes)
