from __future__ import annotations

from typing import Mapping

from ...timecalc.clock import round2
from .base import TipSplitPolicy


class EqualTipSplit(TipSplitPolicy):
    """Everyone who punched in that day gets the same share, whatever their hours.

    Nobody worked -> nobody gets a share; the pool stays unattributed.
    """

    def split(self, tips_total: float, minutes_by_employee: Mapping[int, float]) -> dict[int, float]:
        if not minutes_by_employee:
            return {}
        share = round2(tips_total / len(minutes_by_employee))
        return {employee_id: share for employee_id in minutes_by_employee}
