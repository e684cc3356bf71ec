from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_bounds, now_local
from ..core.constants import DEFAULT_HOURLY_RATE
from ..core.exceptions import MissingField
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..timeclock.repository import PunchRepository
from ..tips.repository import TipRepository
from .aggregator import build_daily_report, build_weekly_report
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DailyReport, WeeklyReport
from .tip_split.base import TipSplitPolicy
from .tip_split.equal_split import EqualTipSplit


class PayrollReportService:
    """Fetches a day's punches, tips and roster and hands them to the aggregator."""

    def __init__(
        self,
        punches: PunchRepository,
        tips: TipRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        tip_split: Optional[TipSplitPolicy] = None,
        default_rate: float = DEFAULT_HOURLY_RATE,
    ):
        self._punches = punches
        self._tips = tips
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()
        self._tip_split = tip_split or EqualTipSplit()
        self._default_rate = float(default_rate)

    def daily_report(
        self,
        report_date: date,
        *,
        now: Optional[datetime] = None,
        roster: Optional[Sequence[Employee]] = None,
    ) -> DailyReport:
        if report_date is None:
            raise MissingField("date required (YYYY-MM-DD)")

        start, end = day_bounds(report_date)
        punches = self._punches.list_clocked_in_between(start=start, end=end)
        tips = self._tips.list_tips(tip_date=report_date)
        employees = roster if roster is not None else self._employees.list_all()

        return build_daily_report(
            punches,
            tips,
            employees,
            report_date,
            calculator=self._calculator,
            tip_split=self._tip_split,
            now=now,
            default_rate=self._default_rate,
        )

    def weekly_report(self, reference_date: date, *, now: Optional[datetime] = None) -> WeeklyReport:
        now = now or now_local()
        roster = self._employees.list_all()
        return build_weekly_report(lambda day: self.daily_report(day, now=now, roster=roster), reference_date)

    def overview(self, *, today: Optional[date] = None, now: Optional[datetime] = None) -> dict:
        now = now or now_local()
        today = today or now.date()
        return {
            "daily": self.daily_report(today, now=now).to_dict(),
            "weekly": self.weekly_report(today, now=now).to_dict(),
        }
