"""Daily and weekly wage/tip aggregation.

Everything here is a pure function of its arguments: the caller fetches
punches, tips and the roster, and these functions only do arithmetic.
"""
from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_local, trailing_days
from ..core.constants import DEFAULT_EMPLOYEE_ROLE, DEFAULT_HOURLY_RATE, DEFAULT_REPORT_DAYS
from ..core.exceptions import InvalidTimestamp, MissingField
from ..employees.model import Employee
from ..timecalc.clock import round2
from ..timeclock.model import Punch
from ..timeclock.state import ensure_consistent
from ..tips.model import TipEntry
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import DailyReport, DaySummary, EmployeeEarnings, SkippedPunch, WeeklyReport
from .tip_split.base import TipSplitPolicy
from .tip_split.equal_split import EqualTipSplit

logger = logging.getLogger(__name__)


def tip_amount(tip: TipEntry) -> float:
    """Amount of a tip entry; missing, unparseable or negative amounts count as 0."""
    raw = getattr(tip, "amount", None)
    try:
        amount = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def build_daily_report(
    punches: Iterable[Punch],
    tips: Iterable[TipEntry],
    employees: Iterable[Employee],
    report_date: Optional[date],
    *,
    calculator: Optional[PayrollCalculator] = None,
    tip_split: Optional[TipSplitPolicy] = None,
    now: Optional[datetime] = None,
    default_rate: float = DEFAULT_HOURLY_RATE,
) -> DailyReport:
    """Hours, wages and tip shares for everyone who punched in on ``report_date``.

    ``punches`` are expected to be the ones clocked in during that day. Open
    punches are counted up to ``now`` (resolved once, so every open punch in
    the report is measured against the same instant).

    A punch with inconsistent instants is skipped and reported in
    ``DailyReport.skipped``; the rest of the day is still aggregated.
    """

    if report_date is None:
        raise MissingField("date required (YYYY-MM-DD)")

    calculator = calculator or StandardPayrollCalculator()
    tip_split = tip_split or EqualTipSplit()
    now = now or now_local()
    roster = {e.employee_id: e for e in employees}

    # Minutes stay unrounded until the per-employee hours are produced.
    minutes: dict[int, float] = {}
    names: dict[int, str] = {}
    skipped: list[SkippedPunch] = []

    for punch in punches:
        try:
            ensure_consistent(punch)
            worked = calculator.worked_minutes(punch, now=now)
        except InvalidTimestamp as e:
            logger.warning("Skipping punch %s (employee %s) in %s report: %s", punch.punch_id, punch.employee_id, report_date, e)
            skipped.append(SkippedPunch(punch_id=punch.punch_id, employee_id=punch.employee_id, reason=str(e)))
            continue

        minutes[punch.employee_id] = minutes.get(punch.employee_id, 0.0) + worked
        names.setdefault(punch.employee_id, punch.employee_name)

    tips_total = sum(tip_amount(t) for t in tips)
    shares = tip_split.split(tips_total, minutes)

    rows: list[EmployeeEarnings] = []
    for employee_id, worked in minutes.items():
        employee = roster.get(employee_id)
        rate = float(employee.hourly_rate) if employee and employee.hourly_rate else float(default_rate)
        hours = round2(worked / 60)
        rows.append(
            EmployeeEarnings(
                employee_id=employee_id,
                name=names[employee_id],
                role=(employee.role if employee and employee.role else DEFAULT_EMPLOYEE_ROLE),
                hourly_rate=rate,
                hours_worked=hours,
                wages=round2(hours * rate),
                tip_share=shares.get(employee_id, 0.0),
            )
        )

    return DailyReport(
        report_date=report_date,
        per_employee=tuple(rows),
        total_wages=round2(sum(r.wages for r in rows)),
        total_tips=round2(tips_total),
        total_hours=round2(sum(r.hours_worked for r in rows)),
        skipped=tuple(skipped),
    )


def build_weekly_report(
    daily_report_fn: Callable[[date], DailyReport],
    reference_date: Optional[date],
    *,
    days: int = DEFAULT_REPORT_DAYS,
) -> WeeklyReport:
    """Sum the daily reports of ``reference_date`` and the six days before it.

    Days are summed oldest first so totals come out the same on every call.
    """

    if reference_date is None:
        raise MissingField("reference date required (YYYY-MM-DD)")

    window = trailing_days(reference_date, days)
    summaries = []
    for day in window:
        daily = daily_report_fn(day)
        summaries.append(
            DaySummary(
                report_date=day,
                total_wages=daily.total_wages,
                total_tips=daily.total_tips,
                total_hours=daily.total_hours,
            )
        )

    return WeeklyReport(
        start_date=window[0],
        end_date=window[-1],
        total_wages=round2(sum(s.total_wages for s in summaries)),
        total_tips=round2(sum(s.total_tips for s in summaries)),
        hours_worked=round2(sum(s.total_hours for s in summaries)),
        days=tuple(summaries),
    )
