from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class EmployeeEarnings:
    employee_id: int
    name: str
    role: str
    hourly_rate: float
    hours_worked: float
    wages: float
    tip_share: float

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "role": self.role,
            "hourlyRate": self.hourly_rate,
            "hoursWorked": self.hours_worked,
            "wages": self.wages,
            "tipShare": self.tip_share,
        }


@dataclass(frozen=True)
class SkippedPunch:
    """A punch left out of a report because its data was unusable."""

    punch_id: int
    employee_id: int
    reason: str

    def to_dict(self) -> dict:
        return {"punchId": self.punch_id, "employeeId": self.employee_id, "reason": self.reason}


@dataclass(frozen=True)
class DailyReport:
    """Derived summary of one calendar day. Computed on demand, never stored."""

    report_date: date
    per_employee: tuple[EmployeeEarnings, ...]
    total_wages: float
    total_tips: float
    total_hours: float
    skipped: tuple[SkippedPunch, ...] = ()

    def to_dict(self) -> dict:
        return {
            "date": self.report_date.strftime("%Y-%m-%d"),
            "perEmployee": [e.to_dict() for e in self.per_employee],
            "totalWages": self.total_wages,
            "totalTips": self.total_tips,
            "totalHours": self.total_hours,
            "skipped": [s.to_dict() for s in self.skipped],
        }


@dataclass(frozen=True)
class DaySummary:
    report_date: date
    total_wages: float
    total_tips: float
    total_hours: float

    def to_dict(self) -> dict:
        return {
            "date": self.report_date.strftime("%Y-%m-%d"),
            "totalWages": self.total_wages,
            "totalTips": self.total_tips,
            "totalHours": self.total_hours,
        }


@dataclass(frozen=True)
class WeeklyReport:
    """Trailing seven-day totals.

    Revenue and labor-cost percentage have no data source yet and stay None.
    """

    start_date: date
    end_date: date
    total_wages: float
    total_tips: float
    hours_worked: float
    days: tuple[DaySummary, ...] = ()
    total_revenue: Optional[float] = None
    labor_cost_percentage: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "startDate": self.start_date.strftime("%Y-%m-%d"),
            "endDate": self.end_date.strftime("%Y-%m-%d"),
            "totalWages": self.total_wages,
            "totalTips": self.total_tips,
            "hoursWorked": self.hours_worked,
            "totalRevenue": self.total_revenue,
            "laborCostPercentage": self.labor_cost_percentage,
            "days": [d.to_dict() for d in self.days],
        }
