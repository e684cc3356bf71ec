from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.service import PayrollReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .timeclock.mysql_punch_repository import MySQLPunchRepository
from .timeclock.repository import PunchRepository
from .timeclock.service import PunchService
from .tips.mysql_tip_repository import MySQLTipRepository
from .tips.repository import TipRepository
from .tips.service import TipService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    users_repo: UserRepository
    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    punches_repo: PunchRepository
    tips_repo: TipRepository

    auth_service: AuthService
    employee_service: EmployeeService
    shift_service: ShiftService
    punch_service: PunchService
    tip_service: TipService
    payroll_report_service: PayrollReportService


def wire_services(
    *,
    conn: DatabaseConnection | None,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    shifts_repo: ShiftRepository,
    punches_repo: PunchRepository,
    tips_repo: TipRepository,
    default_hourly_rate: float = 16,
) -> Container:
    """Build services on top of the given repositories (tests pass in-memory ones)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        punches_repo=punches_repo,
        tips_repo=tips_repo,
        auth_service=AuthService(users_repo, employees_repo),
        employee_service=EmployeeService(employees_repo),
        shift_service=ShiftService(shifts_repo),
        punch_service=PunchService(punches_repo, employees_repo),
        tip_service=TipService(tips_repo),
        payroll_report_service=PayrollReportService(
            punches_repo,
            tips_repo,
            employees_repo,
            default_rate=default_hourly_rate,
        ),
    )


def build_container(*, db_config: dict, default_hourly_rate: float = 16) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_services(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        tips_repo=MySQLTipRepository(conn),
        default_hourly_rate=default_hourly_rate,
    )
