from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, user_id, name, email, role, department, level, hourly_rate, status, join_date"
_UPDATABLE = {"name", "email", "role", "department", "level", "hourly_rate", "status", "join_date"}


def _to_employee(r: dict) -> Employee:
    rate = r.get("hourly_rate")
    return Employee(
        employee_id=int(r["employee_id"]),
        user_id=int(r["user_id"]) if r.get("user_id") is not None else None,
        name=r["name"],
        email=r.get("email"),
        role=r.get("role"),
        department=r.get("department"),
        level=r.get("level"),
        hourly_rate=float(rate) if rate is not None else None,
        status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
        join_date=r.get("join_date"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE user_id=%s ORDER BY employee_id LIMIT 1", (int(user_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, employee: Employee) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(user_id, name, email, role, department, level, hourly_rate, status, join_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.user_id,
                    employee.name,
                    employee.email,
                    employee.role,
                    employee.department,
                    employee.level,
                    employee.hourly_rate,
                    employee.status.value,
                    employee.join_date,
                ),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, changes: dict[str, Any]) -> bool:
        columns = [c for c in changes if c in _UPDATABLE]
        if not columns:
            return False

        values = [
            changes[c].value if isinstance(changes[c], EmployeeStatus) else changes[c]
            for c in columns
        ]
        assignments = ", ".join(f"{c}=%s" for c in columns)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET {assignments} WHERE employee_id=%s",
                (*values, int(employee_id)),
            )
            return cur.rowcount > 0

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
