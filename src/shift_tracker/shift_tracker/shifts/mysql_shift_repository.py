from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = "shift_id, employee_id, employee_name, role, work_date, start_time, end_time, duration_hours, created_at"


def _to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        employee_id=int(r["employee_id"]) if r.get("employee_id") is not None else None,
        employee_name=r["employee_name"],
        role=r["role"],
        work_date=r["work_date"],
        start_time=r["start_time"],
        end_time=r["end_time"],
        duration_hours=float(r["duration_hours"]),
        created_at=r.get("created_at"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_shifts(
        self,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Shift]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM shifts {where} ORDER BY work_date ASC, start_time ASC",
                tuple(params),
            )
            return [_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def create(self, shift: Shift) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(employee_id, employee_name, role, work_date, start_time, end_time, duration_hours)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    shift.employee_id,
                    shift.employee_name,
                    shift.role,
                    shift.work_date,
                    shift.start_time,
                    shift.end_time,
                    shift.duration_hours,
                ),
            )
            return int(cur.lastrowid)

    def delete(self, shift_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return cur.rowcount > 0
