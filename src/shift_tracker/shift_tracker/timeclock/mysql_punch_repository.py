from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_placeholders
from .model import BreakInterval, Punch
from .repository import PunchRepository

_PUNCH_COLUMNS = "punch_id, employee_id, employee_name, clock_in, clock_out"


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load(self, cur, rows: list[dict]) -> list[Punch]:
        if not rows:
            return []

        ids = [int(r["punch_id"]) for r in rows]
        cur.execute(
            f"""
            SELECT break_id, punch_id, start_time, end_time
            FROM punch_breaks
            WHERE punch_id IN ({in_placeholders(ids)})
            ORDER BY start_time ASC, break_id ASC
            """,
            tuple(ids),
        )
        breaks: dict[int, list[BreakInterval]] = {}
        for b in fetchall(cur):
            breaks.setdefault(int(b["punch_id"]), []).append(
                BreakInterval(start=b["start_time"], end=b.get("end_time"), break_id=int(b["break_id"]))
            )

        return [
            Punch(
                punch_id=int(r["punch_id"]),
                employee_id=int(r["employee_id"]),
                employee_name=r.get("employee_name") or "Unknown",
                clock_in=r["clock_in"],
                clock_out=r.get("clock_out"),
                breaks=tuple(breaks.get(int(r["punch_id"]), [])),
            )
            for r in rows
        ]

    def get_by_id(self, punch_id: int) -> Optional[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PUNCH_COLUMNS} FROM punches WHERE punch_id=%s", (int(punch_id),))
            r = fetchone(cur)
            punches = self._load(cur, [r] if r else [])
            return punches[0] if punches else None

    def list_punches(self, *, employee_id: Optional[int] = None) -> Sequence[Punch]:
        where = ""
        params: tuple = ()
        if employee_id is not None:
            where = "WHERE employee_id=%s"
            params = (int(employee_id),)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_PUNCH_COLUMNS} FROM punches {where} ORDER BY clock_in ASC", params)
            return self._load(cur, fetchall(cur))

    def list_clocked_in_between(self, *, start: datetime, end: datetime) -> Sequence[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_PUNCH_COLUMNS}
                FROM punches
                WHERE clock_in >= %s AND clock_in < %s
                ORDER BY clock_in ASC
                """,
                (start, end),
            )
            return self._load(cur, fetchall(cur))

    def get_open_for_employee(self, employee_id: int) -> Optional[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_PUNCH_COLUMNS}
                FROM punches
                WHERE employee_id=%s AND clock_out IS NULL
                ORDER BY clock_in DESC
                LIMIT 1
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            punches = self._load(cur, [r] if r else [])
            return punches[0] if punches else None

    def create_punch(self, *, employee_id: int, employee_name: str, clock_in: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punches(employee_id, employee_name, clock_in)
                VALUES(%s,%s,%s)
                """,
                (int(employee_id), employee_name, clock_in),
            )
            return int(cur.lastrowid)

    def set_clock_out(self, *, punch_id: int, clock_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE punches SET clock_out=%s WHERE punch_id=%s AND clock_out IS NULL",
                (clock_out, int(punch_id)),
            )
            return cur.rowcount > 0

    def add_break(self, *, punch_id: int, start: datetime) -> int:
        # Conditional insert keeps at most one open break per punch under concurrent requests.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punch_breaks(punch_id, start_time)
                SELECT %s, %s FROM DUAL
                WHERE NOT EXISTS (
                    SELECT 1 FROM punch_breaks WHERE punch_id=%s AND end_time IS NULL
                )
                """,
                (int(punch_id), start, int(punch_id)),
            )
            return int(cur.lastrowid) if cur.rowcount > 0 else 0

    def close_break(self, *, break_id: int, end: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE punch_breaks SET end_time=%s WHERE break_id=%s AND end_time IS NULL",
                (end, int(break_id)),
            )
            return cur.rowcount > 0
