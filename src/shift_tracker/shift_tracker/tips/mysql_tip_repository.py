from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TipEntry
from .repository import TipRepository


def _to_tip(r: dict) -> TipEntry:
    return TipEntry(
        tip_id=int(r["tip_id"]),
        amount=float(r["amount"] or 0),
        tip_date=r["tip_date"],
        notes=r.get("notes"),
        created_at=r.get("created_at"),
    )


class MySQLTipRepository(TipRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_tips(self, *, tip_date: Optional[date] = None) -> Sequence[TipEntry]:
        where = ""
        params: tuple = ()
        if tip_date is not None:
            where = "WHERE tip_date=%s"
            params = (tip_date,)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT tip_id, amount, tip_date, notes, created_at
                FROM tips
                {where}
                ORDER BY created_at DESC, tip_id DESC
                """,
                params,
            )
            return [_to_tip(r) for r in fetchall(cur)]

    def get_by_id(self, tip_id: int) -> Optional[TipEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT tip_id, amount, tip_date, notes, created_at FROM tips WHERE tip_id=%s",
                (int(tip_id),),
            )
            r = fetchone(cur)
            return _to_tip(r) if r else None

    def create(self, *, amount: float, tip_date: date, notes: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO tips(amount, tip_date, notes) VALUES(%s,%s,%s)",
                (amount, tip_date, notes),
            )
            return int(cur.lastrowid)
