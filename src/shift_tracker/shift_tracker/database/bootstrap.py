"""Startup-time database setup.

Run explicitly from ``create_app`` (AUTO_INIT_DB / AUTO_SEED_DB) or from the
scripts in ``scripts/``; nothing here runs implicitly on first query.
"""
from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.enums import EmployeeStatus, Role
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..users.repository import UserRepository
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_MANAGER_EMAIL = "manager@shiftora.test"
DEMO_MANAGER_PASSWORD = "password123"
DEMO_MANAGER_NAME = "Demo Manager"
DEMO_MANAGER_RATE = 28


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes, skips -- comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    in_comment = False
    escape = False

    for i, ch in enumerate(sql):
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            continue

        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "-" and not in_single and not in_double and sql[i : i + 2] == "--":
            in_comment = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    """Apply schema.sql (idempotent: CREATE TABLE IF NOT EXISTS)."""
    ensure_database_exists(conn_factory)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", conn_factory.config.describe())


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def ensure_demo_manager(
    users: UserRepository,
    employees: EmployeeRepository,
    *,
    email: str = DEMO_MANAGER_EMAIL,
    password: str = DEMO_MANAGER_PASSWORD,
    name: str = DEMO_MANAGER_NAME,
) -> bool:
    """Create the demo manager account and roster entry unless it already exists.

    Returns True when something was created.
    """

    if users.get_by_email(email):
        return False

    user_id = users.create_user(
        name=name,
        email=email,
        password_hash=generate_password_hash(password),
        role=Role.MANAGER,
    )
    employees.create(
        Employee(
            employee_id=0,
            user_id=user_id,
            name=name,
            email=email,
            role="Manager",
            department="Management",
            level="Manager",
            hourly_rate=float(DEMO_MANAGER_RATE),
            status=EmployeeStatus.ACTIVE,
            join_date=date.today(),
        )
    )
    logger.info("Demo manager %s created", email)
    return True
