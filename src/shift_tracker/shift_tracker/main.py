from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.http import status_for
from .container import Container, build_container
from .core.constants import DEFAULT_HOURLY_RATE, DEFAULT_SESSION_HOURS
from .core.exceptions import DomainError
from .database.bootstrap import apply_schema, ensure_demo_manager, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .shifts.controller import register as register_shifts
from .timeclock.controller import register as register_timeclock
from .tips.controller import register as register_tips
from .users.controller import register as register_users

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), status_for(e)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error: %s", e)
        message = f"Internal error: {e}" if app.config.get("DEBUG") else "Internal error"
        return jsonify({"success": False, "message": message}), 500


def _bootstrap(app: Flask, settings, container: Container) -> None:
    """Explicit startup steps, each safe to run on every boot."""
    if container.conn is None:
        return

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        app.logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        created = ensure_demo_manager(
            container.users_repo,
            container.employees_repo,
            email=getattr(settings, "DEMO_MANAGER_EMAIL", "manager@shiftora.test"),
            password=getattr(settings, "DEMO_MANAGER_PASSWORD", "password123"),
        )
        app.logger.info("demo manager %s", "created" if created else "already present")


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(hours=int(getattr(settings, "SESSION_HOURS", DEFAULT_SESSION_HOURS)))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(
            db_config=db_config,
            default_hourly_rate=float(getattr(settings, "DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE)),
        )
        app.logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())
        _bootstrap(app, settings, container)

    app.extensions["shift_tracker"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        if container.conn is not None:
            try:
                container.conn.ping()
            except mysql.connector.Error as e:
                app.logger.error("health check failed: %s", e)
                return jsonify({"status": "error", "message": str(e)}), 500
        return jsonify({"status": "ok"})

    _register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_shifts(app, container)
    register_tips(app, container)
    register_timeclock(app, container)
    register_payroll(app, container)

    return app
