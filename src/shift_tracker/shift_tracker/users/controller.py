from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.auth import login_required
from ..common.http import json_body
from ..container import Container
from .service import SessionUser


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user: SessionUser) -> None:
        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        session["employee_id"] = s_user.employee_id

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        body = json_body()
        s_user = container.auth_service.register(
            name=body.get("name", ""),
            email=body.get("email", ""),
            password=body.get("password", ""),
            role=body.get("role") or "employee",
            hourly_rate=body.get("hourlyRate"),
        )
        _start_session(s_user)
        return jsonify(s_user.to_dict()), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        body = json_body()
        s_user = container.auth_service.authenticate(body.get("email", ""), body.get("password", ""))
        _start_session(s_user)
        return jsonify(s_user.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    @login_required
    def auth_logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @login_required
    def auth_me():
        return jsonify(
            {
                "id": session["user_id"],
                "name": session.get("name"),
                "role": session.get("role"),
                "employeeId": session.get("employee_id"),
            }
        )
