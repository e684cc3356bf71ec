from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.auth import current_role, login_required
from ..common.http import json_body, optional_int
from ..container import Container
from ..core.exceptions import AuthorizationError


def register(app: Flask, container: Container) -> None:
    def _target_employee(raw) -> object:
        """Employees act on their own punches; managers may act for anyone."""
        own = session.get("employee_id")
        target = raw if raw not in (None, "") else own
        if not current_role().can_manage and str(target) != str(own):
            raise AuthorizationError("Employees can only punch for themselves")
        return target

    @app.route("/api/punches", methods=["GET"], endpoint="punches_list")
    @login_required
    def punches_list():
        employee_id = optional_int(request.args.get("employeeId"), "employeeId")
        punches = container.punch_service.list_punches(employee_id=employee_id)
        return jsonify([p.to_dict() for p in punches])

    @app.route("/api/punches/clock-in", methods=["POST"], endpoint="punches_clock_in")
    @login_required
    def punches_clock_in():
        body = json_body()
        at = body.get("time")
        if at not in (None, "") and not current_role().can_manage:
            raise AuthorizationError("Only managers can set a clock-in time")
        punch = container.punch_service.clock_in(_target_employee(body.get("employeeId")), at=at)
        return jsonify(punch.to_dict()), 201

    @app.route("/api/punches/clock-out", methods=["POST"], endpoint="punches_clock_out")
    @login_required
    def punches_clock_out():
        punch = container.punch_service.clock_out(_target_employee(json_body().get("employeeId")))
        return jsonify({"updated": True, "punch": punch.to_dict()})

    @app.route("/api/punches/break-start", methods=["POST"], endpoint="punches_break_start")
    @login_required
    def punches_break_start():
        punch = container.punch_service.start_break(_target_employee(json_body().get("employeeId")))
        return jsonify({"updated": True, "punch": punch.to_dict()})

    @app.route("/api/punches/break-end", methods=["POST"], endpoint="punches_break_end")
    @login_required
    def punches_break_end():
        punch = container.punch_service.end_break(_target_employee(json_body().get("employeeId")))
        return jsonify({"updated": True, "punch": punch.to_dict()})
