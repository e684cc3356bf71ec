from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import current_role, login_required, manager_required
from ..common.http import json_body, optional_date, optional_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    @login_required
    def shifts_list():
        shifts = container.shift_service.list_shifts(
            employee_id=optional_int(request.args.get("employeeId"), "employeeId"),
            start=optional_date(request.args.get("start")),
            end=optional_date(request.args.get("end")),
        )
        return jsonify([s.to_dict() for s in shifts])

    @app.route("/api/shifts", methods=["POST"], endpoint="shifts_create")
    @manager_required
    def shifts_create():
        body = json_body()
        shift = container.shift_service.create(
            current_role=current_role(),
            employee_name=body.get("employee", ""),
            role=body.get("role", ""),
            work_date=optional_date(body.get("date")),
            start_time=body.get("startTime", ""),
            end_time=body.get("endTime", ""),
            employee_id=optional_int(body.get("employeeId"), "employeeId"),
        )
        return jsonify(shift.to_dict()), 201

    @app.route("/api/shifts/<int:shift_id>", methods=["DELETE"], endpoint="shifts_delete")
    @manager_required
    def shifts_delete(shift_id: int):
        container.shift_service.delete(current_role=current_role(), shift_id=shift_id)
        return jsonify({"deleted": True})
