from __future__ import annotations

from flask import Flask, jsonify

from ..common.auth import current_role, login_required, manager_required
from ..common.http import json_body
from ..container import Container

# JSON field -> service field
_FIELDS = {
    "name": "name",
    "email": "email",
    "role": "role",
    "department": "department",
    "level": "level",
    "hourlyRate": "hourly_rate",
    "status": "status",
    "joinDate": "join_date",
}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def employees_list():
        return jsonify([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @manager_required
    def employees_create():
        body = json_body()
        fields = {_FIELDS[k]: v for k, v in body.items() if k in _FIELDS}
        fields.setdefault("name", "")
        employee = container.employee_service.create(current_role=current_role(), **fields)
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PATCH"], endpoint="employees_update")
    @manager_required
    def employees_update(employee_id: int):
        body = json_body()
        changes = {_FIELDS.get(k, k): v for k, v in body.items()}
        employee = container.employee_service.update(
            current_role=current_role(),
            employee_id=employee_id,
            changes=changes,
        )
        return jsonify({"updated": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @manager_required
    def employees_delete(employee_id: int):
        container.employee_service.delete(current_role=current_role(), employee_id=employee_id)
        return jsonify({"deleted": True})
