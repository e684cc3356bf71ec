from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import current_role, login_required, manager_required
from ..common.http import json_body, optional_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tips", methods=["GET"], endpoint="tips_list")
    @login_required
    def tips_list():
        tips = container.tip_service.list_tips(tip_date=optional_date(request.args.get("date")))
        return jsonify([t.to_dict() for t in tips])

    @app.route("/api/tips", methods=["POST"], endpoint="tips_create")
    @manager_required
    def tips_create():
        body = json_body()
        tip = container.tip_service.record(
            current_role=current_role(),
            amount=body.get("amount"),
            tip_date=optional_date(body.get("date")),
            notes=body.get("notes"),
        )
        return jsonify(tip.to_dict()), 201
