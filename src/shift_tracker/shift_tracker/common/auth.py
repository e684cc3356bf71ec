from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def current_role() -> Role:
    return Role(session.get("role", Role.EMPLOYEE.value))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Login required"}), 401
        return view(*args, **kwargs)

    return wrapper


def manager_required(view):
    """Allow admin and manager roles only."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Login required"}), 401
        if not current_role().can_manage:
            return jsonify({"success": False, "message": "Forbidden"}), 403
        return view(*args, **kwargs)

    return wrapper
