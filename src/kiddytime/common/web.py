"""Small helpers shared by the JSON controllers."""

from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import AuthenticationError, DomainError, NotFoundError, StorageError, ValidationError

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (StorageError, 500),
)


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def domain_error_response(error: DomainError):
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(error, cls):
            return json_error(str(error), status)
    return json_error(str(error), 400)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("user_id"):
            return json_error("Non authentifié", 401)
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Corps JSON invalide")
    return data
