# directory_api/api/schemas/envelope.py
from typing import Any

from flask import jsonify
from pydantic import BaseModel


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def ok(message: str, data: Any = None, *, status: int = 200, **extra: Any):
    body: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = _dump(data)
    for key, value in extra.items():
        body[key] = _dump(value)
    return jsonify(body), status


def fail(message: str, *, status: int, error: str | None = None):
    body: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return jsonify(body), status
