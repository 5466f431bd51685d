from flask import Blueprint, current_app, jsonify

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def health():
    return jsonify({"status": "ok"}), 200


@bp_health.get("/db")
def health_db():
    if not current_app.extensions["database"].ping():
        return jsonify({"db": "unavailable"}), 503
    return jsonify({"db": "ok"}), 200
