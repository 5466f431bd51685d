# directory_api/api/routes/index_routes.py

from flask import Blueprint, jsonify

from directory_api import __version__

bp_index = Blueprint("index", __name__)


@bp_index.get("/")
def index():
    return jsonify(
        {
            "message": "Welcome to the Directory API",
            "version": __version__,
            "endpoints": {
                "users": "/users",
                "roles": "/roles",
            },
        }
    ), 200
