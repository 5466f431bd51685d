# directory_api/api/routes/__init__.py

from flask import Flask

from directory_api.api.routes.health_routes import bp_health
from directory_api.api.routes.index_routes import bp_index
from directory_api.api.routes.role_routes import bp_roles
from directory_api.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, api_prefix: str = "") -> None:
    app.register_blueprint(bp_index, url_prefix=api_prefix or None)
    app.register_blueprint(bp_health, url_prefix=f"{api_prefix}/health")

    app.register_blueprint(bp_roles, url_prefix=f"{api_prefix}/roles")
    app.register_blueprint(bp_users, url_prefix=f"{api_prefix}/users")
