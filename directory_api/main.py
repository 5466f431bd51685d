# directory_api/main.py
from __future__ import annotations

import logging

from flask import Flask
from flask_cors import CORS

from directory_api.api.middlewares.error_handler import register_error_handlers
from directory_api.api.routes import register_routes
from directory_api.config.flask_config import configure_app
from directory_api.config.logging_config import configure_logging
from directory_api.config.settings import Settings, settings as default_settings
from directory_api.infrastructure.database.session import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> Flask:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{settings.api_prefix}/*": {"origins": settings.cors_origin_list}},
        allow_headers=["Content-Type"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    configure_app(app, settings)

    if database is None:
        database = Database(settings.database_url, echo=settings.sql_echo)
    app.extensions["database"] = database

    # a failed connection is only logged; the process keeps running
    if database.configured:
        if database.ping():
            logger.info("Database connected")
            if settings.auto_create_schema:
                database.create_schema()
        else:
            logger.error("Database unreachable at startup")

    register_routes(app, api_prefix=settings.api_prefix)
    register_error_handlers(app)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000)
