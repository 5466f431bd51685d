"""
Shared fixtures: an app wired to a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from directory_api.config.settings import Settings
from directory_api.infrastructure.database.session import Database
from directory_api.main import create_app
from directory_api.repositories.role_repository import RoleRepository
from directory_api.repositories.user_repository import UserRepository
from directory_api.services.role_service import RoleService
from directory_api.services.user_service import UserService


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        debug=False,
        log_level="WARNING",
        default_page_size=10,
        max_page_size=50,
    )


@pytest.fixture()
def database(settings):
    db = Database(settings.database_url)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture()
def app(settings, database):
    app = create_app(settings, database)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def services(database):
    """Run a callable against fresh services inside one committed session."""

    def run(fn):
        with database.session() as session:
            roles = RoleService(RoleRepository(session))
            users = UserService(UserRepository(session), roles, max_page_size=50)
            return fn(roles, users)

    return run


@pytest.fixture()
def make_role(client):
    def _make(name: str = "member", description: str | None = None) -> dict:
        body = {"name": name}
        if description is not None:
            body["description"] = description
        resp = client.post("/roles", json=body)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make


@pytest.fixture()
def make_user(client):
    def _make(username: str, role_id: str, **extra) -> dict:
        body = {
            "username": username,
            "password": "secret",
            "email": extra.pop("email", f"{username}@acme.io"),
            "role": role_id,
        }
        body.update(extra)
        resp = client.post("/users", json=body)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make
