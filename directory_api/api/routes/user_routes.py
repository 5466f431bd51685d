# directory_api/api/routes/user_routes.py

from __future__ import annotations

from flask import Blueprint, current_app, request

from directory_api.api.middlewares.error_handler import on_persistence_error
from directory_api.api.schemas.envelope import ok
from directory_api.api.schemas.user_schema import (
    ActivateUserRequest,
    CreateUserRequest,
    PaginationResponse,
    UpdateUserRequest,
    UserResponse,
)
from directory_api.core.exceptions import ValidationError
from directory_api.entities.user_patch import UserPatch
from directory_api.entities.user_query import UserQuery
from directory_api.repositories.role_repository import RoleRepository
from directory_api.repositories.user_repository import UserRepository
from directory_api.services.role_service import RoleService
from directory_api.services.user_service import UserService

bp_users = Blueprint("users", __name__, url_prefix="/users")


# -------------------------
# Helpers
# -------------------------

def _settings():
    return current_app.config["SETTINGS"]


def _build_service(session) -> UserService:
    return UserService(
        UserRepository(session),
        RoleService(RoleRepository(session)),
        max_page_size=_settings().max_page_size,
    )


def _db():
    return current_app.extensions["database"]


def _text_arg(name: str) -> str | None:
    return (request.args.get(name) or "").strip() or None


def _int_arg(name: str, default: int) -> int:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a positive integer") from None


# -------------------------
# Routes
# -------------------------

@bp_users.post("")
@on_persistence_error("Error creating user")
def create_user():
    payload = CreateUserRequest.model_validate(request.get_json(force=True))

    with _db().session() as session:
        created = _build_service(session).create_user(**payload.model_dump())

    return ok("User created successfully", UserResponse.from_entity(created), status=201)


@bp_users.get("")
@on_persistence_error("Error retrieving users")
def list_users():
    query = UserQuery(
        username=_text_arg("username"),
        full_name=_text_arg("fullName"),
        search=_text_arg("search"),
        page=_int_arg("page", 1),
        limit=_int_arg("limit", _settings().default_page_size),
    )

    with _db().session() as session:
        users, pagination = _build_service(session).list_users(query)

    return ok(
        "Users retrieved successfully",
        [UserResponse.from_entity(u) for u in users],
        pagination=PaginationResponse.from_entity(pagination),
    )


@bp_users.get("/username/<username>")
@on_persistence_error("Error retrieving user")
def get_user_by_username(username: str):
    with _db().session() as session:
        user = _build_service(session).get_user_by_username(username=username)

    return ok("User retrieved successfully", UserResponse.from_entity(user))


@bp_users.post("/activate")
@on_persistence_error("Error activating user")
def activate_user():
    payload = ActivateUserRequest.model_validate(request.get_json(force=True) or {})

    with _db().session() as session:
        user = _build_service(session).activate_user(
            email=payload.email,
            username=payload.username,
        )

    return ok("User activated successfully", UserResponse.from_entity(user))


@bp_users.get("/<user_id>")
@on_persistence_error("Error retrieving user")
def get_user(user_id: str):
    with _db().session() as session:
        user = _build_service(session).get_user(user_id=user_id)

    return ok("User retrieved successfully", UserResponse.from_entity(user))


@bp_users.put("/<user_id>")
@on_persistence_error("Error updating user")
def update_user(user_id: str):
    payload = UpdateUserRequest.model_validate(request.get_json(force=True))

    with _db().session() as session:
        updated = _build_service(session).update_user(
            user_id=user_id,
            patch=UserPatch.from_mapping(payload.supplied()),
        )

    return ok("User updated successfully", UserResponse.from_entity(updated))


@bp_users.delete("/<user_id>")
@on_persistence_error("Error deleting user")
def delete_user(user_id: str):
    with _db().session() as session:
        deleted = _build_service(session).delete_user(user_id=user_id)

    return ok("User deleted successfully", UserResponse.from_entity(deleted))
