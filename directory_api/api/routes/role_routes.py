# directory_api/api/routes/role_routes.py

from flask import Blueprint, current_app, request

from directory_api.api.middlewares.error_handler import on_persistence_error
from directory_api.api.schemas.envelope import ok
from directory_api.api.schemas.role_schema import (
    CreateRoleRequest,
    RoleResponse,
    UpdateRoleRequest,
)
from directory_api.entities.user_patch import RolePatch
from directory_api.repositories.role_repository import RoleRepository
from directory_api.services.role_service import RoleService

bp_roles = Blueprint("roles", __name__, url_prefix="/roles")


def _build_service(session) -> RoleService:
    return RoleService(RoleRepository(session))


def _db():
    return current_app.extensions["database"]


@bp_roles.post("")
@on_persistence_error("Error creating role")
def create_role():
    payload = CreateRoleRequest.model_validate(request.get_json(force=True))

    with _db().session() as session:
        created = _build_service(session).create_role(
            name=payload.name,
            description=payload.description,
        )

    return ok("Role created successfully", RoleResponse.from_entity(created), status=201)


@bp_roles.get("")
@on_persistence_error("Error retrieving roles")
def list_roles():
    with _db().session() as session:
        roles = _build_service(session).list_roles()

    return ok(
        "Roles retrieved successfully",
        [RoleResponse.from_entity(r) for r in roles],
        count=len(roles),
    )


@bp_roles.get("/<role_id>")
@on_persistence_error("Error retrieving role")
def get_role(role_id: str):
    with _db().session() as session:
        role = _build_service(session).get_role(role_id=role_id)

    return ok("Role retrieved successfully", RoleResponse.from_entity(role))


@bp_roles.put("/<role_id>")
@on_persistence_error("Error updating role")
def update_role(role_id: str):
    payload = UpdateRoleRequest.model_validate(request.get_json(force=True))

    with _db().session() as session:
        updated = _build_service(session).update_role(
            role_id=role_id,
            patch=RolePatch(**payload.supplied()),
        )

    return ok("Role updated successfully", RoleResponse.from_entity(updated))


@bp_roles.delete("/<role_id>")
@on_persistence_error("Error deleting role")
def delete_role(role_id: str):
    with _db().session() as session:
        deleted = _build_service(session).delete_role(role_id=role_id)

    return ok("Role deleted successfully", RoleResponse.from_entity(deleted))
