# directory_api/services/role_service.py

import logging

from directory_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from directory_api.entities.role import Role
from directory_api.entities.user_patch import RolePatch
from directory_api.infrastructure.database.models.role_model import RoleModel
from directory_api.repositories.role_repository import RoleRepository

logger = logging.getLogger(__name__)

ROLE_NOT_FOUND = "Role not found"
ROLE_NAME_TAKEN = "Role name already exists"


class RoleService:
    def __init__(self, role_repository: RoleRepository) -> None:
        self._role_repository = role_repository

    def create_role(self, *, name: str, description: str | None = None) -> Role:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Role name is required")

        model = RoleModel(name=name, description=description or "", is_deleted=False)
        try:
            self._role_repository.add(model)
        except ConflictError as err:
            logger.info("Role name conflict: %s", name)
            raise ConflictError(ROLE_NAME_TAKEN, field="name") from err

        logger.info("Role created: id=%s name=%s", model.id, model.name)
        return Role.from_model(model)

    def list_roles(self) -> list[Role]:
        return [Role.from_model(r) for r in self._role_repository.list_active()]

    def get_role(self, *, role_id: str) -> Role:
        role = self._role_repository.get_by_id(role_id)
        if role is None:
            raise NotFoundError(ROLE_NOT_FOUND)
        return Role.from_model(role)

    def update_role(self, *, role_id: str, patch: RolePatch) -> Role:
        values = patch.supplied()

        if "name" in values:
            name = (values["name"] or "").strip()
            if not name:
                raise ValidationError("Role name is required")
            values["name"] = name
        if "description" in values:
            values["description"] = values["description"] or ""

        try:
            updated = self._role_repository.update(role_id, values)
        except ConflictError as err:
            logger.info("Role name conflict on update: id=%s", role_id)
            raise ConflictError(ROLE_NAME_TAKEN, field="name") from err

        if updated is None:
            raise NotFoundError(ROLE_NOT_FOUND)

        logger.info("Role updated: id=%s fields=%s", role_id, sorted(values))
        return Role.from_model(updated)

    def delete_role(self, *, role_id: str) -> Role:
        deleted = self._role_repository.soft_delete(role_id)
        if deleted is None:
            raise NotFoundError(ROLE_NOT_FOUND)

        logger.info("Role soft-deleted: id=%s", role_id)
        return Role.from_model(deleted)

    def role_exists(self, role_id: str | None) -> bool:
        return self._role_repository.exists(role_id)
