# directory_api/services/user_service.py

import logging
from dataclasses import replace

from directory_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from directory_api.entities.user import User
from directory_api.entities.user_patch import UserPatch
from directory_api.entities.user_query import Pagination, UserQuery
from directory_api.infrastructure.database.models.user_model import UserModel
from directory_api.repositories.user_repository import UserRepository
from directory_api.services.role_service import RoleService

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
ROLE_NOT_FOUND = "Role not found"
# largest offset a signed 64-bit column accepts
MAX_OFFSET = 2**63 - 1

# patch field -> model column
_PATCH_COLUMNS = {
    "username": "username",
    "password": "password",
    "email": "email",
    "full_name": "full_name",
    "avatar_url": "avatar_url",
    "role": "role_id",
    "status": "status",
    "login_count": "login_count",
}


class UserService:
    def __init__(
        self,
        user_repository: UserRepository,
        role_service: RoleService,
        *,
        max_page_size: int = 100,
    ) -> None:
        self._user_repository = user_repository
        self._role_service = role_service
        self._max_page_size = max_page_size

    def create_user(
        self,
        *,
        username: str,
        password: str,
        email: str,
        role: str,
        full_name: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        # check and write are not atomic: the role may be deleted in between
        if not self._role_service.role_exists(role):
            logger.info("Rejected user %s: role %s not found", username, role)
            raise ValidationError(ROLE_NOT_FOUND)

        model = UserModel(
            username=username,
            password=password,
            email=email,
            full_name=full_name or "",
            avatar_url=avatar_url or "",
            role_id=role,
            status=False,
            login_count=0,
            is_deleted=False,
        )
        try:
            self._user_repository.add(model)
        except ConflictError as err:
            logger.info("User conflict on create: field=%s", err.field)
            raise

        logger.info("User created: id=%s username=%s", model.id, model.username)
        return self._get_populated(model.id)

    def list_users(self, query: UserQuery) -> tuple[list[User], Pagination]:
        if query.page < 1:
            raise ValidationError("page must be a positive integer")
        if query.limit < 1:
            raise ValidationError("limit must be a positive integer")

        if query.limit > self._max_page_size:
            query = replace(query, limit=self._max_page_size)
        if query.offset > MAX_OFFSET:
            raise ValidationError("page is out of range")

        users, total = self._user_repository.search(query)
        pagination = Pagination.build(page=query.page, limit=query.limit, total=total)
        return [User.from_model(u) for u in users], pagination

    def get_user(self, *, user_id: str) -> User:
        return self._get_populated(user_id)

    def get_user_by_username(self, *, username: str) -> User:
        user = self._user_repository.get_by_username(username)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return User.from_model(user)

    def update_user(self, *, user_id: str, patch: UserPatch) -> User:
        if patch.has("role") and not self._role_service.role_exists(patch.role):
            logger.info("Rejected update of user %s: role %s not found", user_id, patch.role)
            raise ValidationError(ROLE_NOT_FOUND)

        supplied = patch.supplied()
        values = {_PATCH_COLUMNS[k]: v for k, v in supplied.items()}
        for optional_text in ("full_name", "avatar_url"):
            if optional_text in values:
                values[optional_text] = values[optional_text] or ""

        updated = self._user_repository.update(user_id, values)
        if updated is None:
            raise NotFoundError(USER_NOT_FOUND)

        logger.info("User updated: id=%s fields=%s", user_id, sorted(supplied))
        return User.from_model(updated)

    def delete_user(self, *, user_id: str) -> User:
        deleted = self._user_repository.soft_delete(user_id)
        if deleted is None:
            raise NotFoundError(USER_NOT_FOUND)

        logger.info("User soft-deleted: id=%s", user_id)
        return User.from_model(deleted)

    def activate_user(self, *, email: str | None, username: str | None) -> User:
        if not email or not username:
            raise ValidationError("Email and username are required")

        user = self._user_repository.get_by_email_and_username(email=email, username=username)
        if user is None:
            raise NotFoundError("User not found with provided email and username")

        activated = self._user_repository.update(user.id, {"status": True})
        if activated is None:
            raise NotFoundError(USER_NOT_FOUND)

        logger.info("User activated: id=%s", user.id)
        return User.from_model(activated)

    def _get_populated(self, user_id: str) -> User:
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        return User.from_model(user)
