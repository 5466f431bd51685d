# directory_api/repositories/user_repository.py

from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from directory_api.core.base_repository import BaseRepository
from directory_api.entities.user_query import UserQuery
from directory_api.infrastructure.database.base_model import utcnow
from directory_api.infrastructure.database.models.user_model import UserModel


def _contains(value: str) -> str:
    # literal match: user-typed %, _ and \ are not wildcards
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class UserRepository(BaseRepository[UserModel]):
    table_name = UserModel.__tablename__
    unique_fields = ("username", "email")

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def add(self, model: UserModel) -> UserModel:
        self._session.add(model)
        self._flush()
        return model

    def get_by_id(self, user_id: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id, UserModel.is_deleted.is_(False))
        return self._session.execute(stmt).scalar_one_or_none()

    def get_by_username(self, username: str) -> UserModel | None:
        stmt = select(UserModel).where(
            UserModel.username == username,
            UserModel.is_deleted.is_(False),
        )
        return self._session.execute(stmt).scalar_one_or_none()

    def get_by_email_and_username(self, *, email: str, username: str) -> UserModel | None:
        stmt = select(UserModel).where(
            UserModel.email == email,
            UserModel.username == username,
            UserModel.is_deleted.is_(False),
        )
        return self._session.execute(stmt).scalar_one_or_none()

    def search(self, query: UserQuery) -> tuple[list[UserModel], int]:
        base = select(UserModel).where(UserModel.is_deleted.is_(False))

        if query.search:
            pattern = _contains(query.search)
            base = base.where(
                or_(
                    UserModel.username.ilike(pattern, escape="\\"),
                    UserModel.full_name.ilike(pattern, escape="\\"),
                )
            )
        else:
            if query.username:
                base = base.where(UserModel.username.ilike(_contains(query.username), escape="\\"))
            if query.full_name:
                base = base.where(UserModel.full_name.ilike(_contains(query.full_name), escape="\\"))

        # total before paging
        total_stmt = select(func.count()).select_from(base.subquery())
        total = int(self._session.execute(total_stmt).scalar_one())

        page = (
            base.order_by(UserModel.created_at.desc())
            .limit(query.limit)
            .offset(query.offset)
        )
        users = list(self._session.execute(page).scalars().unique().all())
        return users, total

    def update(self, user_id: str, values: dict[str, Any]) -> UserModel | None:
        user = self.get_by_id(user_id)
        if user is None:
            return None

        for key, value in values.items():
            setattr(user, key, value)
        user.updated_at = utcnow()

        self._flush()
        if "role_id" in values:
            # reload the populated role on next access
            self._session.expire(user, ["role"])
        return user

    def soft_delete(self, user_id: str) -> UserModel | None:
        return self.update(user_id, {"is_deleted": True})
