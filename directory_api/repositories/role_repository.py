# directory_api/repositories/role_repository.py

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from directory_api.core.base_repository import BaseRepository
from directory_api.infrastructure.database.base_model import utcnow
from directory_api.infrastructure.database.models.role_model import RoleModel


class RoleRepository(BaseRepository[RoleModel]):
    table_name = RoleModel.__tablename__
    unique_fields = ("name",)

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def add(self, model: RoleModel) -> RoleModel:
        self._session.add(model)
        self._flush()
        return model

    def get_by_id(self, role_id: str) -> RoleModel | None:
        stmt = select(RoleModel).where(RoleModel.id == role_id, RoleModel.is_deleted.is_(False))
        return self._session.execute(stmt).scalar_one_or_none()

    def exists(self, role_id: str | None) -> bool:
        if not role_id:
            return False
        stmt = select(RoleModel.id).where(RoleModel.id == role_id, RoleModel.is_deleted.is_(False))
        return self._session.execute(stmt).first() is not None

    def list_active(self) -> list[RoleModel]:
        stmt = (
            select(RoleModel)
            .where(RoleModel.is_deleted.is_(False))
            .order_by(RoleModel.created_at.desc())
        )
        return list(self._session.execute(stmt).scalars().all())

    def update(self, role_id: str, values: dict[str, Any]) -> RoleModel | None:
        role = self.get_by_id(role_id)
        if role is None:
            return None

        for key, value in values.items():
            setattr(role, key, value)
        role.updated_at = utcnow()

        self._flush()
        return role

    def soft_delete(self, role_id: str) -> RoleModel | None:
        return self.update(role_id, {"is_deleted": True})
