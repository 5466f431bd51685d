# directory_api/entities/user.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from directory_api.entities.role import Role


@dataclass(frozen=True)
class User:
    """User with its role resolved to the full Role record."""

    id: str
    username: str
    password: str
    email: str
    full_name: str
    avatar_url: str
    role: Role
    status: bool
    login_count: int
    is_deleted: bool
    created_at: datetime
    updated_at: Optional[datetime]

    @classmethod
    def from_model(cls, model) -> "User":
        return cls(
            id=model.id,
            username=model.username,
            password=model.password,
            email=model.email,
            full_name=model.full_name or "",
            avatar_url=model.avatar_url or "",
            role=Role.from_model(model.role),
            status=bool(model.status),
            login_count=int(model.login_count or 0),
            is_deleted=bool(model.is_deleted),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
