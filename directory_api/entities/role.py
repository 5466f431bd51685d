# directory_api/entities/role.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Role:
    id: str
    name: str
    description: str
    is_deleted: bool
    created_at: datetime
    updated_at: Optional[datetime]

    @classmethod
    def from_model(cls, model) -> "Role":
        return cls(
            id=model.id,
            name=model.name,
            description=model.description or "",
            is_deleted=bool(model.is_deleted),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
