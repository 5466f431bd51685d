# directory_api/api/schemas/role_schema.py

from datetime import datetime

from pydantic import Field, field_serializer, model_validator

from directory_api.api.schemas._base import CamelModel, PatchModel
from directory_api.api.schemas._datetime_serializer import serialize_dt
from directory_api.entities.role import Role


class CreateRoleRequest(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)


class UpdateRoleRequest(PatchModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def name_not_null(self):
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name cannot be null")
        return self


class RoleResponse(CamelModel):
    id: str
    name: str
    description: str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime | None = None

    @field_serializer("created_at", "updated_at")
    def serialize_dates(self, value: datetime | None):
        return serialize_dt(value)

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            is_deleted=role.is_deleted,
            created_at=role.created_at,
            updated_at=role.updated_at,
        )
