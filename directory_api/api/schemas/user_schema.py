# directory_api/api/schemas/user_schema.py
from datetime import datetime

from pydantic import EmailStr, Field, field_serializer, model_validator

from directory_api.api.schemas._base import CamelModel, PatchModel
from directory_api.api.schemas._datetime_serializer import serialize_dt
from directory_api.api.schemas.role_schema import RoleResponse
from directory_api.entities.user import User
from directory_api.entities.user_query import Pagination


class CreateUserRequest(CamelModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)
    email: EmailStr
    full_name: str | None = Field(default=None, max_length=150)
    avatar_url: str | None = Field(default=None, max_length=500)
    role: str = Field(min_length=1, max_length=32)


class UpdateUserRequest(PatchModel):
    username: str | None = Field(default=None, min_length=1, max_length=100)
    password: str | None = Field(default=None, min_length=1, max_length=200)
    email: EmailStr | None = None
    full_name: str | None = Field(default=None, max_length=150)
    avatar_url: str | None = Field(default=None, max_length=500)
    role: str | None = Field(default=None, max_length=32)
    status: bool | None = None
    login_count: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self


class ActivateUserRequest(CamelModel):
    # blanks are rejected by the service with its own message
    email: str | None = None
    username: str | None = None


class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    full_name: str
    avatar_url: str
    role: RoleResponse
    status: bool
    login_count: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime | None = None

    @field_serializer("created_at", "updated_at")
    def serialize_dates(self, value: datetime | None):
        return serialize_dt(value)

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            avatar_url=user.avatar_url,
            role=RoleResponse.from_entity(user.role),
            status=user.status,
            login_count=user.login_count,
            is_deleted=user.is_deleted,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PaginationResponse(CamelModel):
    current_page: int
    total_pages: int
    total_users: int
    limit: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_entity(cls, p: Pagination) -> "PaginationResponse":
        return cls(
            current_page=p.current_page,
            total_pages=p.total_pages,
            total_users=p.total_users,
            limit=p.limit,
            has_next=p.has_next,
            has_prev=p.has_prev,
        )
