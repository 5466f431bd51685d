# directory_api/infrastructure/database/models/user_model.py

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from directory_api.infrastructure.database.base_model import BaseModel, new_id, utcnow
from directory_api.infrastructure.database.models.role_model import RoleModel


class UserModel(BaseModel):
    __tablename__ = "tbUsers"
    __table_args__ = (
        Index(
            "uq_tbUsers_username_live",
            "username",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
        Index(
            "uq_tbUsers_email_live",
            "email",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
        Index("ix_tbUsers_created_at", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)

    username: Mapped[str] = mapped_column(String(100), nullable=False)
    # stored as received; hashing happens outside this service
    password: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(150), nullable=False)

    full_name: Mapped[str] = mapped_column(String(150), nullable=False, default="")
    avatar_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    role_id: Mapped[str] = mapped_column(
        String(32), ForeignKey("tbRoles.id"), nullable=False
    )
    role: Mapped[RoleModel] = relationship(RoleModel, lazy="joined")

    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    login_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=True)
