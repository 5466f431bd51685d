# directory_api/infrastructure/database/models/role_model.py

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from directory_api.infrastructure.database.base_model import BaseModel, new_id, utcnow


class RoleModel(BaseModel):
    __tablename__ = "tbRoles"
    __table_args__ = (
        # name is unique among live roles only
        Index(
            "uq_tbRoles_name_live",
            "name",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=True)
