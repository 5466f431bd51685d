# directory_api/infrastructure/database/base_model.py
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class BaseModel(DeclarativeBase):
    pass


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
