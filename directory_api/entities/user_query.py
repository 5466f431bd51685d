# directory_api/entities/user_query.py
import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserQuery:
    username: Optional[str] = None
    full_name: Optional[str] = None
    # when present, username/full_name are ignored
    search: Optional[str] = None
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_users: int
    limit: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, *, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_users=total,
            limit=limit,
            has_next=page < total_pages,
            has_prev=page > 1,
        )
