# directory_api/entities/user_patch.py
from dataclasses import dataclass, fields
from typing import Any

from directory_api.core.sentinels import UNSET


@dataclass(frozen=True)
class UserPatch:
    """Partial update: only fields that are not UNSET are applied."""

    username: Any = UNSET
    password: Any = UNSET
    email: Any = UNSET
    full_name: Any = UNSET
    avatar_url: Any = UNSET
    role: Any = UNSET
    status: Any = UNSET
    login_count: Any = UNSET

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "UserPatch":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def supplied(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def has(self, name: str) -> bool:
        return getattr(self, name) is not UNSET


@dataclass(frozen=True)
class RolePatch:
    name: Any = UNSET
    description: Any = UNSET

    def supplied(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
