# directory_api/core/sentinels.py
from typing import Final


class _Unset:
    """Marks a field that was not supplied (distinct from None / "" / False)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()
