import logging
import re
from typing import ClassVar, Generic, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from directory_api.core.exceptions import ConflictError, PersistenceError

TModel = TypeVar("TModel")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[TModel]):
    table_name: ClassVar[str] = ""
    # columns with a unique index over live rows
    unique_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, session: Session) -> None:
        self._session = session

    def _flush(self) -> None:
        """Flush pending writes, turning unique-index violations into ConflictError."""
        try:
            self._session.flush()
        except IntegrityError as err:
            field = self._conflicting_field(err)
            if field is None:
                logger.error("Integrity error not mapped to a unique field: %s", err.orig)
                raise PersistenceError("Integrity violation", detail=str(err.orig)) from err
            raise ConflictError(field=field) from err

    def _conflicting_field(self, err: IntegrityError) -> str | None:
        constraint = getattr(getattr(err.orig, "diag", None), "constraint_name", None)
        if constraint is None:
            # postgres: ... unique constraint "uq_tbUsers_email_live"; sqlite: UNIQUE constraint failed: tbUsers.email
            # only the first line is read, DETAIL carries the submitted value
            headline = str(err.orig).splitlines()[0] if str(err.orig) else ""
            quoted = re.search(r'unique constraint "([^"]+)"', headline)
            if quoted:
                constraint = quoted.group(1)
            else:
                failed = re.search(r"UNIQUE constraint failed: (.+)$", headline)
                if failed:
                    columns = [c.strip() for c in failed.group(1).split(",")]
                    for field in self.unique_fields:
                        if f"{self.table_name}.{field}" in columns:
                            return field
                return None

        for field in self.unique_fields:
            if constraint == f"uq_{self.table_name}_{field}_live":
                return field
        return None
