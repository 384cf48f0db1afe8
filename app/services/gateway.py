"""
Generic record gateway.

One `RecordGateway` per table, configured by an `Entity` descriptor. Every
operation is a single parameterized statement on its own pooled connection;
store errors are classified into DuplicateKeyError / NotFoundException /
StoreFailureError before they leave this module.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.config import settings
from app.core.database import Store
from app.core.exceptions import DuplicateKeyError, NotFoundException, StoreFailureError
from app.services.identifiers import generate_id

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

MYSQL_DUP_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"


def is_duplicate_key(exc: IntegrityError) -> bool:
    """True when the driver reports a unique / primary key violation."""
    orig = exc.orig
    if getattr(orig, "pgcode", None) == POSTGRES_UNIQUE_VIOLATION:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUP_ENTRY:
        return True
    return "UNIQUE constraint failed" in str(orig)


@dataclass(frozen=True)
class Entity:
    """
    Describes how one table is read and written.

    - **editable**: columns an update may write
    - **order_by**: column for listing, store order when None
    - **id_prefix**: generate "<prefix>NNNN" keys instead of auto-increment
    - **derive**: hook computing default fields before insert
    - **coerce**: hook converting request values to column types before
      insert and update; raises TypeError / ValueError on malformed input
    - **partial_update**: write only the editable fields given, instead of
      overwriting all of them
    """
    model: Any
    label: str
    editable: Tuple[str, ...]
    key: str = "id"
    order_by: Optional[str] = None
    id_prefix: Optional[str] = None
    derive: Optional[Callable[[Row], Row]] = None
    coerce: Optional[Callable[[Row], Row]] = None
    partial_update: bool = False

    @property
    def table(self):
        return self.model.__table__


class RecordGateway:
    def __init__(self, store: Store, entity: Entity, max_id_attempts: int = settings.MAX_ID_ATTEMPTS):
        self.store = store
        self.entity = entity
        self.table = entity.table
        self.max_id_attempts = max_id_attempts

    @property
    def columns(self):
        return self.table.c

    @property
    def key_column(self):
        return self.table.c[self.entity.key]

    # -------------------------------------------------------------------------
    # READ
    # -------------------------------------------------------------------------

    def get_all(self) -> List[Row]:
        stmt = select(self.table)
        if self.entity.order_by:
            stmt = stmt.order_by(self.table.c[self.entity.order_by])
        try:
            with self.store.connect() as connection:
                return [dict(row._mapping) for row in connection.execute(stmt)]
        except SQLAlchemyError as e:
            raise self._failure("list", e) from e

    def get(self, key: Any) -> Row:
        row = self.find_first(self.key_column == key)
        if row is None:
            raise NotFoundException(f"{self.entity.label} not found")
        return row

    def find_first(self, *criteria) -> Optional[Row]:
        stmt = select(self.table).where(and_(*criteria))
        try:
            with self.store.connect() as connection:
                row = connection.execute(stmt).first()
        except SQLAlchemyError as e:
            raise self._failure("read", e) from e
        return dict(row._mapping) if row is not None else None

    # -------------------------------------------------------------------------
    # WRITE
    # -------------------------------------------------------------------------

    def create(self, fields: Row) -> Any:
        """Insert a row, returning its key (generated or store-assigned)."""
        if self.entity.derive:
            fields = self.entity.derive(fields)
        values = self._coerce({name: value for name, value in fields.items() if name in self.table.c})

        if not self.entity.id_prefix:
            return self._insert(values)

        for attempt in range(1, self.max_id_attempts + 1):
            key = generate_id(self.entity.id_prefix)
            try:
                self._insert({**values, self.entity.key: key})
                return key
            except DuplicateKeyError:
                # Same key already stored: draw again. Otherwise another
                # unique column (email) clashed.
                if not self._key_exists(key):
                    raise
                logger.warning(
                    f"{self.table.name}: generated id {key} already taken "
                    f"(attempt {attempt}/{self.max_id_attempts})"
                )

        logger.error(f"{self.table.name}: no free id after {self.max_id_attempts} attempts")
        raise StoreFailureError()

    def update(self, key: Any, fields: Row) -> None:
        """Runs even when no row has this key."""
        if self.entity.partial_update:
            values = {name: fields[name] for name in self.entity.editable if name in fields}
        else:
            values = {name: fields.get(name) for name in self.entity.editable}
        if not values:
            return
        values = self._coerce(values)

        stmt = update(self.table).where(self.key_column == key).values(**values)
        try:
            with self.store.begin() as connection:
                connection.execute(stmt)
        except SQLAlchemyError as e:
            raise self._failure("update", e) from e

    def delete(self, key: Any) -> None:
        """Runs even when no row has this key."""
        stmt = delete(self.table).where(self.key_column == key)
        try:
            with self.store.begin() as connection:
                connection.execute(stmt)
        except SQLAlchemyError as e:
            raise self._failure("delete", e) from e

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def _insert(self, values: Row) -> Any:
        stmt = insert(self.table).values(**values)
        try:
            with self.store.begin() as connection:
                result = connection.execute(stmt)
                return result.inserted_primary_key[0]
        except IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateKeyError() from e
            raise self._failure("insert", e) from e
        except SQLAlchemyError as e:
            raise self._failure("insert", e) from e

    def _coerce(self, values: Row) -> Row:
        if not self.entity.coerce:
            return values
        try:
            return self.entity.coerce(values)
        except (TypeError, ValueError) as e:
            raise self._failure("convert", e) from e

    def _key_exists(self, key: Any) -> bool:
        return self.find_first(self.key_column == key) is not None

    def _failure(self, action: str, exc: Exception) -> StoreFailureError:
        logger.error(f"{self.table.name}: {action} failed: {exc}")
        return StoreFailureError()
