"""SQLAlchemy storage backend."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from pydantic import BaseModel
from sqlalchemy import Engine, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from proedit.core.database import create_all_tables, create_db_engine, create_session_factory
from proedit.core.errors import StorageError
from proedit.models import AssetRow, ClipRow, ExportJobRow, ProjectRow, TrackRow
from proedit.store.kinds import ENTITY_TYPES, EntityKind

from .base import Backend, Transaction

logger = logging.getLogger(__name__)

ROW_TYPES = {
    EntityKind.PROJECT: ProjectRow,
    EntityKind.ASSET: AssetRow,
    EntityKind.TRACK: TrackRow,
    EntityKind.CLIP: ClipRow,
    EntityKind.EXPORT_JOB: ExportJobRow,
}


class SqlTransaction(Transaction):
    """Transaction backed by one SQLAlchemy session.

    Every write is flushed immediately so later reads in the same unit of
    work see it; nothing is visible to other sessions before commit.
    """

    def __init__(self, session: Session):
        self._session = session

    def _to_entity(self, kind: EntityKind, row) -> BaseModel:
        return ENTITY_TYPES[kind].model_validate(row)

    def get(self, kind: EntityKind, entity_id: str) -> Optional[BaseModel]:
        row = self._session.get(ROW_TYPES[kind], entity_id)
        return self._to_entity(kind, row) if row is not None else None

    def scan(
        self,
        kind: EntityKind,
        field: Optional[str] = None,
        value: Any = None,
    ) -> list[BaseModel]:
        row_type = ROW_TYPES[kind]
        query = select(row_type).order_by(row_type.seq)
        if field is not None:
            column = getattr(row_type, field)
            query = query.where(column.is_(None) if value is None else column == value)
        rows = self._session.scalars(query).all()
        return [self._to_entity(kind, row) for row in rows]

    def insert(self, kind: EntityKind, entity: BaseModel) -> None:
        row_type = ROW_TYPES[kind]
        last_seq = self._session.scalar(select(func.coalesce(func.max(row_type.seq), 0)))
        self._session.add(row_type(seq=last_seq + 1, **entity.model_dump()))
        self._session.flush()

    def replace(self, kind: EntityKind, entity: BaseModel) -> None:
        row = self._session.get(ROW_TYPES[kind], entity.id)
        if row is None:
            raise KeyError(f"{kind.value} {entity.id} does not exist")
        for field, value in entity.model_dump(exclude={"id"}).items():
            setattr(row, field, value)
        self._session.flush()

    def remove(self, kind: EntityKind, entity_id: str) -> bool:
        row = self._session.get(ROW_TYPES[kind], entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True


class SqlBackend(Backend):
    """Backend storing the five entity tables in a relational database.

    Each store transaction maps to one database transaction, so a cascade
    either commits completely or is rolled back.
    """

    name = "sql"

    def __init__(self, engine: Engine, create_tables: bool = True):
        super().__init__()
        self.engine = engine
        self._session_factory = create_session_factory(engine)
        if create_tables:
            try:
                create_all_tables(engine)
            except SQLAlchemyError as e:
                raise StorageError(f"Failed to create tables: {e}", operation="create_tables") from e

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SqlBackend":
        """Build a backend for ``database_url``, creating tables if needed."""
        return cls(create_db_engine(database_url, echo=echo))

    @contextmanager
    def _transaction(self) -> Iterator[SqlTransaction]:
        session = self._session_factory()
        try:
            yield SqlTransaction(session)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database transaction failed: {e}")
            raise StorageError(f"Database error: {e}", operation="transaction") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def check_health(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StorageError(f"Database unreachable: {e}", operation="health") from e

    def close(self) -> None:
        self.engine.dispose()
