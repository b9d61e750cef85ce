"""Shared plumbing for the per-entity storage adapters.

Each adapter builds its own statements; this base executes them and maps
database failures onto the error kinds:

* no row            -> NotFoundError
* foreign key       -> BadRequestError (message supplied by the adapter)
* unique constraint -> BadRequestError by default (message supplied by the adapter)
* anything else     -> InternalError
"""

from __future__ import annotations

import uuid
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from arcade.core.errors import ArcadeError, BadRequestError, InternalError, NotFoundError
from arcade.core.logging import get_logger
from arcade.db.drivers import Driver

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")
EntityT = TypeVar("EntityT")


class BaseStorage(Generic[ModelT, EntityT]):
    """Generic storage adapter for one table.

    Type Parameters:
        ModelT: the ORM model of the table
        EntityT: the domain type returned to callers
    """

    model: Type[ModelT]
    entity_name: str

    def __init__(self, db: Session, driver: Driver) -> None:
        self._db = db
        self._driver = driver

    def to_entity(self, row: ModelT) -> EntityT:
        raise NotImplementedError

    # === Read ===

    def _order(self, stmt: Select) -> Select:
        return stmt.order_by(self.model.created, self.model.id)

    @staticmethod
    def _paginate(stmt: Select, offset: int, limit: int) -> Select:
        if limit > 0:
            stmt = stmt.limit(limit)
        if offset > 0:
            stmt = stmt.offset(offset)
        return stmt

    def _fetch_all(self, stmt: Select, fail_msg: str) -> list[EntityT]:
        try:
            rows = self._db.scalars(stmt.execution_options(populate_existing=True)).all()
            return [self.to_entity(row) for row in rows]
        except SQLAlchemyError as err:
            logger.error("%s: %s", fail_msg, err)
            raise InternalError(f"{fail_msg}: {_cause(err)}") from err

    def _fetch_one(self, entity_id: uuid.UUID, fail_msg: str) -> EntityT:
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        try:
            row = self._db.scalars(stmt).one_or_none()
        except SQLAlchemyError as err:
            logger.error("%s: %s", fail_msg, err)
            raise InternalError(f"{fail_msg}: {_cause(err)}") from err
        if row is None:
            raise NotFoundError(f"{fail_msg}: {self.entity_name} '{entity_id}' not found")
        return self.to_entity(row)

    # === Write ===

    def _write(
        self,
        stmt: Any,
        fail_msg: str,
        foreign_key_msg: str,
        unique_msg: str,
        entity_id: Optional[uuid.UUID] = None,
        unique_error: Callable[[str], ArcadeError] = BadRequestError,
    ) -> EntityT:
        """Run an INSERT/UPDATE ... RETURNING statement and commit.

        A missing row is only possible for updates, so ``entity_id`` names
        the row in the not-found message.
        """
        try:
            row = self._db.scalars(stmt).one_or_none()
            if row is None:
                self._db.rollback()
                raise NotFoundError(f"{fail_msg}: {self.entity_name} '{entity_id}' not found")
            entity = self.to_entity(row)
            self._db.commit()
        except IntegrityError as err:
            self._db.rollback()
            if self._driver.is_foreign_key_violation(err.orig):
                raise BadRequestError(f"{fail_msg}: {foreign_key_msg}") from err
            if self._driver.is_unique_violation(err.orig):
                raise unique_error(f"{fail_msg}: {unique_msg}") from err
            logger.error("%s: %s", fail_msg, err)
            raise InternalError(f"{fail_msg}: {_cause(err)}") from err
        except SQLAlchemyError as err:
            self._db.rollback()
            logger.error("%s: %s", fail_msg, err)
            raise InternalError(f"{fail_msg}: {_cause(err)}") from err
        return entity

    def _delete(self, entity_id: uuid.UUID, fail_msg: str) -> None:
        stmt = delete(self.model).where(self.model.id == entity_id)
        try:
            result = self._db.execute(stmt)
            if result.rowcount == 0:
                self._db.rollback()
                raise NotFoundError(f"{fail_msg}: {self.entity_name} '{entity_id}' not found")
            self._db.commit()
        except SQLAlchemyError as err:
            self._db.rollback()
            logger.error("%s: %s", fail_msg, err)
            raise InternalError(f"{fail_msg}: {_cause(err)}") from err


def _cause(err: SQLAlchemyError) -> str:
    """The driver's message, without the statement and parameters."""
    orig = getattr(err, "orig", None)
    return str(orig) if orig is not None else type(err).__name__
