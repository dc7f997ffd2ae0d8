"""
Base repository with the CRUD operations shared by actors and films.

Repositories receive the SQLAlchemy session they work on; they never
reach for a global one. Input mappings are validated with the entity's
marshmallow schema before anything touches the store.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, TypeVar

from marshmallow import Schema
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from filmdb.errors import StoreError
from filmdb.models import db

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=db.Model)

# SQLite INTEGER is a signed 64-bit value; larger keys cannot name a row
MAX_KEY = 2**63 - 1


class BaseRepository(Generic[ModelT]):
    """Generic repository for one entity type.

    Attributes:
        model: SQLAlchemy model class.
        schema: marshmallow schema validating create/update payloads.
        relation: name of the many-to-many attribute loaded by the
            ``*_with_relations`` queries.
        fields: columns replaced by :meth:`update`.
    """

    model: ClassVar[type]
    schema: ClassVar[Schema]
    relation: ClassVar[str]
    fields: ClassVar[tuple[str, ...]]

    def __init__(self, session: Session) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session instance.
        """
        self._session = session

    @property
    def session(self) -> Session:
        """Get the database session."""
        return self._session

    @property
    def primary_key(self):
        return self.model.__mapper__.primary_key[0]

    @property
    def related(self):
        return getattr(self.model, self.relation)

    @staticmethod
    def _storable(key: int) -> bool:
        return -MAX_KEY - 1 <= key <= MAX_KEY

    @contextmanager
    def _store(self, action: str) -> Iterator[None]:
        """Roll back and raise :class:`StoreError` on any store failure."""
        try:
            yield
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.exception("Failed to %s %s", action, self.model.__name__)
            raise StoreError(f"could not {action} {self.model.__name__}") from exc

    def list_all(self) -> list[ModelT]:
        """Retrieve every record, ordered by primary key.

        Returns:
            List of entity instances, empty when the table is.
        """
        stmt = select(self.model).order_by(self.primary_key)
        with self._store("list"):
            return list(self._session.scalars(stmt).all())

    def list_all_with_relations(self) -> list[ModelT]:
        """Retrieve every record with its related collection loaded.

        Returns:
            List of entity instances; records without links carry an
            empty collection.
        """
        stmt = (
            select(self.model)
            .options(selectinload(self.related))
            .order_by(self.primary_key)
        )
        with self._store("list"):
            return list(self._session.scalars(stmt).all())

    def get_by_key(self, key: int) -> ModelT | None:
        """Retrieve a record by primary key.

        Args:
            key: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        if not self._storable(key):
            return None
        with self._store("read"):
            return self._session.get(self.model, key)

    def get_by_key_with_relations(self, key: int) -> ModelT | None:
        """Retrieve a record by primary key with its related collection.

        Args:
            key: Primary key value.

        Returns:
            Entity instance or None if not found.
        """
        if not self._storable(key):
            return None
        stmt = (
            select(self.model)
            .options(selectinload(self.related))
            .where(self.primary_key == key)
        )
        with self._store("read"):
            return self._session.scalars(stmt).first()

    def create(self, fields: Mapping[str, Any]) -> ModelT:
        """Validate and persist a new record.

        Args:
            fields: Field names mapped to values.

        Returns:
            Persisted entity with its generated key.

        Raises:
            ValidationError: A required field is missing or mistyped.
            StoreError: The store rejected the insert.
        """
        entity = self.model(**self.schema.load(fields))
        with self._store("create"):
            self._session.add(entity)
            self._session.commit()
        logger.info("Created %r", entity)
        return entity

    def bulk_create(self, items: Sequence[Mapping[str, Any]]) -> list[ModelT]:
        """Validate and persist several records in one transaction.

        Every payload is validated before the first insert, and a store
        failure rolls the whole batch back.

        Args:
            items: One mapping of field names to values per record.

        Returns:
            Persisted entities, in input order.
        """
        entities = [self.model(**data) for data in self.schema.load(items, many=True)]
        with self._store("bulk create"):
            self._session.add_all(entities)
            self._session.commit()
        logger.info("Created %d %s records", len(entities), self.model.__name__)
        return entities

    def update(self, key: int, fields: Mapping[str, Any]) -> ModelT | None:
        """Replace every writable field of an existing record.

        Optional fields absent from ``fields`` are cleared.

        Args:
            key: Primary key value.
            fields: Field names mapped to values.

        Returns:
            Updated entity, or None if not found.
        """
        entity = self.get_by_key(key)
        if entity is None:
            return None

        data = self.schema.load(fields)
        with self._store("update"):
            for name in self.fields:
                setattr(entity, name, data.get(name))
            self._session.commit()
        logger.info("Updated %r", entity)
        return entity

    def delete(self, key: int) -> bool:
        """Delete a record and its links by primary key.

        Args:
            key: Primary key value.

        Returns:
            True if the record was deleted, False if not found.
        """
        entity = self.get_by_key(key)
        if entity is None:
            return False

        with self._store("delete"):
            self._session.delete(entity)
            self._session.commit()
        logger.info("Deleted %s %s", self.model.__name__, key)
        return True
