"""Content store used by the importer's upsert step."""

import logging
from typing import Any, Protocol

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gujlearn.models.content import Dialogue, Quiz, VocabularyWord

logger = logging.getLogger(__name__)


class ContentStoreError(Exception):
    """A lookup or write against the content store failed."""

    pass


class ContentStore(Protocol):
    """Select/insert/update over named content collections."""

    def select_one(self, collection: str, filters: dict[str, Any]) -> dict[str, Any] | None:
        ...

    def insert(self, collection: str, values: dict[str, Any]) -> dict[str, Any]:
        ...

    def update_by_id(self, collection: str, record_id: Any, values: dict[str, Any]) -> dict[str, Any]:
        ...


class SQLAlchemyContentStore:
    """ContentStore backed by the application database.

    Every write commits on its own, so a failure later in a batch never rolls
    back rows written before it.
    """

    COLLECTIONS = {
        "quizzes": Quiz,
        "vocabulary": VocabularyWord,
        "dialogues": Dialogue,
    }

    def __init__(self, db: Session):
        self.db = db

    def _model(self, collection: str):
        try:
            return self.COLLECTIONS[collection]
        except KeyError:
            raise ContentStoreError(f"Unknown collection '{collection}'") from None

    @staticmethod
    def _to_dict(obj: Any) -> dict[str, Any]:
        return {attr.key: getattr(obj, attr.key) for attr in sa_inspect(obj).mapper.column_attrs}

    def select_one(self, collection: str, filters: dict[str, Any]) -> dict[str, Any] | None:
        model = self._model(collection)
        try:
            obj = self.db.execute(select(model).filter_by(**filters).limit(1)).scalars().first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise ContentStoreError(f"Lookup in {collection} failed: {e}") from e
        return self._to_dict(obj) if obj is not None else None

    def insert(self, collection: str, values: dict[str, Any]) -> dict[str, Any]:
        model = self._model(collection)
        obj = model(**values)
        try:
            self.db.add(obj)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise ContentStoreError(f"Insert into {collection} failed: {e}") from e
        return self._to_dict(obj)

    def update_by_id(self, collection: str, record_id: Any, values: dict[str, Any]) -> dict[str, Any]:
        model = self._model(collection)
        try:
            obj = self.db.get(model, record_id)
            if obj is None:
                raise ContentStoreError(f"{collection} record {record_id} not found")
            for key, value in values.items():
                setattr(obj, key, value)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise ContentStoreError(f"Update of {collection} {record_id} failed: {e}") from e
        return self._to_dict(obj)
