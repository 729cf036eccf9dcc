import logging
from typing import Any, Mapping

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from adapters.repository.query_filter import ID_SPEC, build_conditions
from domain.exceptions import DuplicateKeyError
from domain.models.schema import cast_value, unique_fields, validate_document

logger = logging.getLogger(__name__)

def _dup_key_on(err: IntegrityError, field: str) -> bool:
    """Detects which unique column raised the error (sqlite, postgres and mysql messages)."""
    msg = str(getattr(err, "orig", err))
    return any(needle in msg for needle in (f".{field}", f"({field})", f"_{field}"))

class DocumentRepository:
    """
    Generic persistence adapter for one entity kind.

    Subclasses set ``entity`` (ORM class), ``schema`` (field table),
    ``model_name`` and ``read_model`` (public pydantic representation).
    Every method returns the public representation, never ORM rows.
    """

    entity = None
    schema: Mapping = {}
    model_name = "Document"
    read_model = None

    def __init__(self, db: Session):
        self.db = db

    # Serialization
    def serialize(self, row) -> dict:
        return self.read_model.model_validate(row).model_dump(mode="json")

    def to_columns(self, document: Any, *, partial: bool = False) -> dict:
        return validate_document(self.model_name, self.schema, document, partial=partial)

    # Queries
    def _select(self, filter_query: Mapping | None):
        conditions = build_conditions(self.entity, self.schema, filter_query)
        return select(self.entity).where(*conditions).order_by(self.entity.id.asc())

    def find_by_id(self, _id) -> dict | None:
        row = self.db.get(self.entity, cast_value("_id", ID_SPEC, _id))
        return self.serialize(row) if row is not None else None

    def find(self, filter_query: Mapping | None = None, skip: int = 0, limit: int = 0) -> list[dict]:
        query = self._select(filter_query).offset(skip)
        if limit:
            query = query.limit(limit)
        return [self.serialize(row) for row in self.db.execute(query).scalars().all()]

    def count_documents(self, filter_query: Mapping | None = None) -> int:
        conditions = build_conditions(self.entity, self.schema, filter_query)
        query = select(func.count()).select_from(self.entity).where(*conditions)
        return self.db.execute(query).scalar_one()

    # Commands
    def _commit(self, values: dict):
        try:
            self.db.commit()
        except IntegrityError as err:
            self.db.rollback()
            for field in unique_fields(self.schema):
                if _dup_key_on(err, field):
                    raise DuplicateKeyError(field, values.get(field)) from err
            logger.warning("%s integrity error: %s", self.model_name, err.orig)
            raise

    def create(self, document: Any) -> dict:
        values = self.to_columns(document)
        row = self.entity(**values)
        self.db.add(row)
        self._commit(values)
        self.db.refresh(row)
        return self.serialize(row)

    def find_one_and_update(self, filter_query: Mapping, update: Any) -> dict | None:
        values = self.to_columns(update, partial=True)
        row = self.db.execute(self._select(filter_query).limit(1)).scalars().first()
        if row is None:
            return None
        for field, value in values.items():
            setattr(row, field, value)
        self._commit(values)
        self.db.refresh(row)
        return self.serialize(row)

    def find_one_and_delete(self, filter_query: Mapping) -> dict | None:
        row = self.db.execute(self._select(filter_query).limit(1)).scalars().first()
        if row is None:
            return None
        document = self.serialize(row)
        self.db.delete(row)
        self.db.commit()
        return document
