from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Query, Session
from sqlalchemy.sql.elements import ColumnElement

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    model: type[ModelType] | None = None

    def __init__(self, session: Session):
        self.session = session

    def _ensure_model(self) -> type[ModelType]:
        if self.model is None:
            raise RuntimeError("Model not set. Subclasses must define the 'model' attribute.")
        return self.model

    def _build_query(self, criteria: Sequence[ColumnElement[bool]] | None = None) -> Query:
        model = self._ensure_model()
        query = self.session.query(model)

        # Every criterion is AND-ed; an empty sequence matches all rows
        for criterion in criteria or ():
            query = query.filter(criterion)

        return query

    def _paginate(self, query: Query, skip: int, limit: int) -> list[ModelType]:
        return query.offset(skip).limit(limit).all()

    def create(self, entity: ModelType) -> ModelType:
        self.session.add(entity)
        self.session.flush()
        self.session.refresh(entity)
        return entity

    def count(self, criteria: Sequence[ColumnElement[bool]] | None = None) -> int:
        return self._build_query(criteria).order_by(None).count()

    def get_by(self, **values: Any) -> ModelType | None:
        model = self._ensure_model()
        query = self._build_query()
        for key, value in values.items():
            column = getattr(model, key, None)
            if column is None:
                raise AttributeError(f"{model.__name__} has no attribute '{key}'")
            query = query.filter(column == value)
        return query.first()
