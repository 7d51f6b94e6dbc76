from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from prediction_diary.infrastructure.exceptions import RepositoryException
from prediction_diary.infrastructure.persistence.database import Base
from prediction_diary.shared.logging import get_logger

ModelType = TypeVar("ModelType", bound=Base)
EntityType = TypeVar("EntityType")

logger = get_logger(__name__)


class DatabaseRepository(ABC, Generic[ModelType, EntityType]):
    """
    Base repository for the database backend.

    Converts between ORM rows and domain entities so that callers never see
    a session-bound object. SQLAlchemy failures surface as RepositoryException.
    """

    entity_type: str = "entity"

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    @abstractmethod
    def _to_entity(self, row: ModelType) -> EntityType:
        """Build a domain entity from a stored row"""

    @abstractmethod
    def _to_model(self, entity: EntityType) -> ModelType:
        """Build a detached row from a domain entity"""

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error("%s.%s failed: %s", self.entity_type, operation, e)
            raise RepositoryException(operation, self.entity_type, str(e)) from e

    async def create(self, entity: EntityType) -> None:
        """Insert a new row"""
        with self._translate_errors("create"):
            self.db.add(self._to_model(entity))
            await self.db.flush()

    async def find_by_id(self, id: str) -> EntityType | None:
        """Get a single record by ID, None when absent"""
        with self._translate_errors("find_by_id"):
            row: Any = await self.db.get(self.model, id)
        return self._to_entity(row) if row is not None else None
