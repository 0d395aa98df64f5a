from typing import TypeVar
from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT")


class BaseRepository:
    """Repositories share the caller's Session and never commit; services do."""

    def __init__(self, db: Session):
        self.db = db

    def _add(self, instance: ModelT) -> ModelT:
        """Stage a new row and flush so its generated id is available."""
        self.db.add(instance)
        self.db.flush()
        return instance
