"""
Base repository class for data access.

Routes talk to repositories instead of building queries inline, so query
logic lives in one place and can be swapped out in tests.

Example:
    class PlayerRepository(BaseRepository[Player]):
        def find_by_name_key(self, name_key: str) -> Optional[Player]:
            return self.where_first(Player.name_key == name_key)
"""
from abc import ABC
from datetime import datetime
from typing import TypeVar, Generic, Type, Optional, List
from sqlalchemy import desc, func
from sqlalchemy.orm import Session

T = TypeVar("T")


class BaseRepository(Generic[T], ABC):
    """
    Common data access methods.

    Attributes:
        model_type: The SQLAlchemy model class this repository manages
        db: The database session
    """

    def __init__(self, model_type: Type[T], db: Session):
        self.model_type = model_type
        self.db = db

    # ========================================================================
    # CRUD Operations
    # ========================================================================

    def find_by_id(self, id: int) -> Optional[T]:
        """Find a single record by primary key."""
        return self.db.get(self.model_type, id)

    def find_all(self, order_by: Optional[str] = None) -> List[T]:
        """
        Find all records.

        Args:
            order_by: Column name to order by (prefix with '-' for descending)
        """
        query = self.db.query(self.model_type)

        if order_by:
            if order_by.startswith('-'):
                query = query.order_by(desc(getattr(self.model_type, order_by[1:])))
            else:
                query = query.order_by(getattr(self.model_type, order_by))

        return query.all()

    def create(self, **kwargs) -> T:
        """Create a new record (added to the session, not committed)."""
        instance = self.model_type(**kwargs)
        self.db.add(instance)
        return instance

    def update(self, id: int, **kwargs) -> Optional[T]:
        """
        Update a record by primary key.

        Returns:
            The updated record, or None if not found
        """
        instance = self.find_by_id(id)
        if instance:
            for key, value in kwargs.items():
                if hasattr(instance, key):
                    setattr(instance, key, value)
            instance.updated_at = datetime.utcnow()
        return instance

    def delete(self, id: int) -> bool:
        """
        Delete a record by primary key.

        Returns:
            True if deleted, False if not found
        """
        instance = self.find_by_id(id)
        if instance:
            self.db.delete(instance)
            return True
        return False

    # ========================================================================
    # Query Builders
    # ========================================================================

    def where_first(self, *criterion) -> Optional[T]:
        """Filter records and return the first match."""
        return self.db.query(self.model_type).filter(*criterion).first()

    def count(self, *criterion) -> int:
        """Count records matching optional criterion."""
        query = self.db.query(func.count(self.model_type.id))
        if criterion:
            query = query.filter(*criterion)
        return query.scalar() or 0
