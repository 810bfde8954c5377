"""
Category repository interface.
"""
from abc import ABC, abstractmethod
from uuid import UUID

from ..entities.category import Category


class CategoryRepository(ABC):
    """Abstract repository for Category aggregate."""

    @abstractmethod
    def insert(self, category: Category) -> None:
        """Add a new category."""
        pass

    @abstractmethod
    def get(self, category_id: UUID) -> Category:
        """Get a category by ID, raising CategoryNotFoundError when missing."""
        pass

    @abstractmethod
    def update(self, category: Category) -> None:
        """Persist changes to an existing category."""
        pass

    @abstractmethod
    def delete(self, category_id: UUID) -> None:
        """Remove a category by ID."""
        pass
