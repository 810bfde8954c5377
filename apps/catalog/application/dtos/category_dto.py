"""
Category DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from ...domain.entities.category import Category


@dataclass
class CreateCategoryInput:
    """DTO for creating a category."""
    name: str
    description: str = ""
    is_active: bool = True


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )
