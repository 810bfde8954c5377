"""
Category created domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CategoryCreated(DomainEvent):
    """Event raised when a new category is created."""
    category_id: UUID
    name: str
