"""
Category updated domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CategoryUpdated(DomainEvent):
    """Event raised when category name or description changes."""
    category_id: UUID
    name: str
    description: str
