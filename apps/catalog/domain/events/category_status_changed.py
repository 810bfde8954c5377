"""
Category status changed domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class CategoryStatusChanged(DomainEvent):
    """Event raised when a category is activated or deactivated."""
    category_id: UUID
    is_active: bool
