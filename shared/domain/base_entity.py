"""
Base entity classes for DDD.
"""
from abc import ABC
from dataclasses import FrozenInstanceError, dataclass, field
from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from .clock import utc_now
from .domain_event import DomainEvent


@dataclass(eq=False)
class BaseEntity(ABC):
    """Base entity class with identity.

    Identity fields are keyword-only so subclasses can declare required
    positional fields of their own.
    """
    id: UUID = field(default_factory=uuid4, kw_only=True)
    created_at: datetime = field(default_factory=utc_now, kw_only=True)

    def __setattr__(self, name: str, value) -> None:
        # identity is assigned once, by __init__
        if name in ('id', 'created_at') and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class AggregateRoot(BaseEntity):
    """Aggregate root base class with domain events."""
    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to be dispatched."""
        self._domain_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """Clear and return all domain events."""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Get a copy of domain events."""
        return self._domain_events.copy()
