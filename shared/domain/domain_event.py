"""
Domain event base class.
"""
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from .clock import utc_now


@dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events."""
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__
