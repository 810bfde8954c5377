"""
Clock and identifier providers.

Entities take these as plain callables so tests can pin time and identity.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List
from uuid import UUID

Clock = Callable[[], datetime]
IdGenerator = Callable[[], UUID]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class FixedClock:
    """Clock that returns a fixed instant."""
    now: datetime

    def __call__(self) -> datetime:
        return self.now


@dataclass
class SequentialIdGenerator:
    """Hands out predictable UUIDs: 00000000-...-000000000001, ...002 and so on."""
    start: int = 1
    issued: List[UUID] = field(default_factory=list)

    def __call__(self) -> UUID:
        value = UUID(int=self.start + len(self.issued))
        self.issued.append(value)
        return value
