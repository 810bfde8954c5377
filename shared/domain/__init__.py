# Shared domain module
from .base_entity import BaseEntity, AggregateRoot
from .clock import Clock, FixedClock, IdGenerator, SequentialIdGenerator, utc_now
from .domain_event import DomainEvent
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    EntityValidationError,
    ValidationError,
)

__all__ = [
    'BaseEntity',
    'AggregateRoot',
    'Clock',
    'FixedClock',
    'IdGenerator',
    'SequentialIdGenerator',
    'utc_now',
    'DomainEvent',
    'DomainException',
    'EntityNotFoundError',
    'EntityValidationError',
    'ValidationError',
]
