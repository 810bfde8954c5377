"""
Unit of work port.
"""
from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary for application use cases.

    Used as a context manager; leaving the block with an exception rolls
    back whatever was not committed.
    """

    def __enter__(self) -> 'UnitOfWork':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is not None:
            self.rollback()

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Roll back the current transaction."""
        pass
