"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases."""
    success: bool
    data: Optional[OutputDTO] = None

    @classmethod
    def ok(cls, data: OutputDTO) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
