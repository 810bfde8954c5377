# Shared application module
from .base_use_case import UseCase, UseCaseResult
from .unit_of_work import UnitOfWork

__all__ = ['UseCase', 'UseCaseResult', 'UnitOfWork']
