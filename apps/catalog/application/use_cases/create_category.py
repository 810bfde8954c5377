"""
Create category use case.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from shared.application import UnitOfWork, UseCase, UseCaseResult
from shared.domain import Clock, IdGenerator
from ...domain.entities.category import Category
from ...domain.repositories.category_repository import CategoryRepository
from ..dtos.category_dto import CategoryDTO, CreateCategoryInput

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryUseCase(UseCase[CreateCategoryInput, CategoryDTO]):
    """Use case for registering a new catalog category."""

    category_repository: CategoryRepository
    unit_of_work: UnitOfWork
    clock: Optional[Clock] = None
    id_generator: Optional[IdGenerator] = None

    def execute(self, input_dto: CreateCategoryInput) -> UseCaseResult[CategoryDTO]:
        category = Category.create(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
            clock=self.clock,
            id_generator=self.id_generator,
        )

        with self.unit_of_work:
            self.category_repository.insert(category)
            self.unit_of_work.commit()

        logger.info("Category created: id=%s name=%s", category.id, category.name)
        return UseCaseResult.ok(CategoryDTO.from_entity(category))
