"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, EntityValidationError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category is not found."""

    def __init__(self, category_id: str):
        super().__init__(entity_name="Category", entity_id=str(category_id))
        self.code = "CATEGORY_NOT_FOUND"


# Re-export for convenience
__all__ = [
    'CategoryNotFoundError',
    'EntityValidationError',
]
