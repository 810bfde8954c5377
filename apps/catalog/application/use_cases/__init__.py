from .create_category import CreateCategoryUseCase

__all__ = ['CreateCategoryUseCase']
