from .category_dto import CategoryDTO, CreateCategoryInput

__all__ = ['CategoryDTO', 'CreateCategoryInput']
