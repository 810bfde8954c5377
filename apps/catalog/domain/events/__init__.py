# Domain events
from .category_created import CategoryCreated
from .category_status_changed import CategoryStatusChanged
from .category_updated import CategoryUpdated

__all__ = ['CategoryCreated', 'CategoryStatusChanged', 'CategoryUpdated']
