"""
Category entity.
"""
from dataclasses import dataclass
from typing import Optional

from shared.domain import AggregateRoot, Clock, EntityValidationError, IdGenerator, utc_now
from shared.domain import validation
from ..events import CategoryCreated, CategoryStatusChanged, CategoryUpdated

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10_000


@dataclass(eq=False)
class Category(AggregateRoot):
    """Category aggregate of the video catalog.

    Invariants are checked on construction and before every mutation is
    applied, so a rejected change leaves the category untouched.
    """
    name: str
    description: str
    is_active: bool = True

    _initialized = False

    def __post_init__(self):
        self.validate(self.name, self.description)
        object.__setattr__(self, '_initialized', True)

    def __setattr__(self, name: str, value) -> None:
        if self._initialized and name == 'name':
            self.validate(value, self.description)
        elif self._initialized and name == 'description':
            self.validate(self.name, value)
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        is_active: bool = True,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ) -> 'Category':
        """Factory method to create a new category."""
        extra = {'created_at': (clock or utc_now)()}
        if id_generator is not None:
            extra['id'] = id_generator()
        category = cls(name=name, description=description, is_active=is_active, **extra)
        category.add_domain_event(
            CategoryCreated(category_id=category.id, name=category.name)
        )
        return category

    def activate(self) -> None:
        """Activate the category."""
        self._change_status(True)

    def deactivate(self) -> None:
        """Deactivate the category."""
        self._change_status(False)

    def update(self, name: str, description: Optional[str] = None) -> None:
        """Rename the category, replacing the description only when one is given."""
        new_description = self.description if description is None else description
        self.validate(name, new_description)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'description', new_description)
        self.add_domain_event(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
            )
        )

    def _change_status(self, is_active: bool) -> None:
        self.validate(self.name, self.description)
        if self.is_active == is_active:
            return
        self.is_active = is_active
        self.add_domain_event(
            CategoryStatusChanged(category_id=self.id, is_active=is_active)
        )

    @staticmethod
    def validate(name: Optional[str], description: Optional[str]) -> None:
        """Check candidate field values, raising on the first broken rule."""
        validation.not_null_or_empty(name, "Name")
        validation.min_length(name, NAME_MIN_LENGTH, "Name")
        validation.max_length(name, NAME_MAX_LENGTH, "Name")
        if description is None:
            # empty descriptions are allowed, only a missing one is rejected
            raise EntityValidationError(
                "Description should not be empty or null", field="Description"
            )
        validation.max_length(description, DESCRIPTION_MAX_LENGTH, "Description")
