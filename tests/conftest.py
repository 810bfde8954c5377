"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone

import pytest

from apps.catalog.domain.entities.category import Category
from shared.domain import FixedClock, SequentialIdGenerator


@pytest.fixture
def valid_name():
    """A category name inside the allowed length range."""
    return "Documentaries"


@pytest.fixture
def valid_description():
    return "Non-fiction films about nature, history and science."


@pytest.fixture
def valid_category(valid_name, valid_description):
    """A freshly created, valid category."""
    return Category(valid_name, valid_description)


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 5, 17, 12, 30, tzinfo=timezone.utc))


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()
