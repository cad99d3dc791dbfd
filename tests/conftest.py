"""Shared test fixtures."""

import pytest

from caffeine_check.config import Settings
from caffeine_check.containers import AppContainer, build_container
from caffeine_check.domain.catalog import Item
from caffeine_check.services.catalog import ItemCatalog

COFFEE_ID = 1
CHOCOLATE_ID = 2


@pytest.fixture
def catalog() -> ItemCatalog:
    return ItemCatalog(
        [
            Item(id=COFFEE_ID, name="Coffee", caffeine_per_unit=95),
            Item(id=CHOCOLATE_ID, name="Dark chocolate", caffeine_per_unit=12),
        ]
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=False, limit_brackets=None)


@pytest.fixture
def container(settings: Settings, catalog: ItemCatalog) -> AppContainer:
    return build_container(settings, catalog=catalog)
