"""Tests for the item catalog."""

import pytest

from caffeine_check.domain.catalog import Item
from caffeine_check.domain.errors import CatalogError
from caffeine_check.services.catalog import DEFAULT_CATALOG, ItemCatalog


def test_lookup_returns_item_or_none(catalog: ItemCatalog) -> None:
    item = catalog.lookup(1)

    assert item is not None
    assert item.name == "Coffee"
    assert catalog.lookup(99) is None


def test_items_keep_catalog_order(catalog: ItemCatalog) -> None:
    assert [item.id for item in catalog.items()] == [1, 2]


def test_from_records_reads_camel_case_fields() -> None:
    catalog = ItemCatalog.from_records(
        [{"id": 7, "name": "Green tea", "caffeinePerUnit": 28}]
    )

    assert catalog.lookup(7) == Item(id=7, name="Green tea", caffeine_per_unit=28.0)


def test_from_records_rejects_missing_fields() -> None:
    with pytest.raises(CatalogError):
        ItemCatalog.from_records([{"id": 7, "name": "Green tea"}])


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(CatalogError):
        ItemCatalog(
            [
                Item(id=1, name="Coffee", caffeine_per_unit=95),
                Item(id=1, name="Espresso", caffeine_per_unit=63),
            ]
        )


def test_negative_caffeine_is_rejected() -> None:
    with pytest.raises(CatalogError):
        ItemCatalog([Item(id=1, name="Coffee", caffeine_per_unit=-1)])


def test_default_catalog_contains_coffee() -> None:
    coffee = DEFAULT_CATALOG.lookup(1)

    assert coffee is not None
    assert coffee.caffeine_per_unit == 95
    assert len(DEFAULT_CATALOG) == len(DEFAULT_CATALOG.items())
