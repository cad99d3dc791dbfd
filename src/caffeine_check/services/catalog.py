"""Read-only item catalog."""

import math
from collections.abc import Iterable, Mapping

from caffeine_check.domain.catalog import Item
from caffeine_check.domain.errors import CatalogError


class ItemCatalog:
    """Immutable lookup table of caffeinated items keyed by id."""

    def __init__(self, items: Iterable[Item]) -> None:
        by_id: dict[int, Item] = {}
        for item in items:
            _validate_item(item)
            if item.id in by_id:
                raise CatalogError(f"Duplicate item id: {item.id}")
            by_id[item.id] = item
        self._items = by_id

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> "ItemCatalog":
        """Build a catalog from ``{id, name, caffeinePerUnit}`` mappings."""
        items = []
        for record in records:
            try:
                items.append(
                    Item(
                        id=record["id"],
                        name=str(record["name"]),
                        caffeine_per_unit=float(record["caffeinePerUnit"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise CatalogError(f"Invalid catalog record: {record!r}") from exc
        return cls(items)

    def lookup(self, item_id: int) -> Item | None:
        """Return the item for an id, if present."""
        return self._items.get(item_id)

    def items(self) -> list[Item]:
        """Return all items in catalog order."""
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


def _validate_item(item: Item) -> None:
    if isinstance(item.id, bool) or not isinstance(item.id, int):
        raise CatalogError(f"Item id must be an integer: {item.id!r}")
    if not item.name:
        raise CatalogError(f"Item {item.id} has no name")
    value = item.caffeine_per_unit
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise CatalogError(f"Item {item.id} has non-numeric caffeine content")
    if not math.isfinite(value) or value < 0:
        raise CatalogError(f"Item {item.id} has invalid caffeine content: {value}")


DEFAULT_CATALOG = ItemCatalog(
    [
        Item(id=1, name="Coffee (brewed, 240 ml)", caffeine_per_unit=95),
        Item(id=2, name="Espresso (single shot)", caffeine_per_unit=63),
        Item(id=3, name="Energy drink (250 ml)", caffeine_per_unit=80),
        Item(id=4, name="Energy drink (473 ml)", caffeine_per_unit=150),
        Item(id=5, name="Cola (355 ml)", caffeine_per_unit=35),
        Item(id=6, name="Soda, high caffeine (355 ml)", caffeine_per_unit=55),
        Item(id=7, name="Black tea (240 ml)", caffeine_per_unit=47),
        Item(id=8, name="Green tea (240 ml)", caffeine_per_unit=28),
        Item(id=9, name="Dark chocolate (30 g)", caffeine_per_unit=12),
        Item(id=10, name="Milk chocolate (30 g)", caffeine_per_unit=6),
        Item(id=11, name="Caffeine tablet", caffeine_per_unit=200),
    ]
)
