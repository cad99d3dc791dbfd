"""Catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """A caffeinated item and its caffeine content per unit in mg."""

    id: int
    name: str
    caffeine_per_unit: float
