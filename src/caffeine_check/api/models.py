"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemResponse(_CamelModel):
    """Catalog item payload."""

    id: int
    name: str
    caffeine_per_unit: float


class SelectedItem(_CamelModel):
    """One consumed item in a calculation request."""

    item_id: int
    quantity: int


class CalculateRequest(_CamelModel):
    """Calculation request payload."""

    age: float
    weight: float
    selected_items: list[SelectedItem] = Field(default_factory=list)


class CalculateResponse(_CamelModel):
    """Assessment result payload."""

    total_intake: float
    limit: float
    is_over_limit: bool
    severity: str
    bracket: str
    problems: list[str]
    recommendations: list[str]
