"""Errors raised by the assessment engine and its reference data."""


class AssessmentError(Exception):
    """Base class for rejected assessment requests."""

    kind = "assessment_error"


class InvalidProfile(AssessmentError):
    """Age or weight is absent, non-numeric or non-positive."""

    kind = "invalid_profile"


class InvalidQuantity(AssessmentError):
    """A consumption entry has a non-integer or non-positive quantity."""

    kind = "invalid_quantity"


class ItemReferenceError(AssessmentError):
    """A consumption entry references an item missing from the catalog."""

    kind = "unknown_item"

    def __init__(self, item_id: object) -> None:
        super().__init__(f"Unknown item id: {item_id}")
        self.item_id = item_id


class CatalogError(ValueError):
    """The item catalog contains invalid or duplicate entries."""


class PolicyError(ValueError):
    """The age bracket table is malformed."""
