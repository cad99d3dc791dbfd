"""Domain models for caffeine assessments."""

import math
from dataclasses import dataclass
from enum import Enum

from caffeine_check.domain.errors import PolicyError


class Severity(str, Enum):
    """How far the total intake is above the limit."""

    WITHIN = "within"
    MILD = "mild"
    HIGH = "high"
    SEVERE = "severe"


class Audience(str, Enum):
    """Message audience derived from the age bracket."""

    MINOR = "minor"
    ADULT = "adult"


@dataclass(frozen=True)
class Profile:
    """Age in years and weight in kg."""

    age: float
    weight: float


@dataclass(frozen=True)
class ConsumptionEntry:
    """One consumed item and how many units of it."""

    item_id: int
    quantity: int


@dataclass(frozen=True)
class AgeBracket:
    """Limit policy for ages at or above ``lower_bound``."""

    lower_bound: float
    multiplier: float
    name: str
    minor: bool
    cap_mg: float | None = None


@dataclass(frozen=True)
class LimitPolicy:
    """Ordered age bracket table.

    The first bracket starts at age 0 and lower bounds strictly increase, so
    every positive age falls into exactly one bracket.
    """

    brackets: tuple[AgeBracket, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "brackets", tuple(self.brackets))
        if not self.brackets:
            raise PolicyError("Bracket table is empty")
        if self.brackets[0].lower_bound != 0:
            raise PolicyError("First bracket must start at age 0")
        previous: float | None = None
        for bracket in self.brackets:
            _validate_bracket(bracket)
            if previous is not None and bracket.lower_bound <= previous:
                raise PolicyError("Bracket lower bounds must be strictly increasing")
            previous = bracket.lower_bound


@dataclass(frozen=True)
class AssessmentResult:
    """Outcome of a single assessment."""

    total_intake: float
    limit: float
    is_over_limit: bool
    severity: Severity
    bracket: str
    problems: tuple[str, ...]
    recommendations: tuple[str, ...]


def _is_number(value: object) -> bool:
    return (
        not isinstance(value, bool)
        and isinstance(value, int | float)
        and math.isfinite(value)
    )


def _validate_bracket(bracket: AgeBracket) -> None:
    if not _is_number(bracket.lower_bound) or bracket.lower_bound < 0:
        raise PolicyError(f"Bracket {bracket.name} has an invalid lower bound")
    if not _is_number(bracket.multiplier) or bracket.multiplier <= 0:
        raise PolicyError(f"Bracket {bracket.name} has a non-positive multiplier")
    if bracket.cap_mg is not None and (
        not _is_number(bracket.cap_mg) or bracket.cap_mg <= 0
    ):
        raise PolicyError(f"Bracket {bracket.name} has a non-positive cap")
    if not isinstance(bracket.minor, bool):
        raise PolicyError(f"Bracket {bracket.name} has a non-boolean minor flag")
