"""Caffeine intake assessment engine."""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

from caffeine_check.domain.assessment import (
    AssessmentResult,
    Audience,
    ConsumptionEntry,
    LimitPolicy,
    Profile,
    Severity,
)
from caffeine_check.domain.catalog import Item
from caffeine_check.domain.errors import InvalidQuantity, ItemReferenceError
from caffeine_check.services.catalog import ItemCatalog
from caffeine_check.services.limits import (
    DEFAULT_POLICY,
    compute_limit,
    select_bracket,
    validate_profile,
)
from caffeine_check.services.messages import (
    NEAR_LIMIT_RATIO,
    NEAR_LIMIT_RECOMMENDATIONS,
    OVER_LIMIT_RECOMMENDATIONS,
    PROBLEM_MESSAGES,
    REDUCTION_TEMPLATE,
    WITHIN_LIMIT_RECOMMENDATIONS,
)

MILD_RATIO = 1.5
HIGH_RATIO = 2.0

_logger = logging.getLogger(__name__)


def compute_total_intake(
    entries: Iterable[ConsumptionEntry], catalog: ItemCatalog
) -> float:
    """Sum ``quantity * caffeine_per_unit`` over all entries.

    Entries sharing an item id are added together. Any unknown item or bad
    quantity rejects the whole request.
    """
    total = 0.0
    for entry in entries:
        _validate_quantity(entry.quantity)
        item = catalog.lookup(entry.item_id)
        if item is None:
            raise ItemReferenceError(entry.item_id)
        try:
            total += entry.quantity * item.caffeine_per_unit
        except OverflowError as exc:
            raise InvalidQuantity("Quantity is too large") from exc
        if not math.isfinite(total):
            raise InvalidQuantity("Quantity is too large")
    return total


def classify(total_intake: float, limit: float) -> bool:
    """Return True when the intake is strictly above the limit."""
    return total_intake > limit


def grade_severity(total_intake: float, limit: float) -> Severity:
    """Grade how far the intake is above the limit."""
    if not classify(total_intake, limit):
        return Severity.WITHIN
    if limit <= 0:
        return Severity.SEVERE
    ratio = total_intake / limit
    if ratio <= MILD_RATIO:
        return Severity.MILD
    if ratio <= HIGH_RATIO:
        return Severity.HIGH
    return Severity.SEVERE


def generate_problems(
    total_intake: float,
    limit: float,
    profile: Profile,
    policy: LimitPolicy = DEFAULT_POLICY,
) -> tuple[str, ...]:
    """Return health-risk statements for an over-limit intake, else nothing."""
    severity = grade_severity(total_intake, limit)
    if severity is Severity.WITHIN:
        return ()
    bracket = select_bracket(profile.age, policy)
    audience = Audience.MINOR if bracket.minor else Audience.ADULT
    return PROBLEM_MESSAGES[(severity, audience)]


def generate_recommendations(
    is_over_limit: bool, total_intake: float, limit: float
) -> tuple[str, ...]:
    """Return advice ordered from most to least actionable.

    The excess is rounded up and the limit and remaining allowance down, so
    following the advice always lands at or under the limit.
    """
    values = {
        "total": format_mg(total_intake),
        "limit": format_mg(_floor_tenth(limit)),
        "excess": format_mg(_ceil_tenth(max(total_intake - limit, 0.0))),
        "remaining": format_mg(_floor_tenth(max(limit - total_intake, 0.0))),
    }
    if is_over_limit:
        severity = grade_severity(total_intake, limit)
        advice = OVER_LIMIT_RECOMMENDATIONS.get(
            severity, OVER_LIMIT_RECOMMENDATIONS[Severity.MILD]
        )
        templates = (REDUCTION_TEMPLATE, *advice)
    elif limit > 0 and total_intake >= NEAR_LIMIT_RATIO * limit:
        templates = NEAR_LIMIT_RECOMMENDATIONS
    else:
        templates = WITHIN_LIMIT_RECOMMENDATIONS
    return tuple(template.format(**values) for template in templates)


def assess(
    profile: Profile,
    entries: Iterable[ConsumptionEntry],
    catalog: ItemCatalog,
    policy: LimitPolicy = DEFAULT_POLICY,
) -> AssessmentResult:
    """Assess a day's caffeine intake for a profile."""
    validate_profile(profile)
    total_intake = compute_total_intake(entries, catalog)
    limit = compute_limit(profile, policy)
    is_over_limit = classify(total_intake, limit)
    problems = (
        generate_problems(total_intake, limit, profile, policy)
        if is_over_limit
        else ()
    )
    recommendations = generate_recommendations(is_over_limit, total_intake, limit)
    return AssessmentResult(
        total_intake=total_intake,
        limit=limit,
        is_over_limit=is_over_limit,
        severity=grade_severity(total_intake, limit),
        bracket=select_bracket(profile.age, policy).name,
        problems=problems,
        recommendations=recommendations,
    )


def format_mg(value: float) -> str:
    """Format a mg amount with at most one decimal place."""
    rounded = round(float(value), 1)
    if rounded.is_integer():
        return f"{rounded:.0f}"
    return f"{rounded:.1f}"


def _ceil_tenth(value: float) -> float:
    return math.ceil(round(value * 10, 6)) / 10


def _floor_tenth(value: float) -> float:
    return math.floor(round(value * 10, 6)) / 10


def _validate_quantity(quantity: object) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidQuantity(f"Quantity must be an integer: {quantity!r}")
    if quantity <= 0:
        raise InvalidQuantity(f"Quantity must be positive: {quantity}")


@dataclass
class AssessmentService:
    """Application service binding the engine to a catalog and policy."""

    catalog: ItemCatalog
    policy: LimitPolicy = DEFAULT_POLICY
    debug: bool = False

    def list_items(self) -> list[Item]:
        """Return the catalog items."""
        return self.catalog.items()

    def assess(
        self, profile: Profile, entries: Iterable[ConsumptionEntry]
    ) -> AssessmentResult:
        """Run an assessment against the bound catalog and policy."""
        result = assess(profile, entries, self.catalog, self.policy)
        if self.debug:
            _logger.info(
                "Assessment: total=%s limit=%s bracket=%s severity=%s",
                result.total_intake,
                result.limit,
                result.bracket,
                result.severity.value,
            )
        return result
