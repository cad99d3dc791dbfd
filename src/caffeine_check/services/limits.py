"""Daily caffeine limit derived from an age bracket table."""

import math
from collections.abc import Iterable

from caffeine_check.domain.assessment import AgeBracket, LimitPolicy, Profile
from caffeine_check.domain.errors import InvalidProfile

BASE_MG_PER_KG = 2.5
ADULT_DAILY_CAP_MG = 400.0


def build_policy(brackets: Iterable[AgeBracket]) -> LimitPolicy:
    """Wrap a bracket table in a validated policy."""
    return LimitPolicy(brackets=tuple(brackets))


DEFAULT_POLICY = build_policy(
    [
        AgeBracket(lower_bound=0, multiplier=BASE_MG_PER_KG, name="child", minor=True),
        AgeBracket(
            lower_bound=12, multiplier=BASE_MG_PER_KG, name="adolescent", minor=True
        ),
        AgeBracket(
            lower_bound=19,
            multiplier=6.0,
            name="adult",
            minor=False,
            cap_mg=ADULT_DAILY_CAP_MG,
        ),
    ]
)


def validate_profile(profile: Profile) -> None:
    """Raise InvalidProfile unless age and weight are positive finite numbers."""
    if profile is None:
        raise InvalidProfile("Profile is required")
    for field_name in ("age", "weight"):
        value = getattr(profile, field_name, None)
        if value is None:
            raise InvalidProfile(f"{field_name} is required")
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise InvalidProfile(f"{field_name} must be a number")
        if not math.isfinite(value) or value <= 0:
            raise InvalidProfile(f"{field_name} must be positive")


def select_bracket(age: float, policy: LimitPolicy = DEFAULT_POLICY) -> AgeBracket:
    """Return the bracket with the greatest lower bound not above ``age``."""
    selected = policy.brackets[0]
    for bracket in policy.brackets:
        if bracket.lower_bound <= age:
            selected = bracket
        else:
            break
    return selected


def compute_limit(profile: Profile, policy: LimitPolicy = DEFAULT_POLICY) -> float:
    """Return the daily safe caffeine limit in mg for a profile."""
    validate_profile(profile)
    bracket = select_bracket(profile.age, policy)
    limit = bracket.multiplier * profile.weight
    if bracket.cap_mg is not None:
        limit = min(limit, bracket.cap_mg)
    return float(limit)
