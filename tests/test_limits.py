"""Tests for limit derivation."""

import math

import pytest

from caffeine_check.domain.assessment import AgeBracket, LimitPolicy, Profile
from caffeine_check.domain.errors import InvalidProfile, PolicyError
from caffeine_check.services.limits import (
    DEFAULT_POLICY,
    build_policy,
    compute_limit,
    select_bracket,
)


def test_adolescent_limit_uses_base_multiplier() -> None:
    assert compute_limit(Profile(age=16, weight=55)) == 137.5


def test_adult_limit_is_capped() -> None:
    assert compute_limit(Profile(age=30, weight=50)) == 300
    assert compute_limit(Profile(age=30, weight=80)) == 400


def test_select_bracket_uses_greatest_lower_bound() -> None:
    assert select_bracket(5).name == "child"
    assert select_bracket(12).name == "adolescent"
    assert select_bracket(18.9).name == "adolescent"
    assert select_bracket(19).name == "adult"


@pytest.mark.parametrize("age", [5, 16, 40])
def test_limit_is_non_decreasing_in_weight(age: int) -> None:
    limits = [compute_limit(Profile(age=age, weight=w)) for w in range(20, 150, 5)]

    assert limits == sorted(limits)


@pytest.mark.parametrize(
    "profile",
    [
        Profile(age=-5, weight=55),
        Profile(age=0, weight=55),
        Profile(age=16, weight=0),
        Profile(age=16, weight=math.nan),
        Profile(age=None, weight=55),  # type: ignore[arg-type]
        Profile(age="16", weight=55),  # type: ignore[arg-type]
        Profile(age=True, weight=55),
    ],
)
def test_invalid_profiles_are_rejected(profile: Profile) -> None:
    with pytest.raises(InvalidProfile):
        compute_limit(profile)


def test_custom_policy_is_applied() -> None:
    policy = build_policy(
        [
            AgeBracket(lower_bound=0, multiplier=2.5, name="minor", minor=True),
            AgeBracket(lower_bound=18, multiplier=3.0, name="adult", minor=False),
        ]
    )

    assert compute_limit(Profile(age=18, weight=60), policy) == 180


@pytest.mark.parametrize(
    "brackets",
    [
        [],
        [AgeBracket(lower_bound=5, multiplier=2.5, name="late", minor=True)],
        [
            AgeBracket(lower_bound=0, multiplier=2.5, name="a", minor=True),
            AgeBracket(lower_bound=0, multiplier=3.0, name="b", minor=False),
        ],
        [AgeBracket(lower_bound=0, multiplier=0, name="zero", minor=True)],
        [AgeBracket(lower_bound=0, multiplier=2.5, name="cap", minor=True, cap_mg=0)],
    ],
)
def test_malformed_policies_are_rejected(brackets: list[AgeBracket]) -> None:
    with pytest.raises(PolicyError):
        build_policy(brackets)


def test_default_policy_starts_at_zero() -> None:
    assert DEFAULT_POLICY.brackets[0].lower_bound == 0


def test_policy_constructor_rejects_empty_table() -> None:
    with pytest.raises(PolicyError):
        LimitPolicy(brackets=())


def test_policy_constructor_rejects_unsorted_table() -> None:
    with pytest.raises(PolicyError):
        LimitPolicy(
            brackets=(
                AgeBracket(lower_bound=0, multiplier=2.5, name="child", minor=True),
                AgeBracket(lower_bound=19, multiplier=6, name="adult", minor=False),
                AgeBracket(lower_bound=12, multiplier=2.5, name="teen", minor=True),
            )
        )


@pytest.mark.parametrize(
    "bracket",
    [
        AgeBracket(lower_bound=3, multiplier=2.5, name="late", minor=True),
        AgeBracket(lower_bound=0, multiplier=math.nan, name="nan", minor=True),
        AgeBracket(lower_bound=0, multiplier=math.inf, name="inf", minor=True),
        AgeBracket(lower_bound=0, multiplier=2.5, name="cap", minor=True, cap_mg=math.nan),
        AgeBracket(lower_bound=0, multiplier=2.5, name="flag", minor="false"),  # type: ignore[arg-type]
    ],
)
def test_policy_constructor_rejects_bad_bracket(bracket: AgeBracket) -> None:
    with pytest.raises(PolicyError):
        LimitPolicy(brackets=(bracket,))
