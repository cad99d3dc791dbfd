"""Problem and recommendation message tables.

Selection logic lives in ``caffeine_check.services.assessment``; this module
only holds the ordered templates. Templates may reference ``{total}``,
``{limit}``, ``{excess}`` and ``{remaining}``, all formatted in mg.
"""

from caffeine_check.domain.assessment import Audience, Severity

_SLEEP = "Caffeine this far over your limit can delay sleep onset and reduce deep sleep."
_HEART = "It can raise heart rate and cause palpitations or jitteriness."
_ANXIETY = "It can trigger anxiety, restlessness and irritability."
_STOMACH = "It can upset your stomach and cause acid reflux or nausea."
_HEADACHE = "Heavy use followed by a sudden stop can cause withdrawal headaches."
_DEPENDENCE = "Regular intake at this level builds tolerance and dependence."
_BLOOD_PRESSURE = "It can temporarily raise blood pressure."
_TOXICITY = (
    "Intake this high can cause vomiting, tremors or an irregular heartbeat. "
    "Seek medical help if you feel chest pain, confusion or a racing pulse."
)
_GROWTH = (
    "A developing brain and body are more sensitive to caffeine; lost sleep "
    "can affect growth."
)
_LEARNING = "Poor sleep from caffeine can hurt concentration, memory and learning."
_CALCIUM = "Caffeine-heavy drinks often replace milk and other calcium sources."

PROBLEM_MESSAGES: dict[tuple[Severity, Audience], tuple[str, ...]] = {
    (Severity.MILD, Audience.MINOR): (_SLEEP, _LEARNING, _ANXIETY),
    (Severity.MILD, Audience.ADULT): (_SLEEP, _ANXIETY),
    (Severity.HIGH, Audience.MINOR): (
        _SLEEP,
        _LEARNING,
        _GROWTH,
        _HEART,
        _ANXIETY,
        _CALCIUM,
    ),
    (Severity.HIGH, Audience.ADULT): (
        _SLEEP,
        _HEART,
        _ANXIETY,
        _STOMACH,
        _DEPENDENCE,
    ),
    (Severity.SEVERE, Audience.MINOR): (
        _TOXICITY,
        _HEART,
        _SLEEP,
        _LEARNING,
        _GROWTH,
        _ANXIETY,
        _CALCIUM,
    ),
    (Severity.SEVERE, Audience.ADULT): (
        _TOXICITY,
        _HEART,
        _BLOOD_PRESSURE,
        _SLEEP,
        _ANXIETY,
        _STOMACH,
        _DEPENDENCE,
        _HEADACHE,
    ),
}

REDUCTION_TEMPLATE = (
    "Cut back by at least {excess} mg to get under your daily limit of {limit} mg."
)

OVER_LIMIT_RECOMMENDATIONS: dict[Severity, tuple[str, ...]] = {
    Severity.MILD: (
        "Skip your next caffeinated drink today.",
        "Avoid caffeine in the 6 hours before bed.",
        "Drink water alongside caffeinated drinks to stay hydrated.",
    ),
    Severity.HIGH: (
        "Have no more caffeine for the rest of today.",
        "Drink plenty of water and eat a proper meal.",
        "Avoid caffeine in the 6 hours before bed.",
        "Swap one daily drink for a decaf or caffeine-free option.",
    ),
    Severity.SEVERE: (
        "Stop all caffeine for the rest of today.",
        "If you feel chest pain, a racing heart or shortness of breath, get "
        "medical help right away.",
        "Drink water and rest somewhere calm.",
        "Tomorrow, cut back gradually to avoid withdrawal headaches.",
    ),
}

NEAR_LIMIT_RATIO = 0.8

NEAR_LIMIT_RECOMMENDATIONS: tuple[str, ...] = (
    "You are close to your limit with {remaining} mg left today; "
    "consider stopping here.",
    "Avoid caffeine in the 6 hours before bed.",
    "Choose water or caffeine-free drinks for the rest of the day.",
)

WITHIN_LIMIT_RECOMMENDATIONS: tuple[str, ...] = (
    "Your intake of {total} mg is within your daily limit of {limit} mg.",
    "Keep caffeine to the morning and early afternoon to protect your sleep.",
    "Watch for hidden caffeine in chocolate, tea and soft drinks.",
)
