"""
Fixed decision table behind the pole advisor.

Stateless: every call recomputes from the input alone.
"""

from typing import Optional

from .models import AdvisorInput, Feel, Range, Recommendation


# Advisor bounds. The length floor is higher than the listing bound of 250 cm.
ADVISOR_LENGTH_MIN = 365
ADVISOR_LENGTH_MAX = 520
ADVISOR_WEIGHT_MIN = 100
ADVISOR_WEIGHT_MAX = 210

# Body weight below this share of the pole's weight rating means "go longer".
LIGHT_VAULTER_RATIO = 0.45

HIGH_GRIP_RATIO = 0.85
LOW_GRIP_RATIO = 0.75

MISSING_INPUT = "Vennligst fyll ut nåværende stav for å få anbefalinger."
TOO_SOFT_LONGER = (
    "Siden staven føles for myk og vekten din er under stavens vektmerking, "
    "anbefaler vi en lengre stav."
)
TOO_SOFT_STIFFER = "Siden staven føles for myk, anbefaler vi en stivere stav med høyere vektmerking."
TOO_STIFF_SOFTER = "Siden staven føles for stiv, anbefaler vi en mykerere stav med lavere vektmerking."
PERFECT_SIMILAR = "Siden din nåværende stav fungerer bra, ser vi etter lignende staver."
HIGH_GRIP = "Du griper høyt på staven, som tyder på at du kan være klar for en lengre stav."
LOW_GRIP = "Du griper lavt på staven, som kan tyde på at du trenger mer kontroll."


def _clamp(value: Optional[int], low: int, high: int, fallback: int) -> int:
    return max(low, min(high, value or fallback))


def recommend(data: AdvisorInput) -> Recommendation:
    """
    Suggest length and weight ranges from how the current pole feels.

    Rules:
        - too soft, body weight under 45% of the weight rating: length +10..+15
        - too soft otherwise: weight +5..+10
        - too stiff: weight -10..-5, floored at 100
        - perfect: length and weight +-5

    Both ranges start at the current value and are clamped to the advisor
    bounds. Grip height only adds notes, it never moves the ranges.
    """
    length = data.current_length
    weight = data.current_weight
    if not length or not weight:
        return Recommendation(reasoning=[MISSING_INPUT])

    reasoning: list[str] = []
    length_min, length_max = length, length
    weight_min, weight_max = weight, weight

    if data.feel == Feel.TOO_SOFT:
        if data.body_weight and data.body_weight < weight * LIGHT_VAULTER_RATIO:
            length_min, length_max = length + 10, length + 15
            reasoning.append(TOO_SOFT_LONGER)
        else:
            weight_min, weight_max = weight + 5, weight + 10
            reasoning.append(TOO_SOFT_STIFFER)
    elif data.feel == Feel.TOO_STIFF:
        weight_min = max(ADVISOR_WEIGHT_MIN, weight - 10)
        weight_max = max(ADVISOR_WEIGHT_MIN, weight - 5)
        reasoning.append(TOO_STIFF_SOFTER)
    elif data.feel == Feel.PERFECT:
        length_min, length_max = length - 5, length + 5
        weight_min, weight_max = weight - 5, weight + 5
        reasoning.append(PERFECT_SIMILAR)

    recommendation = Recommendation(
        length=Range(
            min=_clamp(length_min, ADVISOR_LENGTH_MIN, ADVISOR_LENGTH_MAX, ADVISOR_LENGTH_MIN),
            max=_clamp(length_max, ADVISOR_LENGTH_MIN, ADVISOR_LENGTH_MAX, ADVISOR_LENGTH_MAX),
        ),
        weight=Range(
            min=_clamp(weight_min, ADVISOR_WEIGHT_MIN, ADVISOR_WEIGHT_MAX, ADVISOR_WEIGHT_MIN),
            max=_clamp(weight_max, ADVISOR_WEIGHT_MIN, ADVISOR_WEIGHT_MAX, ADVISOR_WEIGHT_MAX),
        ),
        reasoning=reasoning,
    )

    if data.grip_height:
        grip_ratio = data.grip_height / length
        if grip_ratio > HIGH_GRIP_RATIO:
            recommendation.reasoning.append(HIGH_GRIP)
        elif grip_ratio < LOW_GRIP_RATIO:
            recommendation.reasoning.append(LOW_GRIP)

    return recommendation
