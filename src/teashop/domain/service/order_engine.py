"""Domain service: the rules for building and judging a drink.

Pure functions only.  The recipe of a drink is derived from its name, so
the same name always yields the same ingredients in the same order.
"""

from __future__ import annotations

from collections.abc import Sequence

BASE_INGREDIENTS: tuple[str, ...] = ("Tea", "Milk")

# Checked in this order; the order is also the display order.
INGREDIENT_TOKENS: tuple[tuple[str, str], ...] = (
    ("Taro", "Taro"),
    ("Matcha", "Matcha"),
    ("Strawberry", "Strawberry"),
    ("Sugar", "Brown Sugar"),
    ("Boba", "Tapioca"),
)

FAST_SERVICE_SECONDS = 5.0
FAST_SCORE = 150
STANDARD_SCORE = 100
VIP_MULTIPLIER = 1.5


def derive_ingredients(drink_name: str) -> tuple[str, ...]:
    """Return the base pair plus one ingredient per token found in the name.

    Token matching is a case-sensitive substring check.
    """
    extras = [
        ingredient
        for token, ingredient in INGREDIENT_TOKENS
        if token in drink_name
    ]
    return BASE_INGREDIENTS + tuple(extras)


def check_correctness(required: Sequence[str], answer: str) -> bool:
    """True if every required ingredient appears in some comma-separated token.

    Matching is case-insensitive and by substring, so "brown sugar syrup"
    satisfies "Brown Sugar".  Extra tokens and token order are ignored.
    """
    if not answer or not answer.strip():
        return False

    provided = [part.strip().lower() for part in answer.split(",")]
    return all(
        any(ingredient.lower() in token for token in provided)
        for ingredient in required
    )


def score(was_correct: bool, elapsed_seconds: float) -> int:
    """Points for a finished order.

    Exactly ``FAST_SERVICE_SECONDS`` counts as standard service.
    """
    if not was_correct:
        return 0
    return FAST_SCORE if elapsed_seconds < FAST_SERVICE_SECONDS else STANDARD_SCORE


def apply_vip(points: int, is_vip: bool) -> int:
    """Apply the VIP bonus, truncating toward zero."""
    if not is_vip:
        return points
    return int(points * VIP_MULTIPLIER)
