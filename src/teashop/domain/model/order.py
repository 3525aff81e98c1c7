"""Order and Customer: one drink request and the person who made it.

A Customer exclusively owns its Order. Both are created by the customer
generator and thrown away after being served; neither is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from teashop.domain.exceptions import ValidationError
from teashop.domain.service import order_engine


@dataclass
class Order:
    """A single drink order.

    Use ``Order.for_drink()`` so the required ingredients are always derived
    from the drink name.  ``complete()`` is the only mutation and may happen
    exactly once.
    """

    drink_name: str
    required_ingredients: tuple[str, ...]
    resolved: bool = False
    was_correct: bool = False
    elapsed_seconds: float = 0.0

    @staticmethod
    def for_drink(drink_name: str) -> Order:
        if not drink_name or not drink_name.strip():
            raise ValidationError("Drink name is required")
        return Order(
            drink_name=drink_name,
            required_ingredients=order_engine.derive_ingredients(drink_name),
        )

    def complete(self, was_correct: bool, elapsed_seconds: float) -> None:
        if self.resolved:
            raise ValidationError(f"Order for {self.drink_name} is already complete")
        if elapsed_seconds < 0:
            raise ValidationError("Elapsed time cannot be negative")
        self.was_correct = was_correct
        self.elapsed_seconds = elapsed_seconds
        self.resolved = True

    def check(self, answer: str) -> bool:
        return order_engine.check_correctness(self.required_ingredients, answer)

    @property
    def score(self) -> int:
        if not self.resolved:
            return 0
        return order_engine.score(self.was_correct, self.elapsed_seconds)


@dataclass
class Customer:
    name: str
    is_vip: bool
    order: Order

    @property
    def greeting(self) -> str:
        return "I expect perfection." if self.is_vip else "Hi! Can I get a drink?"

    @property
    def display_name(self) -> str:
        return f"{self.name} [VIP]" if self.is_vip else self.name

    def earned_score(self) -> int:
        """Points this customer contributes, VIP bonus included."""
        return order_engine.apply_vip(self.order.score, self.is_vip)
