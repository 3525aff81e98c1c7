"""Application service: who walks in and what they want."""

from __future__ import annotations

from teashop.application.ports import RandomSource
from teashop.domain.model.order import Customer, Order

CUSTOMER_NAMES: tuple[str, ...] = (
    "Alice", "Bob", "Charlie", "Diana", "Edward", "Fiona", "George", "Zoe",
)
DRINK_MENU: tuple[str, ...] = (
    "Milk Tea",
    "Taro Milk Tea",
    "Matcha Milk Tea",
    "Strawberry Boba",
    "Brown Sugar Boba",
)


class CustomerGenerator:

    def __init__(self, random_source: RandomSource, vip_probability: float) -> None:
        self._random = random_source
        self._vip_probability = vip_probability

    def generate(self, count: int) -> list[Customer]:
        """Draw *count* independent customers in arrival order.

        Each draw consumes, in order: one ``uniform()`` for the VIP roll,
        one ``int_below()`` for the name and one for the drink.
        """
        return [self._next_customer() for _ in range(count)]

    def _next_customer(self) -> Customer:
        is_vip = self._random.uniform() < self._vip_probability
        name = CUSTOMER_NAMES[self._random.int_below(len(CUSTOMER_NAMES))]
        drink = DRINK_MENU[self._random.int_below(len(DRINK_MENU))]
        return Customer(name=name, is_vip=is_vip, order=Order.for_drink(drink))
