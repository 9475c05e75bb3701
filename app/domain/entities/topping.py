from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Topping:
    topping_id: str
    text: str


# Fixed catalog, in display order.
TOPPINGS: tuple[Topping, ...] = (
    Topping(topping_id="1", text="Pepperoni"),
    Topping(topping_id="2", text="Green Peppers"),
    Topping(topping_id="3", text="Pineapple"),
    Topping(topping_id="4", text="Mushrooms"),
    Topping(topping_id="5", text="Ham"),
)


def get_topping(topping_id: str) -> Topping | None:
    for topping in TOPPINGS:
        if topping.topping_id == topping_id:
            return topping
    return None
