from __future__ import annotations

from dataclasses import dataclass
from typing import Any

FULL_NAME = "fullName"
SIZE = "size"
TOPPINGS = "toppings"

SIZES: tuple[str, ...] = ("S", "M", "L")


@dataclass(frozen=True)
class FormValues:
    full_name: str = ""
    size: str | None = None  # None until a size is picked
    toppings: tuple[str, ...] = ()  # topping_ids, no duplicates

    def to_payload(self) -> dict[str, Any]:
        return {
            FULL_NAME: self.full_name,
            SIZE: self.size,
            TOPPINGS: list(self.toppings),
        }


@dataclass(frozen=True)
class FormErrors:
    full_name: str = ""
    size: str = ""


@dataclass(frozen=True)
class SubmissionResult:
    success_message: str = ""
    failure_message: str = ""

    @property
    def succeeded(self) -> bool:
        return bool(self.success_message)
