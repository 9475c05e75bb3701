#!/usr/bin/env python3
"""
Interactive local order form harness (no HTTP server, no browser).

Usage:
  python3 scripts/order_local.py

Commands:
  name <text>        change the full name
  size <S|M|L>       change the size (empty clears it)
  on <topping_id>    check a topping
  off <topping_id>   uncheck a topping
  submit             submit the order
  /quit              leave

Uses the gateway chosen by app.wiring (set ORDER_GATEWAY=mock to stay offline).
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.exceptions import UnknownFieldError, UnknownToppingError
from app.application.use_cases.order_form import OrderFormController
from app.domain.entities.order_form import FULL_NAME, SIZE
from app.domain.entities.topping import TOPPINGS, get_topping
from app.wiring.dependencies import build_order_form_controller


def _print_state(controller: OrderFormController) -> None:
    values = controller.values
    toppings = ", ".join(get_topping(t).text for t in values.toppings) or "-"
    print("-" * 60)
    print(f"full name : {values.full_name!r}  {controller.errors.full_name}")
    print(f"size      : {values.size!r}  {controller.errors.size}")
    print(f"toppings  : {toppings}")
    print(f"submit    : {'enabled' if controller.submit_enabled else 'disabled'}")
    if controller.success_message:
        print(f"SUCCESS   : {controller.success_message}")
    if controller.failure_message:
        print(f"FAILURE   : {controller.failure_message}")
    print("-" * 60)


async def _handle(controller: OrderFormController, line: str) -> None:
    command, _, arg = line.partition(" ")
    if command == "name":
        await controller.on_field_change(FULL_NAME, arg)
    elif command == "size":
        await controller.on_field_change(SIZE, arg.strip())
    elif command in {"on", "off"}:
        await controller.on_topping_toggle(arg.strip(), command == "on")
    elif command == "submit":
        await controller.on_submit()
    else:
        print(f"Unknown command: {command}")


async def main() -> None:
    controller = build_order_form_controller()
    print("\nLocal Order Form Harness")
    print("Toppings: " + ", ".join(f"{t.topping_id}={t.text}" for t in TOPPINGS))
    _print_state(controller)

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue
        if line in {"/quit", "/exit"}:
            break
        try:
            await _handle(controller, line)
        except (UnknownFieldError, UnknownToppingError) as e:
            print(f"Error: {e}")
            continue
        _print_state(controller)


if __name__ == "__main__":
    asyncio.run(main())
