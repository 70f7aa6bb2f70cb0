"""Serving one customer: taking money, taking the order and giving change."""

from __future__ import annotations

from collections.abc import MutableSequence

from silogvend.display import (
    INVALID_INPUT,
    Console,
    divider,
    format_denominations,
    format_given,
    format_items,
    format_orders,
)
from silogvend.machine import EGG, ITEM_COUNT, RICE, Machine
from silogvend.money import (
    DENOMINATION_COUNT,
    add_denomination,
    count_money,
    has_add_on,
    make_change,
)


def accept_denominations(console: Console, counts: MutableSequence[int]) -> float:
    """Let the user put denominations into a tray until 0 is typed.

    Returns the value of the tray.
    """
    while True:
        console.write(format_denominations(counts, count_money(counts)))
        console.write("Type 0 if done\n\n")
        selection = console.read_int("Please enter a denomination: ")
        if selection == 0:
            return count_money(counts)
        if 1 <= selection <= DENOMINATION_COUNT:
            amount = console.read_int("Please enter the amount of the denomination: ")
            if amount >= 0:
                add_denomination(counts, selection - 1, amount)
            else:
                console.error(INVALID_INPUT)
        else:
            console.error(INVALID_INPUT)


def give_change(
    console: Console,
    user: MutableSequence[int],
    cashier: MutableSequence[int],
    amount: float,
) -> float:
    """Pay ``amount`` back to the user, show the denominations and return their value."""
    given = make_change(amount, user, cashier)
    console.write(format_given(user, "Denominations given:\n"))
    return given


def _cancel(
    console: Console,
    order: MutableSequence[int],
    user: MutableSequence[int],
    cashier: MutableSequence[int],
    money: float,
) -> None:
    order[:] = [0] * len(order)
    give_change(console, user, cashier, money)


def take_order(
    console: Console,
    machine: Machine,
    order: MutableSequence[int],
    user: MutableSequence[int],
    money: float,
    total: float,
) -> bool:
    """Take add-ons until the order is confirmed or cancelled.

    Returns True when the order was confirmed and served, False when cancelled.
    """
    prices, stock = machine.prices, machine.stock
    while True:
        console.write(format_items(prices, stock, order, money, total, True))
        console.write("Type 0 if done\n\n")
        selection = console.read_int("Please enter an add-on you would like to choose: ")

        if 1 <= selection <= ITEM_COUNT:
            item = selection - 1
            if order[item] + 1 > stock[item]:
                console.error("ERROR: Out of Stock! Sorry!\n")
                continue
            order[item] += 1
            total += prices[item]
            while money < total:
                console.error("The given money is insufficient. ")
                console.write("Would you like to add more money to the machine?\n")
                console.write("Press 1 to add more denominations\n")
                console.write("Press 0 to cancel the last item\n")
                decision = console.read_int()
                if decision == 1:
                    money = accept_denominations(console, user)
                elif decision == 0:
                    total -= prices[item]
                    order[item] -= 1
                    break
                else:
                    console.error(INVALID_INPUT)

        elif selection == 0 and not has_add_on(order):
            while True:
                console.write("No orders detected other than the basic silog\n")
                console.write("Would you like to cancel the order?\n")
                console.write("Press 1 to continue the order\n")
                console.write("Press 0 to cancel the order\n")
                choice = console.read_int()
                if choice == 0:
                    console.write("Order canceled.\n")
                    _cancel(console, order, user, machine.cashier, money)
                    return False
                if choice == 1:
                    break
                console.error(INVALID_INPUT)

        elif selection == 0:
            while True:
                console.write(divider())
                console.write("Current orders:\n")
                console.write(format_orders(order, prices, total, money))
                console.write("Confirm order?\n")
                console.write("Press 0 to cancel the order\n")
                console.write("Press 1 to confirm the order\n")
                console.write("Press 2 to continue ordering\n")
                choice = console.read_int()
                if choice == 0:
                    console.write(divider())
                    console.write("\nOrder canceled.\n\n")
                    _cancel(console, order, user, machine.cashier, money)
                    return False
                if choice == 1:
                    console.write(divider())
                    console.write("\nReceipt:\n\n")
                    console.write(format_orders(order, prices, total, money))
                    console.write(f"Money: {money:.2f}\n")
                    console.write(f"Price: {total:.2f}\n")
                    console.write(f"Change: {money - total:.2f}\n\n")
                    given = give_change(console, user, machine.cashier, money - total)
                    console.write(f"\nGiven change: {given:.2f}\n")
                    console.success("\nPlease get your silog in the tray bin\n")
                    console.write("Thank you for ordering!\n")
                    for item, count in enumerate(order):
                        stock[item] -= count
                    return True
                if choice == 2:
                    break
                console.error(INVALID_INPUT)

        else:
            console.error(INVALID_INPUT)


def vend(console: Console, machine: Machine) -> bool:
    """Serve one silog meal, starting with one rice and one egg.

    Returns True when a meal was served, False when the order was cancelled.
    """
    user = [0] * DENOMINATION_COUNT
    order = [0] * ITEM_COUNT
    order[RICE] = 1
    order[EGG] = 1
    total = machine.prices[RICE] + machine.prices[EGG]

    console.write(format_items(machine.prices, machine.stock, order, 0.0, total, False))
    while True:
        money = accept_denominations(console, user)
        if money > 0:
            break
        while True:
            console.write("No denominations placed, would you like to cancel the order?\n")
            console.write("Press 1 to continue the order\n")
            console.write("Press 0 to cancel the order\n")
            decision = console.read_int()
            if decision == 0:
                console.write("Order canceled.\n")
                return False
            if decision == 1:
                break
            console.error(INVALID_INPUT)

    return take_order(console, machine, order, user, money, total)