"""Owner features: the inventory and the cash register."""

from __future__ import annotations

from silogvend.display import (
    INVALID_INPUT,
    Console,
    divider,
    format_denominations,
    format_given,
    format_items,
    format_withdrawal,
)
from silogvend.machine import ITEM_COUNT, Machine
from silogvend.money import DENOMINATION_COUNT, count_money
from silogvend.vending import accept_denominations, give_change

_SMALLEST_PIECE = 0.05


def _show_items(console: Console, machine: Machine) -> None:
    order = [0] * ITEM_COUNT
    console.write(format_items(machine.prices, machine.stock, order, 0.0, 0.0, False))


def maintenance_menu(console: Console, machine: Machine) -> None:
    """Offer the inventory and cash register features until the owner goes back."""
    while True:
        console.write(divider())
        console.write("1. Inventory Features\n")
        console.write("2. Cash Register Features\n")
        console.write("3. Main Menu\n")
        choice = console.read_int("Please input a feature: ")
        if choice == 1:
            inventory_menu(console, machine)
        elif choice == 2:
            cash_register_menu(console, machine)
        elif choice == 3:
            return
        else:
            console.error(INVALID_INPUT)


def inventory_menu(console: Console, machine: Machine) -> None:
    """Let the owner view the inventory, change prices and restock items."""
    while True:
        console.write(divider())
        console.write("1. View Inventory\n")
        console.write("2. Modify Price\n")
        console.write("3. Restock Inventory\n")
        console.write("4. Back to Maintenance Features\n")
        choice = console.read_int("Please input a feature: ")
        if choice == 1:
            _show_items(console, machine)
        elif choice == 2:
            change_price(console, machine)
        elif choice == 3:
            restock_inventory(console, machine)
        elif choice == 4:
            return
        else:
            console.error(INVALID_INPUT)


def change_price(console: Console, machine: Machine) -> None:
    """Change item prices one at a time, or reset them all, until 0 is typed."""
    while True:
        _show_items(console, machine)
        console.write("Type 0 if done\n")
        console.write("Type -1 to reset to default prices\n\n")
        selection = console.read_int("Please select the item to change price: ")
        if 1 <= selection <= ITEM_COUNT:
            console.write("Setting the price to 0 will cancel the price change\n")
            price = console.read_float("New Price: ")
            if price > 0:
                machine.set_price(selection - 1, price)
            elif price == 0:
                console.write("Price was set to 0. Price change canceled.\n")
            else:
                console.error(INVALID_INPUT)
        elif selection == -1:
            machine.reset_prices()
            console.success("Item prices resetted\n")
        elif selection == 0:
            return
        else:
            console.error(INVALID_INPUT)


def restock_inventory(console: Console, machine: Machine) -> None:
    """Add servings to items until 0 is typed."""
    while True:
        _show_items(console, machine)
        console.write("Type 0 if done\n\n")
        selection = console.read_int("Please select the item to restock: ")
        if 1 <= selection <= ITEM_COUNT:
            servings = console.read_int("How many servings are restocked: ")
            if servings >= 0:
                machine.restock(selection - 1, servings)
            else:
                console.error(INVALID_INPUT)
        elif selection == 0:
            return
        else:
            console.error(INVALID_INPUT)


def cash_register_menu(console: Console, machine: Machine) -> None:
    """Let the owner view, restock or cash out the register."""
    while True:
        console.write(divider())
        console.write("1. View Cash Register\n")
        console.write("2. Restock Cash Register\n")
        console.write("3. Cash Out\n")
        console.write("4. Back to Maintenance Features\n")
        choice = console.read_int("Please input a feature: ")
        if choice == 1:
            console.write(format_denominations(machine.cashier, machine.cash_total()))
        elif choice == 2:
            accept_denominations(console, machine.cashier)
        elif choice == 3:
            cash_out(console, machine)
        elif choice == 4:
            return
        else:
            console.error(INVALID_INPUT)


def cash_out(console: Console, machine: Machine) -> float:
    """Ask how to withdraw and do it; return the value taken out of the register."""
    console.write(divider())
    while True:
        console.write("1. Cash out by Denominations\n")
        console.write("2. Cash out by Quantity\n")
        console.write("3. Cancel\n")
        mode = console.read_int("Please pick the mode of withdrawal: ")
        if mode == 1:
            return denomination_cash_out(console, machine)
        if mode == 2:
            return value_cash_out(console, machine)
        if mode == 3:
            return 0.0
        console.error(INVALID_INPUT)


def denomination_cash_out(console: Console, machine: Machine) -> float:
    """Withdraw chosen denominations; return the value taken out of the register."""
    cashier = machine.cashier
    withdraw = [0] * DENOMINATION_COUNT
    while True:
        console.write(format_withdrawal(cashier, withdraw))
        console.write("Type 0 if done\n")
        console.write("Type -1 to cancel\n\n")
        selection = console.read_int("Please enter a denomination: ")
        if 1 <= selection <= DENOMINATION_COUNT:
            slot = selection - 1
            amount = console.read_int("Please enter the amount of the denomination: ")
            if amount < 0:
                console.error(INVALID_INPUT)
            elif withdraw[slot] + amount > cashier[slot]:
                console.error("ERROR: Not enough denominations\n\n")
            else:
                withdraw[slot] += amount
        elif selection == 0:
            value = count_money(withdraw)
            if value <= 0:
                console.write("No denominations inputted. Cash out canceled.\n")
                return 0.0
            console.write(format_given(withdraw, "Withdrawed denominations:\n\n"))
            console.write("\n")
            console.write(f"Withdrawed cash: {value:.2f}\n")
            for slot, count in enumerate(withdraw):
                cashier[slot] -= count
            return value
        elif selection == -1:
            console.write("Cash out canceled.\n")
            return 0.0
        else:
            console.error(INVALID_INPUT)


def value_cash_out(console: Console, machine: Machine) -> float:
    """Withdraw a stated amount in the fewest pieces; return the value taken out."""
    available = machine.cash_total()
    console.write(format_denominations(machine.cashier, available))
    console.write("Type 0 if to cancel\n\n")
    amount = console.read_float("Please enter a value to withdraw: ")

    if amount >= _SMALLEST_PIECE:
        if amount > available:
            console.error("ERROR: Not enough money\n\n")
            return 0.0
        console.write(divider())
        withdraw = [0] * DENOMINATION_COUNT
        given = give_change(console, withdraw, machine.cashier, amount)
        console.write(f"\nTotal withdrawal: {given:.2f}\n")
        if abs(given - amount) >= 0.005:
            console.error("Warning: ")
            console.write("Unable to dispense exact stated amount.\n")
        return given
    if amount == 0:
        console.write("Value of 0 was inputted. Cash out canceled.\n")
    elif amount < 0:
        console.error(INVALID_INPUT)
    else:
        console.error("ERROR: Not dispensable by denominations\n\n")
    return 0.0