"""The machine's main menu and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from silogvend.display import INVALID_INPUT, Console, divider
from silogvend.machine import PASSWORD, Machine
from silogvend.maintenance import maintenance_menu
from silogvend.vending import vend


def _authorised(console: Console) -> bool:
    entered = console.read_int("Please enter the password: ")
    if entered != PASSWORD:
        console.error("ERROR: Incorrect password\n\n")
        return False
    return True


def run(console: Console, machine: Machine) -> None:
    """Show the main menu until the machine is shut down with the password."""
    while True:
        console.write(divider())
        console.write("1. Silog Vending Feature\n")
        console.write("2. Maintenance Feature\n")
        console.write("3. Shutdown Machine\n")
        choice = console.read_int("Please input a feature: ")
        if choice == 1:
            vend(console, machine)
        elif choice == 2:
            if _authorised(console):
                console.success("Welcome, User!\n\n")
                maintenance_menu(console, machine)
        elif choice == 3:
            if _authorised(console):
                console.success("Shutting down...\n\n")
                return
        else:
            console.error(INVALID_INPUT)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the vending machine on the terminal."""
    parser = argparse.ArgumentParser(
        prog="silogvend", description="A silog meal vending machine."
    )
    parser.parse_args(argv)
    console = Console()
    try:
        run(console, Machine())
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 1
    return 0