"""Terminal input and output for the vending machine, and the screens it prints."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO, TypeVar

from silogvend.machine import ITEMS
from silogvend.money import count_money, denomination_label

RED = "\x1b[0;31m"
GRN = "\x1b[0;32m"
RESET = "\x1b[0m"

INVALID_INPUT = "ERROR: Invalid Input\n\n"
DIVIDER_WIDTH = 125

_T = TypeVar("_T")


class Console:
    """Reads numbers typed by the user and writes text, plain or coloured."""

    def __init__(
        self,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as it is."""
        self._output.write(text)

    def error(self, message: str) -> None:
        """Write a message in red."""
        self.write(f"{RED}{message}{RESET}")

    def success(self, message: str) -> None:
        """Write a message in green."""
        self.write(f"{GRN}{message}{RESET}")

    def _read_line(self) -> str:
        self._output.flush()
        try:
            return self._input()
        except StopIteration as exc:
            raise EOFError("no more input") from exc

    def _read_number(self, prompt: str, parse: Callable[[str], _T]) -> _T:
        while True:
            self.write(prompt)
            text = self._read_line().strip()
            try:
                return parse(text)
            except ValueError:
                self.error(INVALID_INPUT)

    def read_int(self, prompt: str = "") -> int:
        """Ask until a whole number is typed and return it."""
        return self._read_number(prompt, int)

    def read_float(self, prompt: str = "") -> float:
        """Ask until a number is typed and return it."""
        return self._read_number(prompt, float)


def divider() -> str:
    """Return the line drawn between screens."""
    return "=" * DIVIDER_WIDTH + "\n"


def _split_label(index: int) -> tuple[str, str]:
    face, unit = denomination_label(index).split(" ", 1)
    return face, unit


def format_denominations(counts: Sequence[int], money: float) -> str:
    """Return the screen listing every denomination and how many are held."""
    parts = [divider()]
    for number, count in enumerate(counts, start=1):
        parts.append(f"{number}.] {denomination_label(number - 1)}: {count:5d}\t\t\t")
        if number % 3 == 0:
            parts.append("\n\n")
    parts.append("\n\n")
    parts.append(f"Current money: {money:.2f} Pesos\n")
    return "".join(parts)


def format_items(
    prices: Sequence[float],
    stock: Sequence[int],
    order: Sequence[int],
    money: float,
    total: float,
    with_orders: bool,
) -> str:
    """Return the menu of items with prices and stock, and the order when asked."""
    parts = [divider()]
    for start in range(0, len(ITEMS), 3):
        block = range(start, min(start + 3, len(ITEMS)))
        parts.append(
            "".join(
                f"{i + 1}. ] {ITEMS[i]:<10}: {prices[i]:6.2f} Pesos\t\t\t" for i in block
            )
            + "\n"
        )
        parts.append("".join(f"Stock: {stock[i]}\t\t\t\t\t" for i in block) + "\n")
        if with_orders:
            parts.append("".join(f"Order: {order[i]}\t\t\t\t\t" for i in block) + "\n")
        parts.append("\n")
    if with_orders:
        parts.append(divider())
        parts.append(f"Current Money: {money:.2f} Pesos\n")
        parts.append(f"Total Price: {total:.2f} Pesos\n")
    return "".join(parts)


def format_orders(
    order: Sequence[int], prices: Sequence[float], total: float, money: float
) -> str:
    """Return the list of ordered items with their prices, then money and total."""
    ordered = [(name, count, price) for name, count, price in zip(ITEMS, order, prices) if count > 0]
    parts = [
        f"{number}.] {name}: {count} orders\nPrice: {price * count:.2f}\n\n"
        for number, (name, count, price) in enumerate(ordered, start=1)
    ]
    parts.append(f"Current Money: {money:.2f} Pesos\n")
    parts.append(f"Total Price: {total:.2f} Pesos\n\n")
    return "".join(parts)


def format_given(counts: Sequence[int], heading: str) -> str:
    """Return a heading followed by every denomination of which some are held."""
    held = [(index, count) for index, count in enumerate(counts) if count > 0]
    lines = [
        f"{number}.] {denomination_label(index)}: {count}\n"
        for number, (index, count) in enumerate(held, start=1)
    ]
    return heading + "".join(lines)


def format_withdrawal(cashier: Sequence[int], withdraw: Sequence[int]) -> str:
    """Return the register's denominations next to the amounts chosen for withdrawal."""
    parts = [divider()]
    for start in range(0, len(cashier), 3):
        block = range(start, min(start + 3, len(cashier)))
        row = []
        for i in block:
            face, unit = _split_label(i)
            row.append(f"{i + 1}.] {face} {unit:<10}: {cashier[i]:2d}\t\t\t")
        parts.append("".join(row) + "\n")
        parts.append("".join(f"Withdraw: {withdraw[i]}\t\t\t\t" for i in block) + "\n\n")
    parts.append(f"Current cash out: {count_money(withdraw):.2f}\n\n")
    return "".join(parts)