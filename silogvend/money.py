"""Philippine peso denominations and the arithmetic on a tray of them.

A tray is a list of eleven counts, one per denomination, ordered from the
5-centavo coin up to the 500-peso bill.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

FACE_VALUES: tuple[int, ...] = (5, 10, 25, 1, 5, 10, 20, 50, 100, 200, 500)
VALUES: tuple[float, ...] = (
    0.05, 0.10, 0.25, 1.00, 5.00, 10.00, 20.00, 50.00, 100.00, 200.00, 500.00,
)
DENOMINATION_COUNT = len(VALUES)

_CENT_SLOTS = range(2, -1, -1)
_PESO_SLOTS = range(DENOMINATION_COUNT - 1, 2, -1)


def _check_tray(counts: Sequence[int]) -> None:
    if len(counts) != DENOMINATION_COUNT:
        raise ValueError(
            f"expected {DENOMINATION_COUNT} denomination counts, got {len(counts)}"
        )


def _check_index(index: int) -> None:
    if not 0 <= index < DENOMINATION_COUNT:
        raise IndexError(f"no denomination at position {index}")


def denomination_label(index: int) -> str:
    """Return the printed name of a denomination, such as '25 Cents' or '1 Peso'."""
    _check_index(index)
    if index < 3:
        unit = "Cents"
    elif index == 3:
        unit = "Peso"
    else:
        unit = "Pesos"
    return f"{FACE_VALUES[index]} {unit}"


def count_money(counts: Iterable[int]) -> float:
    """Return the peso value of a tray of denomination counts."""
    counts = list(counts)
    _check_tray(counts)
    return sum((value * count for value, count in zip(VALUES, counts)), 0.0)


def add_denomination(counts: MutableSequence[int], selection: int, amount: int) -> float:
    """Put ``amount`` pieces of denomination ``selection`` into the tray.

    Returns the new value of the tray.
    """
    _check_tray(counts)
    _check_index(selection)
    if amount < 0:
        raise ValueError("the number of pieces cannot be negative")
    counts[selection] += amount
    return count_money(counts)


def _dispense(
    remaining: int,
    slots: Iterable[int],
    user: MutableSequence[int],
    cashier: MutableSequence[int],
) -> None:
    for slot in slots:
        pieces = min(remaining // FACE_VALUES[slot], cashier[slot])
        remaining -= pieces * FACE_VALUES[slot]
        user[slot] += pieces
        cashier[slot] -= pieces


def make_change(
    amount: float,
    user: MutableSequence[int],
    cashier: MutableSequence[int],
) -> float:
    """Move the user's tray into the cashier and pay ``amount`` back out of it.

    The whole pesos and the centavos are paid separately, each greedily from
    the largest denomination the cashier still holds; centavos below a
    whole centavo are dropped. The user's tray ends up holding the change,
    whose value is returned.
    """
    _check_tray(user)
    _check_tray(cashier)
    if amount < 0:
        raise ValueError("change cannot be negative")

    whole, fraction = divmod(int(amount * 100), 100)

    for slot, held in enumerate(user):
        cashier[slot] += held
    user[:] = [0] * DENOMINATION_COUNT

    _dispense(whole, _PESO_SLOTS, user, cashier)
    _dispense(fraction, _CENT_SLOTS, user, cashier)
    return count_money(user)


def has_add_on(order: Sequence[int]) -> bool:
    """Tell whether an order holds more than the single rice and egg it starts with."""
    *add_ons, rice, egg = order
    return any(count > 0 for count in add_ons) or rice > 1 or egg > 1