"""State of the silog vending machine: stock, prices and the cash register."""

from __future__ import annotations

from dataclasses import dataclass, field

from silogvend.money import count_money

ITEMS: tuple[str, ...] = (
    "Hotdog", "Longganisa", "Bacon", "Sausage", "Tapa", "Tocino", "Rice", "Egg",
)
ITEM_COUNT = len(ITEMS)
RICE = ITEMS.index("Rice")
EGG = ITEMS.index("Egg")

DEFAULT_PRICES: tuple[float, ...] = (9.50, 20.75, 12.00, 35.00, 22.50, 18.00, 15.00, 8.00)
INITIAL_CASHIER: tuple[int, ...] = (20, 20, 20, 10, 10, 10, 5, 4, 5, 0, 0)
INITIAL_STOCK = 20
PASSWORD = 123456


def _check_item(item: int) -> None:
    if not 0 <= item < ITEM_COUNT:
        raise IndexError(f"no item at position {item}")


@dataclass
class Machine:
    """Servings in stock, item prices and the denominations held by the register."""

    stock: list[int] = field(default_factory=lambda: [INITIAL_STOCK] * ITEM_COUNT)
    prices: list[float] = field(default_factory=lambda: list(DEFAULT_PRICES))
    cashier: list[int] = field(default_factory=lambda: list(INITIAL_CASHIER))

    def reset_prices(self) -> None:
        """Put every item back at its default price."""
        self.prices[:] = DEFAULT_PRICES

    def restock(self, item: int, servings: int) -> int:
        """Add servings of an item and return its new stock."""
        _check_item(item)
        if servings < 0:
            raise ValueError("restocked servings cannot be negative")
        self.stock[item] += servings
        return self.stock[item]

    def set_price(self, item: int, price: float) -> None:
        """Give an item a new, positive price."""
        _check_item(item)
        if price <= 0:
            raise ValueError("a price must be positive")
        self.prices[item] = price

    def cash_total(self) -> float:
        """Return the peso value held in the register."""
        return count_money(self.cashier)