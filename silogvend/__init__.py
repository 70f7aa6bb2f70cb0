"""A terminal silog meal vending machine: ordering, change-making and owner maintenance."""

__version__ = "1.1.1"