import io

import pytest

from silogvend.display import (
    GRN,
    RED,
    RESET,
    Console,
    divider,
    format_denominations,
    format_given,
    format_items,
    format_orders,
    format_withdrawal,
)
from silogvend.machine import DEFAULT_PRICES, ITEMS, ITEM_COUNT
from silogvend.money import DENOMINATION_COUNT, count_money, denomination_label


def make_console(lines):
    out = io.StringIO()
    return Console(iter(lines).__next__, out), out


def test_divider_is_a_line_of_equals_signs():
    line = divider()
    assert line == "=" * 125 + "\n"


def test_error_is_red():
    console, out = make_console([])
    console.error("boom")
    assert out.getvalue() == RED + "boom" + RESET
    assert RED == "\x1b[0;31m" and RESET == "\x1b[0m"


def test_success_is_green():
    console, out = make_console([])
    console.success("done")
    assert out.getvalue() == GRN + "done" + RESET


def test_write_is_plain():
    console, out = make_console([])
    console.write("hello")
    assert out.getvalue() == "hello"


def test_read_int_writes_prompt_and_parses():
    console, out = make_console(["42"])
    assert console.read_int("Number: ") == 42
    assert out.getvalue() == "Number: "


def test_read_int_asks_again_after_bad_input():
    console, out = make_console(["abc", " 7 "])
    assert console.read_int("N: ") == 7
    assert "ERROR: Invalid Input" in out.getvalue()
    assert out.getvalue().count("N: ") == 2


def test_read_float_parses():
    console, _ = make_console(["2.5"])
    assert console.read_float() == 2.5


def test_exhausted_input_raises_eof():
    console, _ = make_console([])
    with pytest.raises(EOFError):
        console.read_int("N: ")


def test_format_denominations_lists_all_and_money():
    counts = list(range(DENOMINATION_COUNT))
    text = format_denominations(counts, 12.34)
    assert text.startswith(divider())
    for index in range(DENOMINATION_COUNT):
        assert f"{index + 1}.] {denomination_label(index)}:" in text
    assert text.endswith("Current money: 12.34 Pesos\n")


def test_format_items_without_orders():
    text = format_items(list(DEFAULT_PRICES), [20] * ITEM_COUNT, [0] * ITEM_COUNT, 0, 0, False)
    assert text.count("Stock: 20") == ITEM_COUNT
    assert "Order:" not in text
    assert "Total Price" not in text
    for name in ITEMS:
        assert name in text


def test_format_items_with_orders():
    order = [0] * ITEM_COUNT
    order[0] = 3
    text = format_items(list(DEFAULT_PRICES), [20] * ITEM_COUNT, order, 100.0, 42.5, True)
    assert text.count("Order:") == ITEM_COUNT
    assert "Order: 3" in text
    assert "Current Money: 100.00 Pesos\n" in text
    assert text.endswith("Total Price: 42.50 Pesos\n")


def test_format_orders_lists_only_ordered_items():
    order = [0] * ITEM_COUNT
    order[2] = 2
    order[-1] = 1
    text = format_orders(order, list(DEFAULT_PRICES), 40.0, 50.0)
    assert f"1.] {ITEMS[2]}: 2 orders\n" in text
    assert f"2.] {ITEMS[-1]}: 1 orders\n" in text
    assert ITEMS[0] not in text
    assert text.endswith("Current Money: 50.00 Pesos\nTotal Price: 40.00 Pesos\n\n")


def test_format_given_skips_empty_slots():
    counts = [0] * DENOMINATION_COUNT
    counts[3] = 2
    counts[8] = 1
    text = format_given(counts, "Heading:\n")
    assert text == (
        f"Heading:\n1.] {denomination_label(3)}: 2\n2.] {denomination_label(8)}: 1\n"
    )


def test_format_given_empty_is_heading_only():
    assert format_given([0] * DENOMINATION_COUNT, "Heading:\n") == "Heading:\n"


def test_format_withdrawal_shows_both_trays():
    cashier = [5] * DENOMINATION_COUNT
    withdraw = [0] * DENOMINATION_COUNT
    withdraw[4] = 2
    text = format_withdrawal(cashier, withdraw)
    assert text.count("Withdraw:") == DENOMINATION_COUNT
    assert "Withdraw: 2" in text
    assert "11.] 500 Pesos" in text
    assert text.endswith(f"Current cash out: {count_money(withdraw):.2f}\n\n")