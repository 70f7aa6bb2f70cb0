import io

import pytest

from silogvend.display import Console
from silogvend.machine import EGG, INITIAL_CASHIER, ITEM_COUNT, RICE, Machine
from silogvend.money import DENOMINATION_COUNT, count_money
from silogvend.vending import accept_denominations, give_change, take_order, vend

HUNDRED = ["9", "1", "0"]


def make_console(lines):
    out = io.StringIO()
    return Console(iter(lines).__next__, out), out


def test_accept_denominations_adds_pieces():
    console, _ = make_console(["4", "3", "0"])
    counts = [0] * DENOMINATION_COUNT
    money = accept_denominations(console, counts)
    assert counts[3] == 3
    assert money == pytest.approx(count_money(counts))


def test_accept_denominations_rejects_bad_selection():
    console, out = make_console(["12", "0"])
    counts = [0] * DENOMINATION_COUNT
    assert accept_denominations(console, counts) == 0
    assert counts == [0] * DENOMINATION_COUNT
    assert "ERROR: Invalid Input" in out.getvalue()


def test_accept_denominations_rejects_negative_amount():
    console, out = make_console(["5", "-2", "0"])
    counts = [0] * DENOMINATION_COUNT
    accept_denominations(console, counts)
    assert counts == [0] * DENOMINATION_COUNT
    assert "ERROR: Invalid Input" in out.getvalue()


def test_give_change_conserves_money():
    console, out = make_console([])
    user = [0] * DENOMINATION_COUNT
    user[8] = 1
    cashier = list(INITIAL_CASHIER)
    before = count_money(user) + count_money(cashier)
    given = give_change(console, user, cashier, count_money(user))
    assert given == pytest.approx(count_money(user))
    assert count_money(user) + count_money(cashier) == pytest.approx(before)
    assert out.getvalue().startswith("Denominations given:\n")


def test_vend_full_order():
    machine = Machine()
    before = machine.cash_total()
    console, out = make_console(HUNDRED + ["1", "0", "1"])
    assert vend(console, machine) is True
    assert machine.stock[0] == 19
    assert machine.stock[RICE] == 19
    assert machine.stock[EGG] == 19
    paid = machine.prices[0] + machine.prices[RICE] + machine.prices[EGG]
    assert machine.cash_total() == pytest.approx(before + paid)
    assert "Given change: 67.50" in out.getvalue()
    assert "Thank you for ordering!" in out.getvalue()


def test_vend_without_money_cancels():
    machine = Machine()
    console, out = make_console(["0", "0"])
    assert vend(console, machine) is False
    assert machine.stock == Machine().stock
    assert "Order canceled." in out.getvalue()


def test_vend_basic_only_cancel_returns_money():
    machine = Machine()
    console, out = make_console(["6", "1", "0", "0", "0"])
    assert vend(console, machine) is False
    assert machine.cashier == list(INITIAL_CASHIER)
    assert "No orders detected" in out.getvalue()


def test_vend_out_of_stock():
    machine = Machine()
    machine.stock[0] = 0
    console, out = make_console(HUNDRED + ["1", "0", "0"])
    assert vend(console, machine) is False
    assert machine.stock[0] == 0
    assert "Out of Stock" in out.getvalue()


def test_vend_insufficient_money_drops_item():
    machine = Machine()
    console, out = make_console(["7", "1", "0", "5", "0", "0", "0"])
    assert vend(console, machine) is False
    assert machine.stock == Machine().stock
    assert machine.cash_total() == pytest.approx(Machine().cash_total())
    assert "insufficient" in out.getvalue()


def test_vend_insufficient_money_then_add_more():
    machine = Machine()
    console, _ = make_console(["7", "1", "0", "5", "1"] + HUNDRED + ["0", "1"])
    assert vend(console, machine) is True
    assert machine.stock[4] == 19


def test_vend_continue_ordering():
    machine = Machine()
    console, _ = make_console(HUNDRED + ["1", "0", "2", "2", "0", "1"])
    assert vend(console, machine) is True
    assert machine.stock[0] == 19
    assert machine.stock[1] == 19


def test_vend_invalid_selection():
    machine = Machine()
    console, out = make_console(HUNDRED + ["42", "0", "0"])
    assert vend(console, machine) is False
    assert "ERROR: Invalid Input" in out.getvalue()


def test_take_order_cancel_gives_all_money_back():
    machine = Machine()
    order = [0] * ITEM_COUNT
    order[RICE] = order[EGG] = 1
    user = [0] * DENOMINATION_COUNT
    user[8] = 1
    original = list(user)
    console, _ = make_console(["0", "0"])
    total = machine.prices[RICE] + machine.prices[EGG]
    assert take_order(console, machine, order, user, count_money(user), total) is False
    assert user == original
    assert order == [0] * ITEM_COUNT
    assert machine.cashier == list(INITIAL_CASHIER)