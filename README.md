# silogvend

A terminal simulation of a vending machine that serves a silog meal. Every
meal starts with one serving of rice and one egg. Customers add as many
add-ons as they like and pay in Philippine coins and bills. The machine
gives change from its own cash register. It pays the whole pesos and the
centavos separately, and each part uses the largest denominations the
register still holds.

## Installing

```
pip install .
```

## Running the machine

```
silogvend
```

The command takes no options. It exits with status 0 after a shutdown. It
exits with status 1 when input ends or the run is interrupted.

The main menu offers three choices:

1. **Silog Vending Feature**
   - Insert money first.
   - Choose add-ons: Hotdog, Longganisa, Bacon, Sausage, Tapa, Tocino, Rice
     and Egg.
   - Type 0 to finish. If the order holds only the basic rice and egg, the
     machine offers to cancel it. Otherwise it shows the order and asks you
     to confirm it, cancel it or keep ordering.
   - If the money inserted runs short, the machine asks for more money or
     drops the last item. An item whose stock would run out is refused.
   - On confirmation the machine prints a receipt, hands out the change and
     takes the served items out of stock.
   - On cancellation it hands back the money inserted.
2. **Maintenance Feature** asks for the owner's numeric password. From here
   the owner can:
   - view the inventory;
   - change item prices, or reset them all to the defaults;
   - restock servings;
   - manage the cash register: view it, add coins and bills, or cash out.
     A cash out either takes chosen denominations, or takes a stated amount
     in the fewest pieces, with a warning when the exact amount cannot be
     paid.
3. **Shutdown Machine** also asks for the password.

The accepted denominations are 5, 10 and 25 centavos and 1, 5, 10, 20, 50,
100, 200 and 500 pesos. Every item starts with 20 servings in stock.

## Using it from Python

The package has these modules:

- `silogvend.money` holds the denomination arithmetic on a tray of eleven
  counts, ordered from the 5-centavo coin up to the 500-peso bill. It
  provides `count_money`, `add_denomination`, `make_change`,
  `denomination_label` and `has_add_on`.
- `silogvend.machine.Machine` holds the machine's state. Its fields are
  `stock`, `prices` and `cashier`. Its methods are `restock`, `set_price`,
  `reset_prices` and `cash_total`. Items are numbered from 0, starting with
  Hotdog.
- `silogvend.display` has `Console`, which reads numbers and writes plain,
  red or green text. It also has the `format_*` functions that build each
  screen.
- `silogvend.vending` serves a customer. `vend` handles a whole meal. The
  steps are `accept_denominations`, `take_order` and `give_change`.
- `silogvend.maintenance` has the owner menus, such as `maintenance_menu`,
  `change_price`, `restock_inventory`, `denomination_cash_out` and
  `value_cash_out`.
- `silogvend.cli` has `run`, the main menu loop, and `main`, the command.

```python
from silogvend.machine import Machine
from silogvend.money import DENOMINATION_COUNT, make_change

machine = Machine()
machine.restock(0, 5)         # five more hotdog servings
machine.set_price(0, 10.0)    # hotdogs now cost 10 pesos
print(machine.cash_total())

paid = [0] * DENOMINATION_COUNT
paid[6] = 1                   # one 20-peso bill
change = make_change(5.0, paid, machine.cashier)
print(change, paid)           # 5.0, with one 5-peso coin in the tray
```

`Console(input_func, output)` takes a function that returns one line of
input each time it is called, and a text stream to write to. With these,
the menus can run against scripted input as well as a real terminal:

```python
import io
from silogvend.display import Console
from silogvend.machine import Machine
from silogvend.vending import vend

lines = iter(["0", "0"])      # no money inserted, then cancel
console = Console(lambda: next(lines), io.StringIO())
print(vend(console, Machine()))   # False
```

## What it does not do

The machine keeps its stock, prices and cash register in memory only.
Nothing is saved between runs. Each start of `silogvend` begins with full
stock, the default prices and the same starting cash register.

## Running the tests

```
pip install .[test]
pytest
```