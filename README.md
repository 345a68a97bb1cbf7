# parlourkit

Two interactive terminal programs behind one main menu:

- **Bakery** – admins keep a menu of items; customers view the menu,
  place orders, get an order id, look an order up again and place a
  fresh order to replace one.
- **Games** – hangman and a 1–100 number guessing game.

## Install

```
pip install .
```

## Run

```
parlourkit
```

The main menu offers `1` (bakery), `2` (games) and `3` (exit); any
other number, or the end of input, also quits.

By default the bakery keeps its files in a `bakery/` directory relative
to where the command is started. Another directory can be given:

```
parlourkit --root /path/to/shop
```

Files in that directory:

- `menu.csv` – one `name,quantity,price` line per item.
- `admin.csv` – one `username,password` line per admin account.
- `id_alloted.csv` – the order ids issued so far; the first order gets
  id 850.
- `customer.csv` – every receipt, appended in order.
- `<id>.csv` – the receipt of a single order.

Inside the bakery, `1` is the admin login, `2` the customer menu and
`3` goes back. The games menu takes `1` for number guessing, `2` for
hangman and `4` to go back. Hangman always uses the word `ankit` with
six wrong guesses allowed.

## Library use

The pieces work without the terminal too:

```python
from datetime import datetime
from parlourkit.bakery import BakeryStore, MenuItem
from parlourkit.games import Hangman, NumberGuess

store = BakeryStore("bakery")
store.new_menu([MenuItem("bun", 10, 2.5)])
order = store.place_order("Ada", [("bun", 3)], datetime.now())
print(order.render())
print(store.order_text(order.order_id))

game = Hangman("ankit", 6)
game.guess("a")
print(game.masked())      # a _ _ _ _

round_ = NumberGuess(42)
print(round_.guess(50))   # Hint.TOO_HIGH
```

Items that are not on the menu are left out of an order and listed in
`Order.missing`. `BakeryStore.order_text` raises `OrderNotFoundError`
for an unknown id.

`BakeryConsole`, `play_hangman`, `play_number_guessing`, `game_menu`
and `parlourkit.cli.run` take `read` and `write` callables, so they can
be driven by scripts or tests as well as by a person at a terminal.

## What it does not do

- There is no way to create admin accounts from the program; lines must
  be added to `admin.csv` by hand, and passwords are kept there in
  plain text.
- Menu quantities are recorded but not reduced when orders are placed.
- The games menu has only number guessing and hangman; there are no
  other games, and no day finder, to-do list, student records or movie
  recommendations in the main menu.

## Tests

```
pip install .[test]
pytest
```