"""Bakery shop: a CSV-backed menu, customer orders and an interactive console."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

FIRST_ORDER_SEED = 849
ORDER_RULE = "#" * 28
BANNER_RULE = "#" * 70 + " "

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

RED = "\033[0;31m"
BLUE = "\033[0;34m"


def _leading_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _fields(line: str) -> list[str]:
    """Comma-separated fields of a line, empty fields dropped."""
    return [part for part in line.split(",") if part]


def _up_to_newline(text: str) -> str:
    """The text before its first newline, or all of it."""
    return text.split("\n", 1)[0]


class OrderNotFoundError(LookupError):
    """No stored order has the requested id."""


@dataclass(frozen=True)
class MenuItem:
    name: str
    quantity: int
    price: float

    def to_csv(self) -> str:
        return f"{self.name},{self.quantity},{self.price:.2f}\n"


@dataclass(frozen=True)
class OrderLine:
    name: str
    quantity: int
    price: float

    @property
    def amount(self) -> float:
        return self.price * self.quantity


@dataclass
class Order:
    order_id: int
    customer_name: str
    placed_at: datetime
    lines: list[OrderLine] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def total(self) -> float:
        return sum((line.amount for line in self.lines), 0.0)

    def render(self) -> str:
        """The receipt text stored for this order."""
        when = self.placed_at
        parts = [
            f"{ORDER_RULE}\n",
            f"Order Id Number, {self.order_id}\n",
            f"Purchased by , {self.customer_name} \n",
            f"Date , {when.day:02d}-{when.month:02d}-{when.year:04d} \n",
            f"Time , {when.hour:02d}:{when.minute:02d}:{when.second:02d} \n",
            "Item,Quantity,Price \n",
        ]
        parts.extend(
            f"{line.name},{line.quantity} X ₹{line.price:.2f}, ₹{line.amount:.2f}\n"
            for line in self.lines
        )
        parts.append(f"Total Cost : ₹{self.total:.2f} \n")
        return "".join(parts)


class BakeryStore:
    """Menu, admin accounts and orders kept as files in one directory."""

    def __init__(self, root: str | Path = "bakery") -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.menu_path = self.root / "menu.csv"
        self.admin_path = self.root / "admin.csv"
        self.ids_path = self.root / "id_alloted.csv"
        self.customers_path = self.root / "customer.csv"

    def _ensure(self, path: Path, initial: str = "") -> None:
        if not path.exists():
            path.write_text(initial, encoding="utf-8")

    def check_admin(self, username: str, password: str) -> bool:
        """True when the admin file holds this username and password."""
        if not self.admin_path.exists():
            self._ensure(self.admin_path)
            return False
        with self.admin_path.open(encoding="utf-8") as handle:
            for line in handle:
                fields = _fields(line)
                if len(fields) < 2:
                    continue
                stored_user = fields[0]
                stored_password = _up_to_newline(fields[1])
                if stored_user == username and stored_password == password:
                    return True
        return False

    def menu(self) -> list[MenuItem]:
        """Items currently on the menu, in file order."""
        self._ensure(self.menu_path)
        items = []
        with self.menu_path.open(encoding="utf-8") as handle:
            for line in handle:
                fields = _fields(line)
                if len(fields) < 3:
                    continue
                quantity = _leading_int(fields[1])
                items.append(
                    MenuItem(fields[0], quantity or 0, _leading_float(fields[2]))
                )
        return items

    def menu_text(self) -> str:
        """The menu as shown to customers, with its column header."""
        self._ensure(self.menu_path)
        return "Item,Quantity,Price\n" + self.menu_path.read_text(encoding="utf-8")

    def add_items(self, items: Iterable[MenuItem]) -> None:
        with self.menu_path.open("a", encoding="utf-8") as handle:
            handle.writelines(item.to_csv() for item in items)

    def new_menu(self, items: Iterable[MenuItem]) -> None:
        """Replace the whole menu with the given items."""
        self.menu_path.write_text("", encoding="utf-8")
        self.add_items(items)

    def next_order_id(self) -> int:
        """One more than the last allotted order id."""
        self._ensure(self.ids_path, str(FIRST_ORDER_SEED))
        last = FIRST_ORDER_SEED
        with self.ids_path.open(encoding="utf-8") as handle:
            for line in handle:
                last = _leading_int(line) or 0
        return last + 1

    def _price_of(self, name: str) -> float | None:
        self._ensure(self.menu_path)
        with self.menu_path.open(encoding="utf-8") as handle:
            for line in handle:
                fields = _fields(line)
                if len(fields) >= 3 and fields[0] == name:
                    return _leading_float(fields[2])
        return None

    def _record_id(self, order_id: int) -> None:
        existing = self.ids_path.read_text(encoding="utf-8")
        separator = "" if not existing or existing.endswith("\n") else "\n"
        with self.ids_path.open("a", encoding="utf-8") as handle:
            handle.write(f"{separator}{order_id} \n")

    def place_order(
        self,
        customer_name: str,
        requests: Iterable[tuple[str, int]],
        now: datetime | None = None,
    ) -> Order:
        """Price the requested items, store the receipt and allot its id."""
        self._ensure(self.customers_path)
        order = Order(
            order_id=self.next_order_id(),
            customer_name=customer_name,
            placed_at=now or datetime.now(),
        )
        for name, quantity in requests:
            price = self._price_of(name)
            if price is None:
                order.missing.append(name)
            else:
                order.lines.append(OrderLine(name, quantity, price))
        receipt = order.render()
        with self.customers_path.open("a", encoding="utf-8") as handle:
            handle.write(receipt)
        (self.root / f"{order.order_id}.csv").write_text(receipt, encoding="utf-8")
        self._record_id(order.order_id)
        return order

    def order_text(self, order_id: int | str) -> str:
        """The stored receipt of an order."""
        key = str(order_id)
        if not key or "/" in key or "\\" in key or key in (".", ".."):
            raise OrderNotFoundError(key)
        path = self.root / f"{key}.csv"
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise OrderNotFoundError(key) from exc


def _stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


class BakeryConsole:
    """Menu-driven terminal front end for a BakeryStore."""

    def __init__(
        self,
        store: BakeryStore,
        read: Callable[[], str] = _stdin_line,
        write: Callable[[str], object] = sys.stdout.write,
    ) -> None:
        self.store = store
        self._read = read
        self._write = write

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read().rstrip("\r\n")

    def _ask_word(self, prompt: str, limit: int | None = None) -> str:
        words = self._ask(prompt).split()
        word = words[0] if words else ""
        return word[:limit] if limit else word

    def _ask_int(self, prompt: str) -> int:
        value = _leading_int(self._ask(prompt))
        return value if value is not None else 0

    def _ask_float(self, prompt: str) -> float:
        return _leading_float(self._ask(prompt))

    def run(self) -> None:
        """Top-level loop; returns on Exit or end of input."""
        try:
            while True:
                self._write("######################### BMS MENU ######################### \n")
                self._write("1. Admin\n2. Customer\n3. Exit\n")
                choice = self._ask_int("Enter Your Choice : ")
                if choice == 1:
                    self.admin_login()
                elif choice == 2:
                    self.customer_menu()
                else:
                    self._write("Wrong Try Again \n")
                if choice == 3:
                    return
        except EOFError:
            return

    def admin_login(self) -> bool:
        self._write("######################### ADMIN ######################### \n")
        username = self._ask_word("Enter Username :", 40)
        typed = self._ask_word("Enter Password :", 40)
        if self.store.check_admin(username, typed):
            self._write("Login Successfully \n")
            self.admin_menu()
            return True
        self._write("Please try again later \n")
        self._write("Username and Password are incorrect\n")
        return False

    def _ask_items(self) -> list[MenuItem]:
        count = self._ask_int("How many items you want to add :")
        items = []
        for number in range(1, count + 1):
            name = self._ask_word(f"Enter name of item {number}: ")
            quantity = self._ask_int(f"Enter quantity of item {number}: ")
            price = self._ask_float(f"Enter price of item {number}: ")
            items.append(MenuItem(name, quantity, price))
        return items

    def admin_menu(self) -> None:
        while True:
            self.store.menu()
            self._write("###################### ADMIN MENU ###################### \n")
            self._write("1. Add Items \n2. Make New Menu Delete previous one\n3. Exit \n")
            choice = self._ask_int("Enter Your Choice : ")
            if choice == 1:
                self.store.add_items(self._ask_items())
            elif choice == 2:
                self.store.new_menu(self._ask_items())
            else:
                return
            self._write("Items added successfully!\n")

    def customer_menu(self) -> None:
        while True:
            self._write("######################### CUSTOMER MENU ######################### \n")
            self._write(
                "1. View Menu \n2. Buy Items \n3. View Order \n"
                "4. Update Existing Order \n5. Exit \n"
            )
            choice = self._ask_int("Enter Your Choice : ")
            if choice == 1:
                self._write(BANNER_RULE + "\n")
                self._write(self.store.menu_text())
                self._write(BANNER_RULE + "\n")
            elif choice == 2:
                self.buy_items()
            elif choice == 3:
                self.view_order()
            elif choice == 4:
                self.update_order()
            else:
                return

    def buy_items(self) -> Order:
        name = self._ask("What is your name : ")[:29]
        count = self._ask_int("How many items do you want to buy: ")
        requests = []
        for number in range(1, count + 1):
            item = self._ask_word(f"Enter name of item {number}: ")
            quantity = self._ask_int(f"Enter quantity of item {number}: ")
            requests.append((item, quantity))
        order = self.store.place_order(name, requests)
        for missing in order.missing:
            self._write(f"Item {missing} is not in menu \n")
        self._write(f"Your Order Id Number is: {order.order_id}\n")
        return order

    def _show_order(self, order_id: str) -> bool:
        try:
            text = self.store.order_text(order_id)
        except OrderNotFoundError:
            self._write("Wrong id or id doesn't exist\n")
            return False
        self._write(RED)
        self._write(text)
        self._write("################################# \n")
        self._write(BLUE)
        return True

    def view_order(self) -> bool:
        return self._show_order(self._ask_word("Enter Order Id to View : "))

    def update_order(self) -> Order | None:
        """Show an order and, if agreed, take a fresh one under a new id."""
        self._write("################################\n")
        if not self._show_order(self._ask_word("Enter Id No. :")):
            return None
        self._write("################################\n")
        self._write(
            "Take a Look at Your Order \nLets proceed to remake that from Starting \n"
            "With New Order Id \n"
        )
        self._write("1. If you Agree \n2. Leave your order as it is \n")
        if self._ask_int("Enter your Choice : ") == 1:
            return self.buy_items()
        return None