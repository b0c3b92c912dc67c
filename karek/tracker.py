"""Interactive personal spending tracker with a monthly salary budget."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from collections.abc import Callable
from enum import Enum

MAX_ENTRIES = 20
PAUSE_SECONDS = 3
_NAME_LIMIT = 49
_AREA_LIMIT = 19

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class Category(Enum):
    """Day-to-day spending areas."""

    GROCERY = "Grocery"
    TRANSPORT = "Transport"
    LEISURE = "Leisure"
    TRAVELLING = "Travelling"
    SHOPPING = "Shopping"


class MonthlyBill(Enum):
    """Fixed monthly expenses."""

    ELECTRICITY = "Electricity Bill"
    WATER = "Water Bill"
    IPVA = "IPVA"
    IPTU = "IPTU"
    INCOME_TAX = "Income tax"
    WIFI = "Wifi"
    SCHOOL = "School"
    HEALTH = "Health"


_BILL_SUBJECT = {
    MonthlyBill.ELECTRICITY: "the electricity bill",
    MonthlyBill.WATER: "the water bill",
    MonthlyBill.IPVA: "the IPVA",
    MonthlyBill.IPTU: "the IPTU",
    MonthlyBill.INCOME_TAX: "the income tax",
    MonthlyBill.WIFI: "the wifi bill",
    MonthlyBill.SCHOOL: "the school bill",
    MonthlyBill.HEALTH: "the health care bill",
}

_MONTHLY_AREA = "Monthly Expenses"
_TOTAL_AREA = "Total"


class ExpenseTracker:
    """Accumulates spending per category and against a monthly salary."""

    def __init__(self, salary: float) -> None:
        if salary <= 0:
            raise ValueError("salary must be a positive number")
        self.salary = float(salary)
        self._by_category = {category: 0.0 for category in Category}
        self._by_bill = {bill: 0.0 for bill in MonthlyBill}

    def add(self, category: Category, amount: float) -> None:
        """Record a positive amount spent in a category."""
        if amount <= 0:
            raise ValueError("amount must be a positive number")
        self._by_category[Category(category)] += amount

    def add_bill(self, bill: MonthlyBill, amount: float) -> None:
        """Record an amount paid towards a monthly bill."""
        self._by_bill[MonthlyBill(bill)] += amount

    def spent(self, category: Category) -> float:
        return self._by_category[Category(category)]

    def monthly_total(self) -> float:
        return sum(self._by_bill.values())

    def total(self) -> float:
        return sum(self._by_category.values()) + self.monthly_total()

    def balance(self) -> float:
        return self.salary - self.total()

    def over_budget(self) -> bool:
        """True once spending has reached or passed the salary."""
        return self.total() >= self.salary

    def report(self, area: str) -> str | None:
        """Describe the spending for a named area, or None if it is unknown."""
        for category in Category:
            if area in (category.value, category.value.lower()):
                return f"You spent ${self.spent(category):.2f} on {category.value}."
        if area in (_MONTHLY_AREA, _MONTHLY_AREA.lower()):
            return f"You spent ${self.monthly_total():.2f} on {_MONTHLY_AREA}."
        if area in (_TOTAL_AREA, _TOTAL_AREA.lower()):
            return f"Your total spending is ${self.total():.2f}."
        return None


def _parse_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


def _parse_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _pause_and_clear(seconds: float) -> None:
    time.sleep(seconds)
    command = "cls" if os.name == "nt" else "clear"
    subprocess.run(command, shell=True, check=False)


def _over_budget_message(tracker: ExpenseTracker) -> str:
    return (
        "You have achieved the maxumum of expenses, now you account is negative. "
        f"({tracker.balance():f})"
    )


_MAIN_MENU = (
    "\t----------MENU----------",
    "Which one of these areas did you spend your money today?",
    "\t 1 => Grocery",
    "\t 2 => Transport",
    "\t 3 => Leisure",
    "\t 4 => Travelling",
    "\t 5 => Shopping",
    "\t 6 => Monthly Expenses",
    "\t 7 => know how much you have spent",
    "\t 0 => Exit",
)

_CATEGORY_CHOICES = dict(enumerate(Category, start=1))
_BILL_CHOICES = dict(enumerate(MonthlyBill, start=1))


def run(
    input_func: Callable[[], str] = input,
    output_func: Callable[[str], object] = print,
    pause_func: Callable[[float], object] = _pause_and_clear,
) -> ExpenseTracker:
    """Drive the interactive session and return the resulting tracker."""
    say = output_func

    def pause() -> None:
        pause_func(PAUSE_SECONDS)

    def record_category(category: Category) -> None:
        say(f"You can put a maximum of {MAX_ENTRIES} values.")
        for _ in range(MAX_ENTRIES):
            say(f"How much did you spend in {category.value.lower()}? Enter 0 to finish.")
            amount = _parse_float(input_func()) or 0.0
            if amount <= 0:
                say("Returning...")
                pause()
                return
            tracker.add(category, amount)
            if tracker.over_budget():
                say(_over_budget_message(tracker))

    def record_bills() -> None:
        while True:
            say("\t----------SUBMENU----------")
            for number, bill in _BILL_CHOICES.items():
                say(f"\t {number} => {bill.value}")
            say("\t 0 => Exit")
            bill = _BILL_CHOICES.get(_parse_int(input_func()))
            if bill is None:
                say("Returning...")
                pause()
                return
            say(f"How much did you spend on {_BILL_SUBJECT[bill]}?")
            tracker.add_bill(bill, _parse_float(input_func()) or 0.0)
            if tracker.over_budget():
                say(_over_budget_message(tracker))

    def show_reports() -> None:
        while True:
            say("Write the option you want to see:")
            for category in Category:
                say(f"\t{category.value}")
            say(f"\t{_MONTHLY_AREA}")
            say(f"\t{_TOTAL_AREA}")
            say("\tExit")
            area = input_func().rstrip("\n")[:_AREA_LIMIT]
            message = tracker.report(area)
            if message is None:
                say("Returning...")
                pause()
                return
            say(message)

    say("Hi, I am Karek, the one who will help you with your spendings")
    say("Please, tell me your name:")
    name = input_func().rstrip("\n")[:_NAME_LIMIT]
    say(f"{name}, please, be welcome!")

    while True:
        say("Now, how much money do you make per month? Enter a positive number different to zero.")
        salary = _parse_float(input_func())
        if salary is not None and salary > 0:
            break
    tracker = ExpenseTracker(salary)

    while True:
        for line in _MAIN_MENU:
            say(line)
        choice = _parse_int(input_func())
        if choice in _CATEGORY_CHOICES:
            record_category(_CATEGORY_CHOICES[choice])
        elif choice == 6:
            record_bills()
        elif choice == 7:
            show_reports()
        elif choice == 0:
            say("Finishing...")
            pause()
            return tracker
        else:
            say("Finishing...Thank you for trusting me!")
            pause()
            return tracker


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tracker on the terminal."""
    del argv
    try:
        run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())