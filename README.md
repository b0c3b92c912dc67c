# karek

Karek is a small console assistant that keeps track of what you spend during
the month and warns you when your spending reaches your monthly salary. The
package also holds a simple 24-hour clock and a first-in, first-out queue.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The spending tracker

Start the interactive tracker with:

```
karek
```

Karek asks for your name and for your monthly salary; it keeps asking until
the salary is a positive number. It then shows a menu:

- 1 to 5 — Grocery, Transport, Leisure, Travelling and Shopping. You may enter
  up to 20 amounts per visit to a category; an amount of 0 (or anything that
  is not a number) goes back to the menu.
- 6 — Monthly Expenses, a sub-menu of fixed bills: electricity, water, IPVA,
  IPTU, income tax, wifi, school and health. Choosing 0 or any other number
  goes back to the menu.
- 7 — a report: type the name of an area (`Grocery`, `Transport`, `Leisure`,
  `Travelling`, `Shopping`, `Monthly Expenses` or `Total`, capitalised or all
  in lower case) to see how much you have spent on it. Any other text, such as
  `Exit`, goes back to the menu.
- 0 — exit. Any other choice also ends the session.

Whenever your total spending reaches your salary, Karek prints how far into
the negative your account has gone. On leaving a sub-menu or the program,
Karek waits three seconds and clears the terminal.

The session can also be driven from Python with `karek.tracker.run`, which
takes the functions used for reading input, writing output and pausing, and
returns the resulting tracker:

```python
from karek.tracker import run

answers = iter(["Ana", "2500", "1", "120.50", "0", "0"])
tracker = run(input_func=lambda: next(answers),
              output_func=print,
              pause_func=lambda seconds: None)
print(tracker.total())  # 120.5
```

### Bookkeeping from Python

The same bookkeeping is available through `karek.tracker.ExpenseTracker`:

```python
from karek.tracker import Category, ExpenseTracker, MonthlyBill

tracker = ExpenseTracker(2500.0)
tracker.add(Category.GROCERY, 120.5)
tracker.add_bill(MonthlyBill.ELECTRICITY, 90.0)

tracker.spent(Category.GROCERY)   # 120.5
tracker.monthly_total()           # 90.0
tracker.total()                   # 210.5
tracker.balance()                 # 2289.5
tracker.over_budget()             # False
tracker.report("grocery")         # 'You spent $120.50 on Grocery.'
tracker.report("Exit")            # None
```

`ExpenseTracker` raises `ValueError` for a salary that is not positive, and
`add` raises `ValueError` for an amount that is not positive.

### What the tracker does not do

Everything is kept in memory for a single session: nothing is saved to a file
or read back the next time `karek` starts.

## The clock

`karek.clock.Clock` is a 24-hour clock that advances one second at a time,
carrying into minutes and hours and wrapping back to midnight:

```python
from karek.clock import Clock

clock = Clock(23, 59, 59)
clock.tick()
print(clock)  # 00:00:00
```

## The FIFO queue

`karek.fifo.Fifo` is a first-in, first-out queue of values:

```python
from karek.fifo import Fifo

queue = Fifo()
for value in (10, 20, 30):
    queue.enqueue(value)

queue.front()     # 10
queue.dequeue()   # 10
queue.dequeue()   # 20
queue.front()     # 30
len(queue)        # 1
list(queue)       # [30]
queue.is_empty()  # False
```

`dequeue` and `front` raise `IndexError` on an empty queue.

A short demonstration of the queue runs with:

```
karek-fifo
```