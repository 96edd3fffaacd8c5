# patterncraft

Small, self-contained examples of the classic object-oriented design
patterns. Each pattern lives in its own module. The classes print what
they do, as a walk-through would, and most methods also return the text
they printed or the object they produced, so the examples can be used
and checked from code as well as watched on the terminal.

The package has no dependencies beyond the standard library.

## Installation

```
pip install patterncraft
```

To run the test suite as well:

```
pip install "patterncraft[test]"
pytest
```

## What is inside

Creational patterns

| Module | Pattern | Demo command |
| --- | --- | --- |
| `patterncraft.simple_factory` | Simple factory | `patterncraft-simple-factory` |
| `patterncraft.factory_method` | Factory method | `patterncraft-factory-method` |
| `patterncraft.abstract_factory` | Abstract factory | `patterncraft-abstract-factory` |
| `patterncraft.builder` | Builder | `patterncraft-builder` |
| `patterncraft.prototype` | Prototype | `patterncraft-prototype` |
| `patterncraft.singleton` | Singleton (lazy and eager) | `patterncraft-singleton` |

Structural patterns

| Module | Pattern | Demo command |
| --- | --- | --- |
| `patterncraft.adapter` | Adapter | `patterncraft-adapter` |
| `patterncraft.bridge` | Bridge | `patterncraft-bridge` |
| `patterncraft.composite` | Composite | `patterncraft-composite` |
| `patterncraft.decorator` | Decorator | `patterncraft-decorator` |
| `patterncraft.facade` | Facade | `patterncraft-facade` |
| `patterncraft.flyweight` | Flyweight | `patterncraft-flyweight` |
| `patterncraft.proxy` | Proxy | `patterncraft-proxy` |

Behavioural patterns

| Module | Pattern | Demo command |
| --- | --- | --- |
| `patterncraft.chain` | Chain of responsibility | `patterncraft-chain` |
| `patterncraft.command` | Command and command queue | `patterncraft-command` |
| `patterncraft.interpreter` | Interpreter | `patterncraft-interpreter` |
| `patterncraft.iterator` | Iterator | `patterncraft-iterator` |
| `patterncraft.mediator` | Mediator | none |
| `patterncraft.observer` | Observer | none |
| `patterncraft.state` | State | `patterncraft-state` |
| `patterncraft.strategy` | Strategy | `patterncraft-strategy` |
| `patterncraft.template_method` | Template method | `patterncraft-template-method` |
| `patterncraft.visitor` | Visitor | `patterncraft-visitor` |

## Running a demo

Each demo command runs the module's `main()` function and prints a short
walk-through of its pattern, for example:

```
patterncraft-builder
patterncraft-chain
patterncraft-strategy
```

A few notes on what the demos do:

- `patterncraft-singleton` starts six threads; three fetch
  `LazySingleton.get_instance()` and three fetch
  `HungrySingleton.get_instance()`. The lazy instance is created once,
  under a lock. Calling either class directly raises `TypeError`.
- `patterncraft-state` plays five rounds with a `GameAccount`; each round
  is won or lost at random, so the output differs from run to run.
- `patterncraft-proxy` prints the current local time around the call.

## Using the modules

A chain of approvers, where each one passes a bill up to its superior
when the amount is beyond its authority. `handle_request` returns the
approver who approved the bill, and raises `RuntimeError` if a bill
reaches an approver with no superior:

```python
from patterncraft.chain import Bill, GroupLeader, Head, Manager, Boss

leader = GroupLeader("Sun")
head = Head("Bing")
manager = Manager("Chun")
boss = Boss("Zhang")
leader.set_superior(head)
head.set_superior(manager)
manager.set_superior(boss)

approver = leader.handle_request(Bill(3, "Jack", 32.9))  # the Manager
```

A tiny boolean interpreter that reads `and`/`or` expressions of `0` and
`1` strictly left to right, with no precedence. `evaluate` returns `1`,
`0`, or `-1` when the result is not a digit, and raises `ValueError` for
fewer than two tokens:

```python
from patterncraft.interpreter import evaluate, Handler

evaluate("1 and 0 or 1")   # 1
Handler().handle("0 or 0 and 1")  # prints "0 or 0 and 1 = 0" and returns 0
```

Swapping sorting strategies at run time. The context sorts its list in
place:

```python
from patterncraft.strategy import Context, BubbleSort, InsertSort

context = Context()
context.set_input([10, 23, -1, 0, 300, 87, 28, 77, -32, 2])
context.sort_strategy = BubbleSort()
context.sort()
context.sort_strategy = InsertSort()
context.sort()
```

Visiting a shopping cart with different visitors. `accept` returns each
visitor's results in order: unit prices for a `Customer`, totals for a
`Cashier`:

```python
from patterncraft.visitor import Apple, Book, Customer, Cashier, ShoppingCart

apple = Apple("Fuji apple", 7)
book = Book("Terminator", 49)
customer = Customer("Jungle")
customer.set_num(apple, 2)
customer.set_num(book, 3)

cart = ShoppingCart()
cart.add_element(apple)
cart.add_element(book)
cart.accept(customer)    # [7, 49]
cart.accept(Cashier())   # [14, 147]
```

Putting landlords and tenants in touch through an agency. `ask` returns
the parties on the other side who answered:

```python
from patterncraft.mediator import Agency, Landlord, Tenant

agency = Agency()
landlord = Landlord("Wang", 1350, "Main Street 1")
tenant = Tenant("Lucy")
for person in (landlord, tenant):
    person.mediator = agency
    agency.register(person)

tenant.ask()  # [landlord]
```

A squad of up to four players alerting each other through an ally centre.
`join` returns `False` once the squad is full; `call` returns the players
who responded:

```python
from patterncraft.observer import AllyCenterController, InfoType, Player

center = AllyCenterController()
players = [Player(name) for name in ("A", "B", "C", "D")]
for player in players:
    center.join(player)

players[0].call(InfoType.HELP, center)  # players B, C and D answer
```

## What is not included

- The memento pattern has no module in this package.
- `patterncraft.mediator` and `patterncraft.observer` are libraries only;
  they have no demo command.
- `AllyCenter.remove` only announces that a player leaves; it does not
  take the player out of the squad.