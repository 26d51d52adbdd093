# structpatterns

Small, self-contained demonstrations of the seven structural design
patterns. Each pattern lives in its own module, and each module can be
imported as a library or run as a demo that prints a walkthrough of the
pattern in action.

| Module                      | Pattern   | What it shows                                                    |
|-----------------------------|-----------|------------------------------------------------------------------|
| `structpatterns.adapter`    | Adapter   | media players, a legacy rectangle, payment gateways, a sensor     |
| `structpatterns.bridge`     | Bridge    | remotes and devices, shapes and renderers, messages and senders  |
| `structpatterns.composite`  | Composite | a file system tree, grouped graphics, an organisation chart       |
| `structpatterns.decorator`  | Decorator | coffee add-ons, text formatting, encrypted/compressed storage     |
| `structpatterns.facade`     | Facade    | home theatre, computer start-up, online shop, bank withdrawal     |
| `structpatterns.flyweight`  | Flyweight | shared tree types, character styles, particle types               |
| `structpatterns.proxy`      | Proxy     | lazy images, access control, caching, access counting, remote     |

## Installation

```
pip install .
```

Python 3.10 or newer is required. The package has no runtime dependencies.

## Running the demos

Every pattern has a command that prints its full demonstration:

```
structpatterns-adapter
structpatterns-bridge
structpatterns-composite
structpatterns-decorator
structpatterns-facade
structpatterns-flyweight
structpatterns-proxy
```

Each module can also be run with `python -m`, for example
`python -m structpatterns.proxy`.

## Using the classes

The classes are ordinary Python objects and can be combined freely.

Adapter: a Celsius sensor presented through a Fahrenheit interface.

```python
from structpatterns.adapter import CelsiusSensor, CelsiusToFahrenheitAdapter

CelsiusToFahrenheitAdapter().read_fahrenheit()                   # 77.0
CelsiusToFahrenheitAdapter(CelsiusSensor(100.0)).read_fahrenheit()  # 212.0
```

Composite: sizes and salaries summed over a tree.

```python
from structpatterns.composite import Directory, File

docs = Directory("Documents")
docs.add(File("document.txt", 100))
docs.add(File("readme.md", 50))
docs.size()                # 150
File("a.txt", 1).add(docs) # raises RuntimeError("Cannot add to a file")
```

Decorator: wrapping coffee and text in layers.

```python
from structpatterns.decorator import (
    BoldDecorator, ItalicDecorator, Milk, PlainText, SimpleCoffee, Sugar,
)

coffee = Sugar(Milk(SimpleCoffee()))
coffee.description()       # 'Simple Coffee + Milk + Sugar'

text = ItalicDecorator(BoldDecorator(PlainText("Hello World")))
text.render()              # '<i><b>Hello World</b></i>'
```

Flyweight: one shared type per distinct appearance.

```python
from structpatterns.flyweight import Forest

forest = Forest()
forest.plant_tree(10, 20, "Oak", "Green", "Rough")
forest.plant_tree(50, 60, "Oak", "Green", "Rough")
len(forest), len(forest.factory)   # (2, 1)
```

Proxy: a caching proxy in front of a slow query service, and a counting
proxy used as a context manager.

```python
from structpatterns.proxy import CachingDatabaseProxy, NetworkResourceProxy

db = CachingDatabaseProxy()
db.execute_query("SELECT * FROM users")   # 'Result for: SELECT * FROM users'
db.execute_query("SELECT * FROM users")   # same result, served from the cache
db.clear_cache()

with NetworkResourceProxy("https://api.example.com") as api:
    api.access()
    api.access_count       # 1
```

The demo classes report what they do on standard output, just as the
commands above do, so running them in an interactive session shows each
step of the pattern as it happens.

## What the package does not do

Everything here is a simulation kept in memory. Nothing plays media,
charges a payment, reads a real sensor, sends e-mail or SMS, or drives a
device; `FileDataSource` keeps its content in memory rather than on disk;
`NetworkResourceProxy` and `RemoteServiceProxy` open no network
connections; and the encryption and compression decorators are toy
transformations, not real cryptography or compression.

## Running the tests

```
pip install ".[test]"
pytest
```