"""Decorator pattern: adding behaviour by wrapping objects."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod


def _fmt(value: float) -> str:
    return f"{value:g}"


# ----- Coffee -----


class Coffee(ABC):
    @abstractmethod
    def description(self) -> str:
        """Return the name of the drink."""

    @abstractmethod
    def cost(self) -> float:
        """Return the price of the drink."""


class SimpleCoffee(Coffee):
    def description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> float:
        return 2.0


class Espresso(Coffee):
    def description(self) -> str:
        return "Espresso"

    def cost(self) -> float:
        return 3.0


class CoffeeDecorator(Coffee):
    """Adds an ingredient's name and price to the wrapped coffee."""

    ingredient = ""
    price = 0.0

    def __init__(self, coffee: Coffee) -> None:
        self.coffee = coffee

    def description(self) -> str:
        return f"{self.coffee.description()} + {self.ingredient}"

    def cost(self) -> float:
        return self.coffee.cost() + self.price


class Milk(CoffeeDecorator):
    ingredient = "Milk"
    price = 0.5


class Sugar(CoffeeDecorator):
    ingredient = "Sugar"
    price = 0.2


class WhippedCream(CoffeeDecorator):
    ingredient = "Whipped Cream"
    price = 0.7


class Caramel(CoffeeDecorator):
    ingredient = "Caramel"
    price = 0.6


# ----- Text -----


class Text(ABC):
    @abstractmethod
    def render(self) -> str:
        """Return the rendered markup."""


class PlainText(Text):
    def __init__(self, content: str) -> None:
        self.content = content

    def render(self) -> str:
        return self.content


class TextDecorator(Text):
    """Wraps the rendered text of another component in an HTML tag."""

    tag = ""

    def __init__(self, text: Text) -> None:
        self.text = text

    def render(self) -> str:
        inner = self.text.render()
        if not self.tag:
            return inner
        return f"<{self.tag}>{inner}</{self.tag}>"


class BoldDecorator(TextDecorator):
    tag = "b"


class ItalicDecorator(TextDecorator):
    tag = "i"


class UnderlineDecorator(TextDecorator):
    tag = "u"


# ----- Data sources -----


class DataSource(ABC):
    @abstractmethod
    def write_data(self, data: str) -> None:
        """Store the data."""

    @abstractmethod
    def read_data(self) -> str:
        """Return the stored data."""


class FileDataSource(DataSource):
    """A named store that keeps its content in memory."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.content = ""

    def write_data(self, data: str) -> None:
        self.content = data
        print(f"Writing to file '{self.filename}': {data}")

    def read_data(self) -> str:
        print(f"Reading from file '{self.filename}'")
        return self.content


class DataSourceDecorator(DataSource):
    """Passes reads and writes through to the wrapped source."""

    def __init__(self, wrappee: DataSource) -> None:
        self.wrappee = wrappee

    def write_data(self, data: str) -> None:
        self.wrappee.write_data(data)

    def read_data(self) -> str:
        return self.wrappee.read_data()


def _truncating_mod(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend."""
    return value - modulus * int(value / modulus)


def _shift_letters(data: str, offset: int) -> str:
    base = ord("a")
    return "".join(
        chr(_truncating_mod(ord(ch) - base + offset, 26) + base)
        if ch in string.ascii_letters
        else ch
        for ch in data
    )


class EncryptionDecorator(DataSourceDecorator):
    """Applies a shift-by-three cipher to letters on the way in and out."""

    def write_data(self, data: str) -> None:
        encrypted = _shift_letters(data, 3)
        print("Encrypting data...")
        self.wrappee.write_data(encrypted)

    def read_data(self) -> str:
        data = self.wrappee.read_data()
        print("Decrypting data...")
        return _shift_letters(data, -3 + 26)


class CompressionDecorator(DataSourceDecorator):
    """Drops spaces on write; reading returns the stored data unchanged."""

    def write_data(self, data: str) -> None:
        compressed = data.replace(" ", "")
        print(
            f"Compressing data (from {len(data)} to {len(compressed)} chars)..."
        )
        self.wrappee.write_data(compressed)

    def read_data(self) -> str:
        data = self.wrappee.read_data()
        print("Decompressing data...")
        return data


def display_coffee(coffee: Coffee) -> str:
    """Print and return a coffee's description with its price."""
    line = f"{coffee.description()} - ${_fmt(coffee.cost())}"
    print(line)
    return line


def main(argv: list[str] | None = None) -> int:
    """Run the decorator demonstration."""
    print("=== DECORATOR PATTERN DEMO ===")

    print("\n1. COFFEE SHOP:")
    print("===============")
    display_coffee(SimpleCoffee())
    display_coffee(Milk(SimpleCoffee()))
    display_coffee(Sugar(Milk(SimpleCoffee())))
    display_coffee(Caramel(WhippedCream(Sugar(Milk(Espresso())))))

    print("\n2. TEXT FORMATTING:")
    print("===================")
    print(f"Plain: {PlainText('Hello World').render()}")
    print(f"Bold: {BoldDecorator(PlainText('Hello World')).render()}")
    print(
        "Bold + Italic: "
        f"{ItalicDecorator(BoldDecorator(PlainText('Hello World'))).render()}"
    )
    fancy = UnderlineDecorator(ItalicDecorator(BoldDecorator(PlainText("Hello World"))))
    print(f"Bold + Italic + Underline: {fancy.render()}")

    print("\n3. DATA SOURCE (I/O with Encryption & Compression):")
    print("===================================================")

    print("\n[Plain File]")
    source1: DataSource = FileDataSource("data.txt")
    source1.write_data("Hello World")
    print(f"Read: {source1.read_data()}")

    print("\n[File with Encryption]")
    source2: DataSource = EncryptionDecorator(FileDataSource("encrypted.txt"))
    source2.write_data("hello world")
    print(f"Read: {source2.read_data()}")

    print("\n[File with Compression]")
    source3: DataSource = CompressionDecorator(FileDataSource("compressed.txt"))
    source3.write_data("hello world with spaces")
    print(f"Read: {source3.read_data()}")

    print("\n[File with Encryption + Compression]")
    source4: DataSource = EncryptionDecorator(
        CompressionDecorator(FileDataSource("secure.txt"))
    )
    source4.write_data("hello world with spaces")
    print(f"Read: {source4.read_data()}")

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Decorator ADDS functionality to objects dynamically")
    print("2. Alternative to subclassing for extending behavior")
    print("3. Can wrap objects in multiple decorators (like layers)")
    print("4. Each decorator adds one specific feature")
    print("5. Order of decorators matters!")
    print("6. Decorators and component share the same interface")
    print("7. Prevents class explosion from all possible combinations")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())