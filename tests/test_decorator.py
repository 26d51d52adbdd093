import pytest

from structpatterns.decorator import (
    BoldDecorator,
    Caramel,
    CompressionDecorator,
    EncryptionDecorator,
    Espresso,
    FileDataSource,
    ItalicDecorator,
    Milk,
    PlainText,
    SimpleCoffee,
    Sugar,
    UnderlineDecorator,
    WhippedCream,
    display_coffee,
    main,
)


def test_base_coffees():
    assert SimpleCoffee().description() == "Simple Coffee"
    assert SimpleCoffee().cost() == 2.0
    assert Espresso().description() == "Espresso"
    assert Espresso().cost() == 3.0


def test_milk_adds_name_and_price():
    coffee = Milk(SimpleCoffee())
    assert coffee.description().startswith("Simple Coffee")
    assert coffee.description().endswith(" + Milk")
    assert coffee.cost() == pytest.approx(SimpleCoffee().cost() + 0.5)


@pytest.mark.parametrize(
    "decorator, price",
    [(Milk, 0.5), (Sugar, 0.2), (WhippedCream, 0.7), (Caramel, 0.6)],
)
def test_each_decorator_adds_its_price(decorator, price):
    base = Espresso()
    assert decorator(base).cost() == pytest.approx(base.cost() + price)


def test_order_changes_description_not_cost():
    first = Sugar(Milk(SimpleCoffee()))
    second = Milk(Sugar(SimpleCoffee()))
    assert first.description() != second.description()
    assert first.cost() == pytest.approx(second.cost())


def test_display_coffee_formats_price(capsys):
    line = display_coffee(SimpleCoffee())
    assert line == "Simple Coffee - $2"
    assert capsys.readouterr().out.strip() == line


def test_text_decorators_wrap_in_tags():
    assert PlainText("Hello World").render() == "Hello World"
    assert BoldDecorator(PlainText("x")).render() == "<b>x</b>"


def test_text_decorators_nest_outward():
    inner = BoldDecorator(PlainText("Hello World"))
    italic = ItalicDecorator(inner)
    underline = UnderlineDecorator(italic)
    assert italic.render() == "<i>" + inner.render() + "</i>"
    assert underline.render() == "<u>" + italic.render() + "</u>"


def test_file_data_source_stores_data(capsys):
    source = FileDataSource("data.txt")
    source.write_data("Hello World")
    assert source.read_data() == "Hello World"
    assert "data.txt" in capsys.readouterr().out


def test_encryption_round_trip_for_lowercase():
    file_source = FileDataSource("encrypted.txt")
    secure = EncryptionDecorator(file_source)
    secure.write_data("hello world")
    assert file_source.content != "hello world"
    assert len(file_source.content) == len("hello world")
    assert secure.read_data() == "hello world"


def test_encryption_wraps_around_alphabet():
    file_source = FileDataSource("f")
    EncryptionDecorator(file_source).write_data("xyz")
    assert file_source.content == "abc"


def test_encryption_leaves_non_letters_alone():
    file_source = FileDataSource("f")
    EncryptionDecorator(file_source).write_data("1 2 3!")
    assert file_source.content == "1 2 3!"


def test_compression_drops_spaces_and_read_returns_stored():
    file_source = FileDataSource("compressed.txt")
    compressed = CompressionDecorator(file_source)
    compressed.write_data("hello world with spaces")
    assert " " not in file_source.content
    assert compressed.read_data() == file_source.content


def test_encryption_over_compression_round_trip():
    file_source = FileDataSource("secure.txt")
    stack = EncryptionDecorator(CompressionDecorator(file_source))
    stack.write_data("a b")
    plain = FileDataSource("plain")
    CompressionDecorator(plain).write_data("a b")
    assert stack.read_data() == plain.content


def test_main_returns_zero(capsys):
    assert main() == 0
    assert "=== DECORATOR PATTERN DEMO ===" in capsys.readouterr().out