from structpatterns.flyweight import (
    CharacterStyle,
    Document,
    Forest,
    ParticleFactory,
    ParticleSystem,
    ParticleType,
    StyleFactory,
    TreeFactory,
    TreeType,
    main,
)


def test_tree_factory_reuses_same_instance(capsys):
    factory = TreeFactory()
    first = factory.get_tree_type("Oak", "Green", "Rough")
    second = factory.get_tree_type("Oak", "Green", "Rough")
    assert first is second
    assert len(factory) == 1
    assert "Reusing existing TreeType: Oak" in capsys.readouterr().out


def test_tree_factory_distinct_types(capsys):
    factory = TreeFactory()
    oak = factory.get_tree_type("Oak", "Green", "Rough")
    pine = factory.get_tree_type("Pine", "Dark Green", "Smooth")
    assert oak is not pine
    assert len(factory) == 2


def test_tree_type_creation_message(capsys):
    TreeType("Birch", "White", "Peeling")
    assert "Creating TreeType: Birch (memory allocated)" in capsys.readouterr().out


def test_tree_type_draw_line(capsys):
    line = TreeType("Oak", "Green", "Rough").draw(10, 20)
    assert line == "Drawing Oak tree (Green, Rough) at (10, 20)"


def test_forest_shares_types(capsys):
    forest = Forest()
    for x in range(4):
        forest.plant_tree(x, x, "Oak", "Green", "Rough")
    forest.plant_tree(5, 5, "Pine", "Dark Green", "Smooth")
    assert len(forest) == 5
    assert len(forest.factory) == 2
    lines = forest.draw()
    assert len(lines) == len(forest)
    assert all(line.startswith("Drawing ") for line in lines)


def test_style_factory_distinguishes_bold(capsys):
    factory = StyleFactory()
    plain = factory.get_style("Arial", 12, "Black", False, False)
    again = factory.get_style("Arial", 12, "Black", False, False)
    bold = factory.get_style("Arial", 12, "Black", True, False)
    assert plain is again
    assert bold is not plain
    assert len(factory) == 2


def test_character_style_display_with_flags(capsys):
    style = CharacterStyle("Arial", 12, "Black", True, True)
    line = style.display("W", 5, 0)
    assert line == "Char 'W' at (5,0) - Arial, 12pt, Black, Bold, Italic"


def test_character_style_display_without_flags(capsys):
    line = CharacterStyle("Arial", 12, "Black", False, False).display("H", 0, 0)
    assert ", Bold" not in line
    assert ", Italic" not in line


def test_document_counts(capsys):
    doc = Document()
    for x, ch in enumerate("Hello"):
        doc.add_character(ch, x, 0, "Arial", 12, "Black", False, False)
    assert len(doc) == 5
    assert len(doc.factory) == 1
    lines = doc.display()
    assert [line[6] for line in lines] == list("Hello")


def test_particle_factory_reuse(capsys):
    factory = ParticleFactory()
    fire = factory.get_particle("Fire", "Red", 5)
    assert factory.get_particle("Fire", "Red", 5) is fire
    assert factory.get_particle("Fire", "Red", 6) is not fire
    assert len(factory) == 2


def test_particle_type_render_line(capsys):
    line = ParticleType("Smoke", "Gray", 8).render(215, 210, -1, 1)
    assert line == "Smoke particle (Gray, size:8) at (215,210) moving (-1,1)"


def test_particle_system(capsys):
    system = ParticleSystem()
    for i in range(5):
        system.add_particle(i, i, i, i, "Fire", "Red", 5)
    for i in range(3):
        system.add_particle(i, i, -i, i, "Smoke", "Gray", 8)
    assert len(system) == 8
    assert len(system.factory) == 2
    assert len(system.render()) == len(system)


def test_main_runs(capsys):
    assert main() == 0
    assert "=== FLYWEIGHT PATTERN DEMO ===" in capsys.readouterr().out