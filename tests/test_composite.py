import pytest

from structpatterns.composite import (
    Directory,
    File,
    GraphicCircle,
    GraphicGroup,
    GraphicRectangle,
    IndividualContributor,
    Manager,
    main,
)


@pytest.fixture
def tree():
    documents = Directory("Documents")
    doc = File("document.txt", 100)
    readme = File("readme.md", 50)
    documents.add(doc)
    documents.add(readme)
    media = Directory("Media")
    media.add(File("image.jpg", 500))
    media.add(File("video.mp4", 2000))
    config = File("config.json", 20)
    root = Directory("Root")
    root.add(documents)
    root.add(media)
    root.add(config)
    return root, documents, media, doc, readme, config


def test_file_size_is_its_own():
    assert File("a.txt", 100).size() == 100


def test_directory_size_sums_children(tree):
    root, documents, media, doc, readme, config = tree
    assert documents.size() == doc.size() + readme.size()
    assert root.size() == documents.size() + media.size() + config.size()


def test_empty_directory_has_zero_size():
    assert Directory("Empty").size() == 0


def test_remove_child_reduces_size(tree):
    root, documents, _media, doc, _readme, _config = tree
    before = root.size()
    documents.remove(doc)
    assert root.size() == before - doc.size()
    assert doc not in documents.children


def test_remove_absent_child_changes_nothing(tree):
    root, *_ = tree
    before = root.size()
    root.remove(File("other.txt", 5))
    assert root.size() == before


def test_file_cannot_add_or_remove():
    leaf = File("a.txt", 1)
    with pytest.raises(RuntimeError, match="Cannot add to a file"):
        leaf.add(File("b.txt", 1))
    with pytest.raises(RuntimeError, match="Cannot remove from a file"):
        leaf.remove(File("b.txt", 1))


def test_display_lists_every_node_with_indentation(tree, capsys):
    root, *_ = tree
    lines = root.display()
    assert len(lines) == 8
    assert lines[0] == "📁 Root/"
    assert lines[1].startswith("  📁 Documents/")
    assert lines[2].startswith("    📄 document.txt")
    assert capsys.readouterr().out.splitlines() == lines


def test_circle_move_matches_circle_created_at_target():
    moved = GraphicCircle(10, 10, 5)
    moved.move(10, 10)
    assert moved.draw() == GraphicCircle(20, 20, 5).draw()


def test_group_move_propagates_to_nested_graphics():
    inner = GraphicGroup("Inner")
    inner.add(GraphicRectangle(20, 20, 30, 40))
    outer = GraphicGroup("Outer")
    outer.add(GraphicCircle(1, 2, 3))
    outer.add(inner)
    outer.move(5, 7)

    expected_inner = GraphicGroup("Inner")
    expected_inner.add(GraphicRectangle(25, 27, 30, 40))
    expected = GraphicGroup("Outer")
    expected.add(GraphicCircle(6, 9, 3))
    expected.add(expected_inner)
    assert outer.draw() == expected.draw()


def test_group_draw_starts_with_name_and_remove_works():
    group = GraphicGroup("G")
    circle = GraphicCircle(0, 0, 1)
    group.add(circle)
    lines = group.draw()
    assert lines[0] == "Group: G"
    assert len(lines) == 2
    group.remove(circle)
    assert group.draw() == ["Group: G"]


def test_manager_total_salary_includes_subordinates():
    manager = Manager("M", "Lead", 120000)
    dev1 = IndividualContributor("A", "Developer", 80000)
    dev2 = IndividualContributor("B", "Developer", 60000)
    manager.add_subordinate(dev1)
    manager.add_subordinate(dev2)
    ceo = Manager("C", "CEO", 200000)
    ceo.add_subordinate(manager)
    assert manager.total_salary() == 120000 + 80000 + 60000
    assert ceo.total_salary() == 200000 + manager.total_salary()
    manager.remove_subordinate(dev2)
    assert manager.total_salary() == 120000 + 80000


def test_individual_contributor_cannot_have_subordinates():
    dev = IndividualContributor("A", "Developer", 80000)
    with pytest.raises(RuntimeError, match="Cannot add subordinate"):
        dev.add_subordinate(IndividualContributor("B", "Developer", 1))
    with pytest.raises(RuntimeError, match="Cannot remove subordinate"):
        dev.remove_subordinate(dev)
    assert dev.total_salary() == 80000


def test_show_details_nests_subordinates():
    manager = Manager("John Smith", "CEO", 200000)
    manager.add_subordinate(IndividualContributor("Eve Davis", "Senior Developer", 100000))
    lines = manager.show_details()
    assert len(lines) == 2
    assert lines[0].startswith("👔 John Smith - CEO")
    assert lines[1].startswith("  👤 Eve Davis - Senior Developer")


def test_main_returns_zero(capsys):
    assert main() == 0
    assert "=== COMPOSITE PATTERN DEMO ===" in capsys.readouterr().out