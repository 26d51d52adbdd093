"""Composite pattern: tree structures treated uniformly with their leaves."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(lines: list[str], line: str) -> None:
    print(line)
    lines.append(line)


def _remove_identical(items: list, target: object) -> None:
    for position, item in enumerate(items):
        if item is target:
            del items[position]
            return


# ----- File system -----


class FileSystemComponent(ABC):
    """A node of a file system tree."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def display(self, depth: int = 0) -> list[str]:
        """Print this node indented by depth and return the lines printed."""

    @abstractmethod
    def size(self) -> int:
        """Return the size in KB."""

    def add(self, component: FileSystemComponent) -> None:
        raise RuntimeError("Cannot add to a file")

    def remove(self, component: FileSystemComponent) -> None:
        raise RuntimeError("Cannot remove from a file")


class File(FileSystemComponent):
    """A leaf holding a fixed size."""

    def __init__(self, name: str, size: int) -> None:
        super().__init__(name)
        self._size = size

    def display(self, depth: int = 0) -> list[str]:
        lines: list[str] = []
        _emit(lines, f"{' ' * depth}📄 {self.name} ({self._size} KB)")
        return lines

    def size(self) -> int:
        return self._size


class Directory(FileSystemComponent):
    """A node holding other components."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: list[FileSystemComponent] = []

    @property
    def children(self) -> tuple[FileSystemComponent, ...]:
        return tuple(self._children)

    def add(self, component: FileSystemComponent) -> None:
        self._children.append(component)

    def remove(self, component: FileSystemComponent) -> None:
        _remove_identical(self._children, component)

    def display(self, depth: int = 0) -> list[str]:
        lines: list[str] = []
        _emit(lines, f"{' ' * depth}📁 {self.name}/")
        for child in self._children:
            lines.extend(child.display(depth + 2))
        return lines

    def size(self) -> int:
        return sum(child.size() for child in self._children)


# ----- Graphics -----


class Graphic(ABC):
    @abstractmethod
    def draw(self) -> list[str]:
        """Print the graphic and return the lines printed."""

    @abstractmethod
    def move(self, dx: int, dy: int) -> None:
        """Shift the graphic by an offset."""


class GraphicCircle(Graphic):
    def __init__(self, x: int, y: int, radius: int) -> None:
        self.x = x
        self.y = y
        self.radius = radius

    def draw(self) -> list[str]:
        lines: list[str] = []
        _emit(lines, f"  Circle at ({self.x},{self.y}) with radius {self.radius}")
        return lines

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


class GraphicRectangle(Graphic):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def draw(self) -> list[str]:
        lines: list[str] = []
        _emit(
            lines,
            f"  Rectangle at ({self.x},{self.y}) with size "
            f"{self.width}x{self.height}",
        )
        return lines

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


class GraphicGroup(Graphic):
    """A named group of graphics drawn and moved together."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._graphics: list[Graphic] = []

    def add(self, graphic: Graphic) -> None:
        self._graphics.append(graphic)

    def remove(self, graphic: Graphic) -> None:
        _remove_identical(self._graphics, graphic)

    def draw(self) -> list[str]:
        lines: list[str] = []
        _emit(lines, f"Group: {self.name}")
        for graphic in self._graphics:
            lines.extend(graphic.draw())
        return lines

    def move(self, dx: int, dy: int) -> None:
        for graphic in self._graphics:
            graphic.move(dx, dy)


# ----- Organisation -----


class Employee(ABC):
    """A member of an organisation chart."""

    def __init__(self, name: str, position: str, salary: int) -> None:
        self.name = name
        self.position = position
        self.salary = salary

    @abstractmethod
    def show_details(self, depth: int = 0) -> list[str]:
        """Print this employee indented by depth and return the lines."""

    @abstractmethod
    def total_salary(self) -> int:
        """Return the salary of this employee and everyone below."""

    def add_subordinate(self, employee: Employee) -> None:
        raise RuntimeError("Cannot add subordinate to individual contributor")

    def remove_subordinate(self, employee: Employee) -> None:
        raise RuntimeError("Cannot remove subordinate from individual contributor")

    def _line(self, icon: str, depth: int) -> str:
        return (
            f"{' ' * depth}{icon} {self.name} - {self.position} "
            f"(Salary: ${self.salary})"
        )


class IndividualContributor(Employee):
    def show_details(self, depth: int = 0) -> list[str]:
        lines: list[str] = []
        _emit(lines, self._line("👤", depth))
        return lines

    def total_salary(self) -> int:
        return self.salary


class Manager(Employee):
    def __init__(self, name: str, position: str, salary: int) -> None:
        super().__init__(name, position, salary)
        self._subordinates: list[Employee] = []

    @property
    def subordinates(self) -> tuple[Employee, ...]:
        return tuple(self._subordinates)

    def add_subordinate(self, employee: Employee) -> None:
        self._subordinates.append(employee)

    def remove_subordinate(self, employee: Employee) -> None:
        _remove_identical(self._subordinates, employee)

    def show_details(self, depth: int = 0) -> list[str]:
        lines: list[str] = []
        _emit(lines, self._line("👔", depth))
        for subordinate in self._subordinates:
            lines.extend(subordinate.show_details(depth + 2))
        return lines

    def total_salary(self) -> int:
        return self.salary + sum(sub.total_salary() for sub in self._subordinates)


def main(argv: list[str] | None = None) -> int:
    """Run the composite demonstration."""
    print("=== COMPOSITE PATTERN DEMO ===")

    print("\n1. FILE SYSTEM:")
    print("===============")
    documents = Directory("Documents")
    documents.add(File("document.txt", 100))
    documents.add(File("readme.md", 50))

    media = Directory("Media")
    media.add(File("image.jpg", 500))
    media.add(File("video.mp4", 2000))

    root = Directory("Root")
    root.add(documents)
    root.add(media)
    root.add(File("config.json", 20))

    print("\nFile System Structure:")
    root.display()
    print(f"\nTotal Size: {root.size()} KB")

    print("\n\n2. GRAPHICS SYSTEM:")
    print("===================")
    group1 = GraphicGroup("Group 1")
    group1.add(GraphicCircle(10, 10, 5))
    group1.add(GraphicRectangle(20, 20, 30, 40))

    group2 = GraphicGroup("Group 2")
    group2.add(GraphicCircle(50, 50, 8))
    group2.add(GraphicRectangle(100, 100, 50, 60))

    main_group = GraphicGroup("Main Group")
    main_group.add(group1)
    main_group.add(group2)

    print("\nDrawing all graphics:")
    main_group.draw()

    print("\nMoving entire group by (10, 10):")
    main_group.move(10, 10)
    main_group.draw()

    print("\n\n3. COMPANY ORGANIZATION:")
    print("========================")
    ceo = Manager("John Smith", "CEO", 200000)
    vp_eng = Manager("Alice Johnson", "VP Engineering", 150000)
    vp_sales = Manager("Bob Williams", "VP Sales", 150000)
    eng_mgr1 = Manager("Charlie Brown", "Engineering Manager", 120000)
    eng_mgr2 = Manager("Diana Prince", "Engineering Manager", 120000)

    eng_mgr1.add_subordinate(
        IndividualContributor("Eve Davis", "Senior Developer", 100000)
    )
    eng_mgr1.add_subordinate(IndividualContributor("Frank Miller", "Developer", 80000))
    eng_mgr2.add_subordinate(IndividualContributor("Grace Lee", "Developer", 80000))
    eng_mgr2.add_subordinate(
        IndividualContributor("Henry Wilson", "Junior Developer", 60000)
    )

    vp_eng.add_subordinate(eng_mgr1)
    vp_eng.add_subordinate(eng_mgr2)
    vp_sales.add_subordinate(IndividualContributor("Ivy Chen", "Sales Executive", 90000))
    vp_sales.add_subordinate(
        IndividualContributor("Jack Taylor", "Sales Executive", 90000)
    )

    ceo.add_subordinate(vp_eng)
    ceo.add_subordinate(vp_sales)

    print("\nCompany Organization Chart:")
    ceo.show_details()
    print(f"\nTotal Company Salary Budget: ${ceo.total_salary()}")

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Composite creates TREE structures (part-whole hierarchies)")
    print("2. Treats individual objects and compositions UNIFORMLY")
    print("3. Client code doesn't need to distinguish between leaf and composite")
    print("4. Easy to add new component types")
    print("5. Recursive composition allows unlimited nesting")
    print("6. Operations on composite automatically propagate to children")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())