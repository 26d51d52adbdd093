"""Flyweight pattern: sharing intrinsic state among many small objects."""

from __future__ import annotations

from dataclasses import dataclass, field


# ----- Forest -----


@dataclass(frozen=True)
class TreeType:
    """Shared appearance of a kind of tree."""

    name: str
    color: str
    texture: str

    def __post_init__(self) -> None:
        print(f"Creating TreeType: {self.name} (memory allocated)")

    def draw(self, x: int, y: int) -> str:
        line = f"Drawing {self.name} tree ({self.color}, {self.texture}) at ({x}, {y})"
        print(line)
        return line


class TreeFactory:
    """Pool that hands out one TreeType per distinct appearance."""

    def __init__(self) -> None:
        self._types: dict[tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        tree_type = self._types.get(key)
        if tree_type is None:
            tree_type = self._types[key] = TreeType(name, color, texture)
        else:
            print(f"Reusing existing TreeType: {name}")
        return tree_type

    def __len__(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    """A tree at a position, drawn with its shared type."""

    x: int
    y: int
    type: TreeType

    def draw(self) -> str:
        return self.type.draw(self.x, self.y)


class Forest:
    """Many trees sharing a small number of tree types."""

    def __init__(self, factory: TreeFactory | None = None) -> None:
        self.factory = factory if factory is not None else TreeFactory()
        self._trees: list[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get_tree_type(name, color, texture))
        self._trees.append(tree)
        return tree

    def draw(self) -> list[str]:
        print("\n=== Drawing Forest ===")
        return [tree.draw() for tree in self._trees]

    def __len__(self) -> int:
        return len(self._trees)


# ----- Text editor -----


@dataclass(frozen=True)
class CharacterStyle:
    """Shared formatting of characters."""

    font_family: str
    font_size: int
    color: str
    bold: bool
    italic: bool

    def __post_init__(self) -> None:
        print(f"Creating CharacterStyle: {self.font_family}, {self.font_size}pt")

    def display(self, character: str, x: int, y: int) -> str:
        line = (
            f"Char '{character}' at ({x},{y}) - "
            f"{self.font_family}, {self.font_size}pt, {self.color}"
        )
        if self.bold:
            line += ", Bold"
        if self.italic:
            line += ", Italic"
        print(line)
        return line


class StyleFactory:
    """Pool that hands out one CharacterStyle per distinct formatting."""

    def __init__(self) -> None:
        self._styles: dict[tuple[str, int, str, bool, bool], CharacterStyle] = {}

    def get_style(
        self, font: str, size: int, color: str, bold: bool, italic: bool
    ) -> CharacterStyle:
        key = (font, size, color, bool(bold), bool(italic))
        style = self._styles.get(key)
        if style is None:
            style = self._styles[key] = CharacterStyle(*key)
        return style

    def __len__(self) -> int:
        return len(self._styles)


@dataclass
class Character:
    """A character at a position with a shared style."""

    character: str
    x: int
    y: int
    style: CharacterStyle

    def display(self) -> str:
        return self.style.display(self.character, self.x, self.y)


class Document:
    """A sequence of positioned, styled characters."""

    def __init__(self, factory: StyleFactory | None = None) -> None:
        self.factory = factory if factory is not None else StyleFactory()
        self._characters: list[Character] = []

    def add_character(
        self,
        character: str,
        x: int,
        y: int,
        font: str,
        size: int,
        color: str,
        bold: bool,
        italic: bool,
    ) -> Character:
        style = self.factory.get_style(font, size, color, bold, italic)
        entry = Character(character, x, y, style)
        self._characters.append(entry)
        return entry

    def display(self) -> list[str]:
        print("\n=== Document Content ===")
        return [entry.display() for entry in self._characters]

    def __len__(self) -> int:
        return len(self._characters)


# ----- Particles -----


@dataclass(frozen=True)
class ParticleType:
    """Shared look of a kind of particle."""

    texture: str
    color: str
    size: int

    def __post_init__(self) -> None:
        print(f"Creating ParticleType: {self.texture} particle")

    def render(self, x: int, y: int, velocity_x: int, velocity_y: int) -> str:
        line = (
            f"{self.texture} particle ({self.color}, size:{self.size}) "
            f"at ({x},{y}) moving ({velocity_x},{velocity_y})"
        )
        print(line)
        return line


class ParticleFactory:
    """Pool that hands out one ParticleType per distinct look."""

    def __init__(self) -> None:
        self._particles: dict[tuple[str, str, int], ParticleType] = {}

    def get_particle(self, texture: str, color: str, size: int) -> ParticleType:
        key = (texture, color, size)
        particle = self._particles.get(key)
        if particle is None:
            particle = self._particles[key] = ParticleType(texture, color, size)
        return particle

    def __len__(self) -> int:
        return len(self._particles)


@dataclass
class Particle:
    """A moving particle with a shared type."""

    x: int
    y: int
    velocity_x: int
    velocity_y: int
    type: ParticleType

    def render(self) -> str:
        return self.type.render(self.x, self.y, self.velocity_x, self.velocity_y)


class ParticleSystem:
    """Many particles sharing a small number of particle types."""

    def __init__(self, factory: ParticleFactory | None = None) -> None:
        self.factory = factory if factory is not None else ParticleFactory()
        self._particles: list[Particle] = []

    def add_particle(
        self,
        x: int,
        y: int,
        velocity_x: int,
        velocity_y: int,
        texture: str,
        color: str,
        size: int,
    ) -> Particle:
        particle = Particle(
            x, y, velocity_x, velocity_y, self.factory.get_particle(texture, color, size)
        )
        self._particles.append(particle)
        return particle

    def render(self) -> list[str]:
        print("\n=== Rendering Particles ===")
        return [particle.render() for particle in self._particles]

    def __len__(self) -> int:
        return len(self._particles)


def main(argv: list[str] | None = None) -> int:
    """Run the flyweight demonstration."""
    print("=== FLYWEIGHT PATTERN DEMO ===")

    print("\n1. FOREST SIMULATION:")
    print("=====================")
    forest = Forest()

    print("\n[Planting Oak Trees]")
    for x, y in ((10, 20), (50, 60), (100, 120), (150, 180)):
        forest.plant_tree(x, y, "Oak", "Green", "Rough")

    print("\n[Planting Pine Trees]")
    for x, y in ((30, 40), (80, 90), (130, 140)):
        forest.plant_tree(x, y, "Pine", "Dark Green", "Smooth")

    print("\n[Planting Birch Trees]")
    for x, y in ((200, 210), (220, 230)):
        forest.plant_tree(x, y, "Birch", "White", "Peeling")

    forest.draw()

    print("\n[Memory Statistics]")
    print(f"Total trees: {len(forest)}")
    print(f"TreeType objects created: {len(forest.factory)}")
    print(f"Memory saved: {len(forest) - len(forest.factory)} object reuses")

    print("\n\n2. TEXT EDITOR:")
    print("===============")
    doc = Document()

    print("\n[Adding styled text]")
    styled = [(ch, False) for ch in "Hello"] + [(ch, True) for ch in "World"]
    for x, (ch, bold) in enumerate(styled):
        doc.add_character(ch, x, 0, "Arial", 12, "Black", bold, False)

    doc.display()

    print("\n[Memory Statistics]")
    print(f"Total characters: {len(doc)}")
    print(f"Style objects created: {len(doc.factory)}")

    print("\n\n3. PARTICLE SYSTEM:")
    print("===================")
    particle_system = ParticleSystem()

    print("\n[Creating explosion effect]")
    for i in range(5):
        particle_system.add_particle(100 + i * 10, 100 + i * 5, i, i, "Fire", "Red", 5)
    for i in range(3):
        particle_system.add_particle(200 + i * 15, 200 + i * 10, -i, i, "Smoke", "Gray", 8)

    particle_system.render()

    print("\n[Memory Statistics]")
    print(f"Total particles: {len(particle_system)}")

    print("\n\n=== KEY TAKEAWAYS ===")
    print("1. Flyweight SHARES common state among many objects")
    print("2. Separates intrinsic (shared) from extrinsic (unique) state")
    print("3. Intrinsic state stored in flyweight (immutable, shared)")
    print("4. Extrinsic state passed to flyweight methods (context-dependent)")
    print("5. Factory manages flyweight pool and ensures sharing")
    print("6. Dramatically reduces memory when many similar objects exist")
    print("7. Trade-off: saves memory but may increase complexity")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())