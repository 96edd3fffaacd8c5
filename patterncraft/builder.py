"""Builder: a director assembles a house through a builder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class House:
    """The product being assembled."""

    floor: str = ""
    wall: str = ""
    roof: str = ""

    def print_info(self) -> str:
        """Print the house's parts and return the text printed."""
        text = f"Floor:{self.floor}\t\nWall:{self.wall}\t\nRoof:{self.roof}\t\n"
        print(text, end="")
        return text


class HouseBuilder(ABC):
    """Builds the parts of one house."""

    def __init__(self) -> None:
        self.house = House()

    @abstractmethod
    def build_floor(self) -> None:
        """Lay the floor."""

    @abstractmethod
    def build_wall(self) -> None:
        """Put up the walls."""

    @abstractmethod
    def build_roof(self) -> None:
        """Put on the roof."""


class ConcreteBuilderA(HouseBuilder):
    def __init__(self) -> None:
        super().__init__()
        print("ConcreteBuilderA")

    def build_floor(self) -> None:
        self.house.floor = "Floor_A"

    def build_wall(self) -> None:
        self.house.wall = "Wall_A"

    def build_roof(self) -> None:
        self.house.roof = "Roof_A"


class ConcreteBuilderB(HouseBuilder):
    def __init__(self) -> None:
        super().__init__()
        print("ConcreteBuilderB")

    def build_floor(self) -> None:
        self.house.floor = "Floor_B"

    def build_wall(self) -> None:
        self.house.wall = "Wall_B"

    def build_roof(self) -> None:
        self.house.roof = "Roof_B"


class Director:
    """Runs the build steps in order on its builder."""

    def __init__(self, builder: HouseBuilder | None = None) -> None:
        self.builder = builder

    def construct(self) -> House:
        if self.builder is None:
            raise RuntimeError("no builder set")
        self.builder.build_floor()
        self.builder.build_wall()
        self.builder.build_roof()
        return self.builder.house


def main(argv: list[str] | None = None) -> int:
    director = Director()
    for builder_cls in (ConcreteBuilderA, ConcreteBuilderB):
        director.builder = builder_cls()
        director.construct().print_info()
    return 0