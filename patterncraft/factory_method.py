"""Factory method: each sport has its own factory."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SportProduct:
    """A sport product; the base product, having no name, stays silent."""

    name: str | None = None

    def __init__(self) -> None:
        self.print_name()
        self.play()

    def print_name(self) -> str:
        """Announce the product; return the line printed, or "" if unnamed."""
        if self.name is None:
            return ""
        line = f"Jungle get {self.name}"
        print(line)
        return line

    def play(self) -> str:
        """Play with the product; return the line printed, or "" if unnamed."""
        if self.name is None:
            return ""
        line = f"Jungle play {self.name}"
        print(f"{line}\n")
        return line


class Basketball(SportProduct):
    name = "Basketball"


class Football(SportProduct):
    name = "Football"


class Volleyball(SportProduct):
    name = "Volleyball"


class SportFactory(ABC):
    """A factory that makes one kind of sport product."""

    @abstractmethod
    def get_sport_product(self) -> SportProduct:
        """Make a new product."""


class BasketballFactory(SportFactory):
    def __init__(self) -> None:
        print("BasketballFactory")

    def get_sport_product(self) -> Basketball:
        print("basketball", end="")
        return Basketball()


class FootballFactory(SportFactory):
    def __init__(self) -> None:
        print("FootballFactory")

    def get_sport_product(self) -> Football:
        return Football()


class VolleyballFactory(SportFactory):
    def __init__(self) -> None:
        print("VolleyballFactory")

    def get_sport_product(self) -> Volleyball:
        return Volleyball()


def main(argv: list[str] | None = None) -> int:
    print("工厂方法模式")
    for factory_cls in (BasketballFactory, FootballFactory, VolleyballFactory):
        factory_cls().get_sport_product()
    return 0