"""Abstract factory: a factory makes a matching ball and shirt."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Ball:
    """A ball; the base ball, having no sport, stays silent."""

    sport: str | None = None

    def __init__(self) -> None:
        self.play()

    def play(self) -> str:
        """Play with the ball; return the line printed, or "" for the base ball."""
        if self.sport is None:
            return ""
        line = f"Jungle play {self.sport}"
        print(f"{line}\n")
        return line


class Basketball(Ball):
    sport = "Basketball"


class Football(Ball):
    sport = "Football"


class Shirt:
    """A shirt; the base shirt, having no sport, stays silent."""

    sport: str | None = None

    def __init__(self) -> None:
        self.wear_shirt()

    def wear_shirt(self) -> str:
        """Wear the shirt; return the line printed, or "" for the base shirt."""
        if self.sport is None:
            return ""
        line = f"Jungle wear {self.sport} Shirt"
        print(f"{line}\n")
        return line


class BasketballShirt(Shirt):
    sport = "Basketball"


class FootballShirt(Shirt):
    sport = "Football"


class SportFactory(ABC):
    """Makes a family of products for one sport."""

    @abstractmethod
    def get_ball(self) -> Ball:
        """Make the sport's ball."""

    @abstractmethod
    def get_shirt(self) -> Shirt:
        """Make the sport's shirt."""


class BasketballFactory(SportFactory):
    def __init__(self) -> None:
        print("BasketballFactory")

    def get_ball(self) -> Basketball:
        print("Jungle get basketball")
        return Basketball()

    def get_shirt(self) -> BasketballShirt:
        print("Jungle get basketball shirt")
        return BasketballShirt()


class FootballFactory(SportFactory):
    def __init__(self) -> None:
        print("FootballFactory")

    def get_ball(self) -> Football:
        print("Jungle get football")
        return Football()

    def get_shirt(self) -> FootballShirt:
        print("Jungle get football shirt")
        return FootballShirt()


def main(argv: list[str] | None = None) -> int:
    for factory_cls in (BasketballFactory, FootballFactory):
        factory = factory_cls()
        factory.get_ball()
        factory.get_shirt()
    return 0