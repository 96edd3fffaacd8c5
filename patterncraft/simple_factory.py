"""Simple factory: one factory hands out sport products chosen by name."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SportProduct(ABC):
    """A sport product that announces itself when it is made."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The product's display name."""

    def __init__(self) -> None:
        self.print_name()
        self.play()

    def print_name(self) -> str:
        """Announce the product and return the line printed."""
        line = f"Jungle get {self.name}"
        print(line)
        return line

    def play(self) -> str:
        """Play with the product and return the line printed."""
        line = f"Jungle play {self.name}"
        print(line)
        return line


class Basketball(SportProduct):
    name = "Basketball"


class Football(SportProduct):
    name = "Football"


class Volleyball(SportProduct):
    name = "Volleyball"


_PRODUCTS: dict[str, type[SportProduct]] = {
    "Basketball": Basketball,
    "Football": Football,
    "Volleyball": Volleyball,
}


class Factory:
    """Creates a product from its name."""

    def get_sport_product(self, product_name: str) -> SportProduct | None:
        """Return a new product, or None when the name is not known."""
        product_cls = _PRODUCTS.get(product_name)
        return product_cls() if product_cls is not None else None


def main(argv: list[str] | None = None) -> int:
    print("简单工厂模式")
    for product_name in ("Basketball", "Football", "Volleyball"):
        Factory().get_sport_product(product_name)
    return 0