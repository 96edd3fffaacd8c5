"""Visitor: customers and cashiers visit the goods in a shopping cart."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class Element(ABC):
    """A piece of merchandise."""

    name: str = ""
    price: int = 0
    num: int = 0

    @abstractmethod
    def accept(self, visitor: Visitor) -> Any:
        """Let the visitor handle this element; return what it returns."""


@dataclass
class Apple(Element):
    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_apple(self)


@dataclass
class Book(Element):
    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_book(self)


class Visitor(ABC):
    @abstractmethod
    def visit_apple(self, apple: Apple) -> Any:
        """Handle an apple."""

    @abstractmethod
    def visit_book(self, book: Book) -> Any:
        """Handle a book."""


class Customer(Visitor):
    """Picks quantities and looks at unit prices."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    def set_num(self, element: Element, num: int) -> None:
        element.num = num

    def visit_apple(self, apple: Apple) -> int:
        print(f"  {apple.name} \t单价: \t{apple.price} 元/kg")
        return apple.price

    def visit_book(self, book: Book) -> int:
        print(f"  《{book.name}》\t单价: \t{book.price} 元/本")
        return book.price


class Cashier(Visitor):
    """Works out the total for each item."""

    def visit_apple(self, apple: Apple) -> int:
        total = apple.price * apple.num
        print(f"  {apple.name} 总价： {total} 元")
        return total

    def visit_book(self, book: Book) -> int:
        total = book.price * book.num
        print(f"  《{book.name}》 总价： {total} 元")
        return total


class ShoppingCart:
    """The object structure: a list of elements visited in order."""

    def __init__(self) -> None:
        self.elements: list[Element] = []

    def add_element(self, element: Element) -> None:
        print(f"  商品名：{element.name}, \t数量：{element.num}, \t加入购物车成功！")
        self.elements.append(element)

    def accept(self, visitor: Visitor) -> list[Any]:
        """Have the visitor visit every element; return its results in order."""
        return [element.accept(visitor) for element in self.elements]


def main(argv: list[str] | None = None) -> int:
    apple1 = Apple("红富士苹果", 7)
    apple2 = Apple("花牛苹果", 5)
    book1 = Book("红楼梦", 129)
    book2 = Book("终结者", 49)

    cashier = Cashier()
    jungle = Customer("Jungle")
    jungle.set_num(apple1, 2)
    jungle.set_num(apple2, 4)
    jungle.set_num(book1, 1)
    jungle.set_num(book2, 3)

    cart = ShoppingCart()
    for element in (apple1, apple2, book1, book2):
        cart.add_element(element)

    print("\n")
    cart.accept(jungle)

    print("\n")
    cart.accept(cashier)

    print("\n")
    return 0