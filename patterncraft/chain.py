"""Chain of responsibility: bills move up the chain until someone may approve them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Bill:
    """An expense claim."""

    id: int
    name: str
    account: float

    def print_info(self) -> str:
        """Print the bill's details and return the text printed."""
        text = f"\nID:\t{self.id}\nName:\t{self.name}\nAccount:\t{self.account:f}\n"
        print(text, end="")
        return text


class Approver(ABC):
    """One link of the approval chain."""

    title = ""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.superior: Approver | None = None

    def set_superior(self, superior: Approver) -> None:
        self.superior = superior

    @abstractmethod
    def handle_request(self, bill: Bill) -> Approver:
        """Approve the bill or pass it on; return the approver who handled it."""

    def _approve(self, bill: Bill) -> Approver:
        print(f"{self.title} {self.name} 处理了该票据，票据信息：", end="")
        bill.print_info()
        return self

    def _forward(self, bill: Bill) -> Approver:
        print(f"{self.title}无权处理，转交上级……")
        if self.superior is None:
            raise RuntimeError(f"{self.title} {self.name} has no superior")
        return self.superior.handle_request(bill)


class GroupLeader(Approver):
    title = "组长"

    def handle_request(self, bill: Bill) -> Approver:
        if bill.account < 10:
            return self._approve(bill)
        return self._forward(bill)


class Head(Approver):
    title = "主管"

    def handle_request(self, bill: Bill) -> Approver:
        if 10 <= bill.account < 30:
            return self._approve(bill)
        return self._forward(bill)


class Manager(Approver):
    title = "经理"

    def handle_request(self, bill: Bill) -> Approver:
        if 30 <= bill.account < 60:
            return self._approve(bill)
        return self._forward(bill)


class Boss(Approver):
    title = "老板"

    def handle_request(self, bill: Bill) -> Approver:
        return self._approve(bill)


def main(argv: list[str] | None = None) -> int:
    zuzhang = GroupLeader("孙大哥")
    bingge = Head("兵哥")
    chunzong = Manager("春总")
    laoban = Boss("张老板")

    zuzhang.set_superior(bingge)
    bingge.set_superior(chunzong)
    chunzong.set_superior(laoban)

    bills = [
        Bill(1, "Jungle", 8),
        Bill(2, "Lucy", 14.4),
        Bill(3, "Jack", 32.9),
        Bill(4, "Tom", 89),
    ]
    for position, bill in enumerate(bills):
        zuzhang.handle_request(bill)
        if position < len(bills) - 1:
            print()

    print("\n")
    return 0