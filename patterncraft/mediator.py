"""Mediator: an agency puts landlords and tenants in touch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto


class PersonType(Enum):
    NONE_PERSON = auto()
    LANDLORD = auto()
    TENANT = auto()


class Colleague(ABC):
    """A party that talks to others only through a mediator."""

    def __init__(self, person_type: PersonType) -> None:
        self.person_type = person_type
        self.mediator: Mediator | None = None

    def _ask_mediator(self) -> list[Colleague]:
        if self.mediator is None:
            raise RuntimeError("no mediator set")
        return self.mediator.operation(self)

    @abstractmethod
    def ask(self) -> list[Colleague]:
        """Ask the mediator about the other side; return who answered."""

    @abstractmethod
    def answer(self) -> str:
        """Describe oneself; return the line printed."""


class Landlord(Colleague):
    """A landlord; one made without a name is of no person type."""

    def __init__(
        self,
        name: str | None = None,
        price: int = 0,
        address: str = "none",
        phone_number: str = "none",
    ) -> None:
        if name is None:
            super().__init__(PersonType.NONE_PERSON)
            self.name = "none"
            self.price = 0
            self.address = "none"
            self.phone_number = "none"
        else:
            super().__init__(PersonType.LANDLORD)
            self.name = name
            self.price = price
            self.address = address
            self.phone_number = phone_number

    def answer(self) -> str:
        line = (
            f"房东姓名：{self.name}, 房租：{self.price}, "
            f"地址：{self.address}, 联系电话：{self.phone_number}"
        )
        print(line)
        return line

    def ask(self) -> list[Colleague]:
        print(f"房东{self.name}查看租客信息：")
        return self._ask_mediator()


class Tenant(Colleague):
    """A tenant; one made without a name is of no person type."""

    def __init__(self, name: str | None = None) -> None:
        if name is None:
            super().__init__(PersonType.NONE_PERSON)
            self.name = "none"
        else:
            super().__init__(PersonType.TENANT)
            self.name = name

    def ask(self) -> list[Colleague]:
        print(f"租客{self.name}询问房东信息")
        return self._ask_mediator()

    def answer(self) -> str:
        line = f"租客姓名：{self.name}"
        print(line)
        return line


class Mediator(ABC):
    @abstractmethod
    def register(self, person: Colleague) -> None:
        """Add a party to the mediator's books."""

    @abstractmethod
    def operation(self, person: Colleague) -> list[Colleague]:
        """Have the other side answer the person; return who answered."""


class Agency(Mediator):
    """Keeps landlords and tenants and lets each side see the other."""

    def __init__(self) -> None:
        self.landlords: list[Landlord] = []
        self.tenants: list[Tenant] = []

    def register(self, person: Colleague) -> None:
        if person.person_type is PersonType.LANDLORD:
            self.landlords.append(person)
        elif person.person_type is PersonType.TENANT:
            self.tenants.append(person)
        else:
            print("wrong person")

    def operation(self, person: Colleague) -> list[Colleague]:
        if person.person_type is PersonType.LANDLORD:
            others: list[Colleague] = list(self.tenants)
        elif person.person_type is PersonType.TENANT:
            others = list(self.landlords)
        else:
            others = []
        for other in others:
            other.answer()
        return others