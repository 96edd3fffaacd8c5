"""Composite: departments hold offices and other departments."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A node of the organisation tree."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abstractmethod
    def add(self, component: Component) -> None:
        """Add a child node."""

    @abstractmethod
    def remove(self, component: Component) -> None:
        """Remove a child node."""

    @abstractmethod
    def get_child(self, index: int) -> Component | None:
        """Return the child at index."""

    @abstractmethod
    def operation(self) -> list[str]:
        """Run the node's work; return the lines printed."""


class Office(Component):
    """A leaf: offices have no children."""

    label = "Office"

    def add(self, component: Component) -> None:
        print("not support!")

    def remove(self, component: Component) -> None:
        print("not support!")

    def get_child(self, index: int) -> None:
        print("not support!")
        return None

    def operation(self) -> list[str]:
        line = f"-----{self.label}:{self.name}"
        print(line)
        return [line]


class AdminOffice(Office):
    label = "Administration Office"


class DeanOffice(Office):
    label = "Dean Office"


class SubComponent(Component):
    """A department that holds other components."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.children: list[Component] = []

    def add(self, component: Component) -> None:
        self.children.append(component)

    def remove(self, component: Component) -> None:
        """Remove the first child with the same name, if any."""
        for position, child in enumerate(self.children):
            if child.name == component.name:
                del self.children[position]
                break

    def get_child(self, index: int) -> Component:
        return self.children[index]

    def operation(self) -> list[str]:
        print(self.name)
        lines = [self.name]
        for child in self.children:
            lines.extend(child.operation())
        return lines


def main(argv: list[str] | None = None) -> int:
    head = SubComponent("总部")
    sichuan_branch = SubComponent("四川分部")
    cd_branch = SubComponent("成都分部")
    my_branch = SubComponent("绵阳分部")

    for branch in (cd_branch, my_branch):
        branch.add(AdminOffice("行政办公室"))
        branch.add(DeanOffice("教务办公室"))

    sichuan_branch.add(AdminOffice("行政办公室"))
    sichuan_branch.add(DeanOffice("教务办公室"))
    sichuan_branch.add(cd_branch)
    sichuan_branch.add(my_branch)

    head.add(AdminOffice("行政办公室"))
    head.add(DeanOffice("教务办公室"))
    head.add(sichuan_branch)

    head.operation()
    return 0