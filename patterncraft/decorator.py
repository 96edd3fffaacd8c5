"""Decorator: accessories wrap a phone and add behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Something that can be decorated."""

    @abstractmethod
    def operation(self) -> None:
        """Describe the component."""


class Phone(Component):
    def operation(self) -> None:
        print("手机")


class Decorator(Component):
    """Wraps a component and adds its own behaviour after it."""

    accessory: str | None = None

    def __init__(self, component: Component) -> None:
        self.component = component

    def operation(self) -> None:
        self.component.operation()
        self.new_behavior()

    def new_behavior(self) -> str:
        """Add the accessory; return the line printed, or "" when there is none."""
        if self.accessory is None:
            return ""
        print(self.accessory)
        return self.accessory


class DecoratorShell(Decorator):
    accessory = "安装手机壳"


class DecoratorSticker(Decorator):
    accessory = "贴卡通贴纸"


class DecoratorRope(Decorator):
    accessory = "系手机挂绳"


def main(argv: list[str] | None = None) -> int:
    print("\nJungle's first phone")
    DecoratorShell(Phone()).operation()

    print("\nJungle's second phone'")
    DecoratorSticker(DecoratorShell(Phone())).operation()

    print("\nJungle's third phone'")
    DecoratorRope(DecoratorSticker(DecoratorShell(Phone()))).operation()

    print("\n")
    return 0