"""Command: buttons send toggle commands to a lamp and a fan."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """A request wrapped as an object."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the request."""


class Lamp:
    """Receiver: a lamp that is either on or off."""

    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print("Lamp is on")

    def off(self) -> None:
        self.is_on = False
        print("Lamp is off")


class Fan:
    """Receiver: a fan that is either on or off."""

    def __init__(self) -> None:
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print("Fan is on")

    def off(self) -> None:
        self.is_on = False
        print("Fan is off")


class LampCommand(Command):
    """Toggles its own lamp."""

    def __init__(self) -> None:
        print("开关控制电灯")
        self.lamp = Lamp()

    def execute(self) -> None:
        if self.lamp.is_on:
            self.lamp.off()
        else:
            self.lamp.on()


class FanCommand(Command):
    """Toggles its own fan."""

    def __init__(self) -> None:
        print("开关控制风扇")
        self.fan = Fan()

    def execute(self) -> None:
        if self.fan.is_on:
            self.fan.off()
        else:
            self.fan.on()


class Button:
    """Invoker: runs whichever command it has been given."""

    def __init__(self, command: Command | None = None) -> None:
        self.command = command

    def touch(self) -> None:
        if self.command is None:
            raise RuntimeError("no command set on this button")
        print("触摸开关:", end="")
        self.command.execute()


class CommandQueue:
    """Runs a list of commands in the order they were added."""

    def __init__(self) -> None:
        self.commands: list[Command] = []

    def add_command(self, command: Command) -> None:
        self.commands.append(command)

    def execute(self) -> None:
        for command in self.commands:
            command.execute()


class QueueButton:
    """Invoker that runs a whole command queue."""

    def __init__(self, queue: CommandQueue | None = None) -> None:
        self.queue = queue

    def touch(self) -> None:
        if self.queue is None:
            raise RuntimeError("no command queue set on this button")
        print("触摸开关:", end="")
        self.queue.execute()


def main(argv: list[str] | None = None) -> int:
    button = Button()

    button.command = LampCommand()
    for _ in range(3):
        button.touch()

    print("\n")

    button.command = FanCommand()
    for _ in range(3):
        button.touch()

    print("\n\n" + "*" * 35)
    queue = CommandQueue()
    queue.add_command(LampCommand())
    queue.add_command(FanCommand())
    QueueButton(queue).touch()

    print("\n")
    return 0