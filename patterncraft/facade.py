"""Facade: one call powers on the whole computer."""

from __future__ import annotations


def _report(message: str) -> str:
    print(message)
    return message


class Memory:
    def self_check(self) -> str:
        return _report("memory selfchecking......")


class CPU:
    def run(self) -> str:
        return _report("running cpu......")


class HardDisk:
    def read(self) -> str:
        return _report("reading hardDisk......")


class OS:
    def load(self) -> str:
        return _report("loading os.....")


class Facade:
    """Starts each subsystem in turn."""

    def __init__(self) -> None:
        self.memory = Memory()
        self.cpu = CPU()
        self.hard_disk = HardDisk()
        self.os = OS()

    def power_on(self) -> list[str]:
        """Start every subsystem; return the lines reported."""
        return [
            _report("power on……"),
            self.memory.self_check(),
            self.cpu.run(),
            self.hard_disk.read(),
            self.os.load(),
            _report("ready!"),
        ]


def main(argv: list[str] | None = None) -> int:
    Facade().power_on()
    print("\n")
    return 0