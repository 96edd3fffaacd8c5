"""Flyweight: network devices are shared from a single pool."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional


class NetDevice(ABC):
    """A shared device; the port number is supplied by the caller."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The device's display name."""

    def show(self, port_num: int) -> None:
        print(f"NetDevice :{self.name}  port: {port_num}")


class Hub(NetDevice):
    name = "集线器"


class Switch(NetDevice):
    name = "交换机"


class NetDeviceFactory:
    """Hands out the pooled devices; one factory exists per process."""

    _instance: Optional["NetDeviceFactory"] = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        self._pool: dict[str, NetDevice] = {"H": Hub(), "S": Switch()}

    def get_net_device(self, ch: str) -> NetDevice | None:
        """Return the shared hub for 'H', the shared switch for 'S', else None."""
        device = self._pool.get(ch)
        if device is None:
            print("wrong input!")
        return device

    @classmethod
    def get_factory(cls) -> "NetDeviceFactory":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance


def main(argv: list[str] | None = None) -> int:
    factory = NetDeviceFactory.get_factory()

    device1 = factory.get_net_device("H")
    device1.show(1)
    device2 = factory.get_net_device("H")
    device2.show(2)
    print("判断两个hub是否是同一个:")
    print(f"device1:{id(device1):#x}\ndevice2:{id(device2):#x}")

    print("\n\n\n")
    device3 = factory.get_net_device("S")
    device3.show(1)
    device4 = factory.get_net_device("S")
    device4.show(2)
    print("判断两个switch是否是同一个:")
    print(f"device3:{id(device3):#x}\ndevice4:{id(device4):#x}")

    print("\n")
    return 0