"""Observer: players in a squad alert each other through an ally centre."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto

_SQUAD_SIZE = 4


class InfoType(Enum):
    NONE = auto()
    RESOURCE = auto()
    HELP = auto()


class Observer(ABC):
    """A squad member that can raise alerts."""

    def __init__(self, name: str = "none") -> None:
        self.name = name

    @abstractmethod
    def call(self, info_type: InfoType, ally_center: AllyCenter) -> list[Observer]:
        """Raise an alert through the ally centre; return who responded."""


class Player(Observer):
    def call(self, info_type: InfoType, ally_center: AllyCenter) -> list[Observer]:
        if info_type is InfoType.RESOURCE:
            print(f"{self.name} :我这里有物资")
        elif info_type is InfoType.HELP:
            print(f"{self.name} :救救我")
        else:
            print("Nothing")
        return ally_center.notify(info_type, self.name)

    def help(self) -> str:
        """Answer a call for help; return the reply."""
        reply = f"{self.name}:坚持住，我来救你！"
        print(reply)
        return reply

    def come(self) -> str:
        """Answer a resource alert; return the reply."""
        reply = f"{self.name}:好的，我来取物资"
        print(reply)
        return reply


class AllyCenter(ABC):
    """Keeps a squad of up to four players."""

    def __init__(self) -> None:
        print("大吉大利，今晚吃鸡!")
        self.players: list[Observer] = []

    def join(self, player: Observer) -> bool:
        """Add a player; return False when the squad is already full."""
        if len(self.players) == _SQUAD_SIZE:
            print("玩家已满!")
            return False
        print(f"玩家 {player.name} 加入")
        self.players.append(player)
        if len(self.players) == _SQUAD_SIZE:
            print("组队成功，不要怂，一起上！")
        return True

    def remove(self, player: Observer) -> None:
        """Announce that a player leaves; the squad list itself is kept."""
        print(f"玩家 {player.name} 退出")

    @abstractmethod
    def notify(self, info_type: InfoType, name: str) -> list[Observer]:
        """Tell every player except name; return who responded."""


class AllyCenterController(AllyCenter):
    def notify(self, info_type: InfoType, name: str) -> list[Observer]:
        if info_type not in (InfoType.RESOURCE, InfoType.HELP):
            print("Nothing")
            return []
        responders = [player for player in self.players if player.name != name]
        for player in responders:
            if info_type is InfoType.RESOURCE:
                player.come()
            else:
                player.help()
        return responders