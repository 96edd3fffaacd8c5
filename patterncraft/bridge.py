"""Bridge: phones and games vary independently."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Game(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def play(self) -> str:
        """Run the game and return the line printed."""


class GameA(Game):
    def play(self) -> str:
        line = "Jungle玩游戏A"
        print(line)
        return line


class GameB(Game):
    def play(self) -> str:
        line = "Jungle玩游戏B"
        print(line)
        return line


class Phone:
    """The abstraction side: a phone that runs whatever game is set up."""

    def __init__(self) -> None:
        self.game: Game | None = None

    def setup_game(self, game: Game) -> None:
        self.game = game

    def play(self) -> str:
        if self.game is None:
            raise RuntimeError("no game set up on this phone")
        return self.game.play()


class PhoneA(Phone):
    pass


class PhoneB(Phone):
    pass


def main(argv: list[str] | None = None) -> int:
    phone = PhoneA()
    phone.setup_game(GameA())
    phone.play()
    print("+" * 34)
    phone.setup_game(GameB())
    phone.play()
    return 0