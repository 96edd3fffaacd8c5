"""State: a card player's level decides which skills are used, and changes with the score."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol

_START_SCORE = 100


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class GameAccount:
    """A player whose behaviour is delegated to its current level."""

    def __init__(self, name: str = "none", rng: _RandomSource | None = None) -> None:
        print("创立游戏角色，积分：100，级别：PRIMARY")
        self.name = name
        self.score = _START_SCORE
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self.level: Level = Primary(self)

    def play_card(self) -> bool:
        """Play one round; return True when it was won."""
        self.level.play_card()
        won = self._rng.randrange(2) == 0
        if won:
            self.win()
        else:
            self.lose()
        self.level.upgrade_level()
        return won

    def win(self) -> None:
        self.score += 50 if self.score < 200 else 100
        print(f"\n\t胜利，最新积分为 {self.score}")

    def lose(self) -> None:
        self.score += 30
        print(f"\n\t输牌，最新积分为 {self.score}")


class Level(ABC):
    """A level of play; each level unlocks its own skills.

    A skill text left empty means the level does not have that skill.
    """

    basic_skill = "\t使用基本技能,"
    double_score_skill = ""
    change_cards_skill = ""
    peek_cards_skill = ""

    def __init__(self, game_account: GameAccount) -> None:
        self.game_account = game_account

    @staticmethod
    def _use(skill: str) -> str:
        if skill:
            print(skill, end="")
        return skill

    def play_card(self) -> str:
        """Use every skill of this level in turn; return the text they produced."""
        return "".join(
            (self.play(), self.double_score(), self.change_cards(), self.peek_cards())
        )

    def play(self) -> str:
        """Use the basic skill; return its text."""
        return self._use(self.basic_skill)

    def double_score(self) -> str:
        """Use the double-score skill if this level has it; return its text."""
        return self._use(self.double_score_skill)

    def change_cards(self) -> str:
        """Use the change-cards skill if this level has it; return its text."""
        return self._use(self.change_cards_skill)

    def peek_cards(self) -> str:
        """Use the peek-cards skill if this level has it; return its text."""
        return self._use(self.peek_cards_skill)

    @abstractmethod
    def upgrade_level(self) -> Level:
        """Move the account to the level its score calls for; return that level."""

    def _switch(self, level_cls: type[Level], message: str) -> Level:
        account = self.game_account
        account.level = level_cls(account)
        print(message + "\n")
        return account.level


class Primary(Level):
    def upgrade_level(self) -> Level:
        if self.game_account.score > 150:
            return self._switch(Secondary, "\t升级！ 级别：SECONDARY")
        print()
        return self


class Secondary(Level):
    double_score_skill = "使用胜利双倍积分技能"

    def upgrade_level(self) -> Level:
        score = self.game_account.score
        if score < 150:
            return self._switch(Primary, "\t降级！ 级别：PRIMARY")
        if score > 200:
            return self._switch(Professional, "\t升级！ 级别：PROFESSIONAL")
        return self


class Professional(Level):
    double_score_skill = "使用胜利双倍积分技能,"
    change_cards_skill = "使用换牌技能"

    def upgrade_level(self) -> Level:
        score = self.game_account.score
        if score < 200:
            return self._switch(Secondary, "\t降级！ 级别：SECONDARY")
        if score > 250:
            return self._switch(Final, "\t升级！ 级别：FINAL")
        return self


class Final(Level):
    double_score_skill = "使用胜利双倍积分技能,"
    change_cards_skill = "使用换牌技能,"
    peek_cards_skill = "使用偷看卡牌技能"

    def upgrade_level(self) -> Level:
        if self.game_account.score < 250:
            return self._switch(Professional, "\t降级！ 级别：PROFESSIONAL")
        print(f"\t{self.game_account.name} 已经是最高级\n")
        return self


def main(argv: list[str] | None = None) -> int:
    jungle = GameAccount("Jungle")
    for round_no in range(1, 6):
        print(f"{round_no} ")
        jungle.play_card()
    print("\n")
    return 0