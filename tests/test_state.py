import pytest

from patterncraft.state import (
    Final,
    GameAccount,
    Level,
    Primary,
    Professional,
    Secondary,
    main,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def test_new_account_starts_primary(capsys):
    account = GameAccount("Jungle")
    assert account.score == 100
    assert isinstance(account.level, Primary)
    assert account.level.game_account is account
    assert "创立游戏角色，积分：100，级别：PRIMARY" in capsys.readouterr().out


def test_default_name():
    assert GameAccount().name == "none"


def test_win_below_200_adds_50():
    account = GameAccount()
    before = account.score
    account.win()
    assert account.score - before == 50


def test_win_at_200_adds_100():
    account = GameAccount()
    account.score = 200
    account.win()
    assert account.score - 200 == 100


def test_lose_adds_30(capsys):
    account = GameAccount()
    account.lose()
    assert account.score - 100 == 30
    assert "输牌" in capsys.readouterr().out


def test_primary_upgrades_above_150():
    account = GameAccount()
    account.score = 151
    new_level = account.level.upgrade_level()
    assert isinstance(new_level, Secondary)
    assert account.level is new_level


def test_primary_stays_at_150():
    account = GameAccount()
    account.score = 150
    level = account.level
    assert account.level.upgrade_level() is level


def test_secondary_downgrades_below_150(capsys):
    account = GameAccount()
    account.level = Secondary(account)
    account.score = 140
    capsys.readouterr()
    new_level = account.level.upgrade_level()
    assert account.level is new_level
    assert new_level.game_account is account
    assert type(new_level).__name__ == "Primary"
    assert "降级！ 级别：PRIMARY" in capsys.readouterr().out


def test_secondary_stays_between_150_and_200():
    account = GameAccount()
    level = Secondary(account)
    account.level = level
    account.score = 180
    assert account.level.upgrade_level() is level
    assert account.level is level


def test_secondary_upgrades_above_200(capsys):
    account = GameAccount()
    account.level = Secondary(account)
    account.score = 210
    capsys.readouterr()
    new_level = account.level.upgrade_level()
    assert account.level is new_level
    assert type(new_level).__name__ == "Professional"
    assert "升级！ 级别：PROFESSIONAL" in capsys.readouterr().out


def test_professional_downgrades_below_200(capsys):
    account = GameAccount()
    account.level = Professional(account)
    account.score = 190
    capsys.readouterr()
    new_level = account.level.upgrade_level()
    assert account.level is new_level
    assert type(new_level).__name__ == "Secondary"
    assert "降级！ 级别：SECONDARY" in capsys.readouterr().out


def test_professional_stays_between_200_and_250():
    account = GameAccount()
    level = Professional(account)
    account.level = level
    account.score = 220
    assert account.level.upgrade_level() is level


def test_professional_upgrades_above_250(capsys):
    account = GameAccount()
    account.level = Professional(account)
    account.score = 260
    capsys.readouterr()
    new_level = account.level.upgrade_level()
    assert account.level is new_level
    assert type(new_level).__name__ == "Final"
    assert "升级！ 级别：FINAL" in capsys.readouterr().out


def test_final_downgrades_below_250(capsys):
    account = GameAccount()
    account.level = Final(account)
    account.score = 240
    capsys.readouterr()
    new_level = account.level.upgrade_level()
    assert account.level is new_level
    assert type(new_level).__name__ == "Professional"
    assert "降级！ 级别：PROFESSIONAL" in capsys.readouterr().out


def test_final_stays_highest(capsys):
    account = GameAccount("Jungle")
    account.level = Final(account)
    account.score = 300
    level = account.level
    assert account.level.upgrade_level() is level
    assert "Jungle 已经是最高级" in capsys.readouterr().out


def test_play_card_win_and_lose():
    winner = GameAccount(rng=_FixedRng(0))
    assert winner.play_card() is True
    assert winner.score - 100 == 50

    loser = GameAccount(rng=_FixedRng(1))
    assert loser.play_card() is False
    assert loser.score - 100 == 30


def test_play_card_moves_level_up(capsys):
    account = GameAccount(rng=_FixedRng(0))
    account.play_card()
    account.play_card()
    assert account.score == 200
    assert type(account.level).__name__ == "Secondary"
    assert "升级！ 级别：SECONDARY" in capsys.readouterr().out


def test_final_skills_printed(capsys):
    account = GameAccount()
    Final(account).play_card()
    out = capsys.readouterr().out
    assert "使用基本技能," in out
    assert "使用换牌技能," in out
    assert "使用偷看卡牌技能" in out


def test_primary_uses_only_basic_skill(capsys):
    account = GameAccount()
    capsys.readouterr()
    account.level.play_card()
    assert capsys.readouterr().out == "\t使用基本技能,"


def test_level_is_abstract():
    with pytest.raises(TypeError):
        Level(GameAccount())


def test_main_runs(capsys):
    assert main([]) == 0
    assert "1 \n" in capsys.readouterr().out