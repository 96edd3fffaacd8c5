from patterncraft.observer import AllyCenterController, InfoType, Player


def _squad():
    center = AllyCenterController()
    players = [Player(name) for name in ("P1", "P2", "P3", "P4")]
    for player in players:
        center.join(player)
    return center, players


def test_center_greets(capsys):
    AllyCenterController()
    assert capsys.readouterr().out == "大吉大利，今晚吃鸡!\n"


def test_full_squad_announced(capsys):
    center, players = _squad()
    out = capsys.readouterr().out
    assert "组队成功，不要怂，一起上！" in out
    assert center.players == players


def test_fifth_player_rejected(capsys):
    center, players = _squad()
    capsys.readouterr()
    assert center.join(Player("P5")) is False
    assert capsys.readouterr().out == "玩家已满!\n"
    assert center.players == players


def test_help_call_reaches_everyone_else(capsys):
    center, players = _squad()
    capsys.readouterr()
    responders = players[0].call(InfoType.HELP, center)
    assert responders == players[1:]
    out = capsys.readouterr().out
    assert out.startswith("P1 :救救我\n")
    assert "P2:坚持住，我来救你！" in out
    assert "P1:坚持住" not in out


def test_resource_call_brings_others(capsys):
    center, players = _squad()
    capsys.readouterr()
    responders = players[2].call(InfoType.RESOURCE, center)
    assert players[2] not in responders
    assert len(responders) == len(players) - 1
    assert "P4:好的，我来取物资" in capsys.readouterr().out


def test_none_call_reaches_nobody(capsys):
    center, players = _squad()
    capsys.readouterr()
    assert players[1].call(InfoType.NONE, center) == []
    assert capsys.readouterr().out == "Nothing\nNothing\n"


def test_remove_only_announces(capsys):
    center, players = _squad()
    capsys.readouterr()
    center.remove(players[0])
    assert capsys.readouterr().out == "玩家 P1 退出\n"
    assert center.players == players


def test_default_player_name():
    assert Player().name == "none"