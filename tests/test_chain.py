import pytest

from patterncraft.chain import Approver, Bill, Boss, GroupLeader, Head, Manager, main


@pytest.fixture
def chain():
    leader = GroupLeader("孙大哥")
    head = Head("兵哥")
    manager = Manager("春总")
    boss = Boss("张老板")
    leader.set_superior(head)
    head.set_superior(manager)
    manager.set_superior(boss)
    return leader, head, manager, boss


def test_approver_is_abstract():
    with pytest.raises(TypeError):
        Approver("x")


@pytest.mark.parametrize(
    "amount, level",
    [(8, 0), (14.4, 1), (32.9, 2), (89, 3), (10, 1), (30, 2), (60, 3)],
)
def test_bill_reaches_right_approver(chain, amount, level):
    handler = chain[0].handle_request(Bill(1, "Jungle", amount))
    assert handler is chain[level]


def test_forwarding_messages(chain, capsys):
    chain[0].handle_request(Bill(3, "Jack", 32.9))
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "组长无权处理，转交上级……"
    assert lines[1] == "主管无权处理，转交上级……"
    assert lines[2] == "经理 春总 处理了该票据，票据信息："
    assert lines[3] == "ID:\t3"
    assert lines[4] == "Name:\tJack"


def test_bill_print_info(capsys):
    Bill(1, "Jungle", 8).print_info()
    assert capsys.readouterr().out == "\nID:\t1\nName:\tJungle\nAccount:\t8.000000\n"


def test_missing_superior_raises():
    with pytest.raises(RuntimeError):
        GroupLeader("孙大哥").handle_request(Bill(4, "Tom", 89))


def test_boss_approves_everything(capsys):
    boss = Boss("张老板")
    assert boss.handle_request(Bill(1, "Jungle", 8)) is boss
    assert capsys.readouterr().out.startswith("老板 张老板 处理了该票据，票据信息：")


def test_main(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "组长 孙大哥 处理了该票据" in out
    assert "主管 兵哥 处理了该票据" in out
    assert "经理 春总 处理了该票据" in out
    assert "老板 张老板 处理了该票据" in out