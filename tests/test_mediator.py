import pytest

from patterncraft.mediator import Agency, Landlord, PersonType, Tenant


def _setup():
    agency = Agency()
    landlords = [
        Landlord("Alice", 1000, "North Street", "n/a"),
        Landlord("Bob", 800, "South Street", "n/a"),
    ]
    tenants = [Tenant("Carol"), Tenant("Dave")]
    for person in landlords + tenants:
        person.mediator = agency
        agency.register(person)
    return agency, landlords, tenants


def test_person_types_follow_construction():
    assert Landlord("Alice", 1, "x", "n/a").person_type is PersonType.LANDLORD
    assert Tenant("Carol").person_type is PersonType.TENANT
    assert Landlord().person_type is PersonType.NONE_PERSON
    assert Tenant().person_type is PersonType.NONE_PERSON


def test_register_sorts_by_type():
    agency, landlords, tenants = _setup()
    assert agency.landlords == landlords
    assert agency.tenants == tenants


def test_register_rejects_untyped_person(capsys):
    agency = Agency()
    agency.register(Tenant())
    assert capsys.readouterr().out == "wrong person\n"
    assert agency.tenants == [] and agency.landlords == []


def test_tenant_sees_landlords(capsys):
    _, landlords, tenants = _setup()
    capsys.readouterr()
    assert tenants[0].ask() == landlords
    out = capsys.readouterr().out
    assert out.startswith("租客Carol询问房东信息\n")
    assert "房东姓名：Alice, 房租：1000, 地址：North Street, 联系电话：n/a" in out


def test_landlord_sees_tenants(capsys):
    _, landlords, tenants = _setup()
    capsys.readouterr()
    assert landlords[1].ask() == tenants
    out = capsys.readouterr().out
    assert out == "房东Bob查看租客信息：\n租客姓名：Carol\n租客姓名：Dave\n"


def test_untyped_person_gets_no_answers():
    agency, _, _ = _setup()
    stranger = Tenant()
    stranger.mediator = agency
    assert stranger.ask() == []


def test_ask_without_mediator_raises():
    with pytest.raises(RuntimeError):
        Tenant("Carol").ask()