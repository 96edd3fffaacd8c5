import pytest

from patterncraft.prototype import ConcreteWork, PrototypeWork, WorkModel, main


def test_clone_copies_fields_and_shares_model():
    original = ConcreteWork("Single", 1001, "Single_Model")
    clone = original.clone()
    assert clone is not original
    assert (clone.name, clone.id_num) == (original.name, original.id_num)
    assert clone.work_model is original.work_model


def test_changing_clone_leaves_original():
    original = ConcreteWork("Single", 1001, "Single_Model")
    clone = original.clone()
    clone.name = "jungle"
    clone.id_num = 1002
    clone.work_model = WorkModel("Jungle_Model")
    assert original.name == "Single"
    assert original.id_num == 1001
    assert original.work_model.model_name == "Single_Model"


def test_print_work_info(capsys):
    ConcreteWork("Single", 1001, "Single_Model").print_work_info()
    out = capsys.readouterr().out
    assert out == "name:Single\t\nidNum:1001\t\nmodelName:Single_Model\t\n"


def test_abstract_prototype_cannot_be_made():
    with pytest.raises(TypeError):
        PrototypeWork()


def test_main(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "name:Single\t\nidNum:1001\t\nmodelName:Single_Model\t\n" in out
    assert out.endswith("name:jungle\t\nidNum:1002\t\nmodelName:Jungle_Model\t\n")