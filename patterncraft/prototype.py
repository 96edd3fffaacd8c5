"""Prototype: copy a piece of work by cloning it."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class WorkModel:
    """The model a piece of work is built on."""

    model_name: str


class PrototypeWork(ABC):
    """Something that can produce a copy of itself."""

    @abstractmethod
    def clone(self) -> PrototypeWork:
        """Return a copy of this object."""


class ConcreteWork(PrototypeWork):
    """A piece of homework with an owner, an id and a model."""

    def __init__(self, name: str, id_num: int, model_name: str) -> None:
        self.name = name
        self.id_num = id_num
        self.work_model = WorkModel(model_name)

    def clone(self) -> ConcreteWork:
        """Return a shallow copy: the clone shares this work's model."""
        return copy.copy(self)

    def print_work_info(self) -> str:
        """Print the work's details and return the text printed."""
        text = (
            f"name:{self.name}\t\n"
            f"idNum:{self.id_num}\t\n"
            f"modelName:{self.work_model.model_name}\t\n"
        )
        print(text, end="")
        return text


def main(argv: list[str] | None = None) -> int:
    single_work = ConcreteWork("Single", 1001, "Single_Model")
    print("\nSingle的作业：")

    jungle_work = single_work.clone()
    print("\njungle直接抄作业……")

    print("\njungle抄完改名字和学号，否则会被老师查出来……")
    jungle_work.name = "jungle"
    jungle_work.id_num = 1002
    jungle_work.work_model = WorkModel("Jungle_Model")

    print("\nSingle的作业：")
    single_work.print_work_info()
    print("\nJungle的作业：")
    jungle_work.print_work_info()
    return 0