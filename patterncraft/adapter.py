"""Adapter: a controller plans paths through existing parser and planner classes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Controller(ABC):
    """The interface clients expect."""

    @abstractmethod
    def path_planning(self) -> list[str]:
        """Plan a path; return the lines reported along the way."""


class DxfParser:
    """Existing class that reads DXF drawings."""

    def parse_file(self) -> str:
        message = "Parse dxf file"
        print(message)
        return message


class PathPlanner:
    """Existing class that computes paths."""

    def calculate(self) -> str:
        message = "calculate path"
        print(message)
        return message


class Adapter(Controller):
    """Presents the parser and the planner as a Controller."""

    def __init__(self) -> None:
        self.dxf_parser = DxfParser()
        self.path_planner = PathPlanner()

    def path_planning(self) -> list[str]:
        header = "pathPlanning"
        print(header)
        return [header, self.dxf_parser.parse_file(), self.path_planner.calculate()]


def main(argv: list[str] | None = None) -> int:
    controller: Controller = Adapter()
    controller.path_planning()
    return 0