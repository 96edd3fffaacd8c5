"""Strategy: a context sorts its numbers with whichever algorithm it is given."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Strategy(ABC):
    """A sorting algorithm."""

    @abstractmethod
    def sort(self, values: list[int]) -> list[int]:
        """Sort values in place and return the same list."""


class BubbleSort(Strategy):
    def __init__(self) -> None:
        print("冒泡排序")

    def sort(self, values: list[int]) -> list[int]:
        n = len(values)
        for i in range(n):
            for j in range(n - i - 1):
                if values[j] > values[j + 1]:
                    values[j], values[j + 1] = values[j + 1], values[j]
        return values


class SelectionSort(Strategy):
    def __init__(self) -> None:
        print("选择排序")

    def sort(self, values: list[int]) -> list[int]:
        n = len(values)
        for i in range(n):
            k = min(range(i, n), key=values.__getitem__)
            values[i], values[k] = values[k], values[i]
        return values


class InsertSort(Strategy):
    def __init__(self) -> None:
        print("插入排序")

    def sort(self, values: list[int]) -> list[int]:
        for i in range(1, len(values)):
            j = i - 1
            while j >= 0 and not values[i] > values[j]:
                j -= 1
            values.insert(j + 1, values.pop(i))
        return values


class Context:
    """Holds the numbers to sort and the strategy to sort them with."""

    def __init__(self, values: list[int] | None = None) -> None:
        self.values: list[int] = values if values is not None else []
        self.sort_strategy: Strategy | None = None

    def set_input(self, values: list[int]) -> None:
        """Use values as the list to sort; it is sorted in place."""
        self.values = values

    def sort(self) -> list[int]:
        if self.sort_strategy is None:
            raise RuntimeError("no sort strategy set")
        self.sort_strategy.sort(self.values)
        print("输出： ", end="")
        self.show()
        return self.values

    def show(self) -> str:
        """Print the numbers, each right-aligned in three columns; return that line."""
        line = "".join(f"{value:3d} " for value in self.values)
        print(line)
        return line


def main(argv: list[str] | None = None) -> int:
    ctx = Context()
    ctx.set_input([10, 23, -1, 0, 300, 87, 28, 77, -32, 2])
    print("input:", end="")
    ctx.show()

    for strategy_cls in (BubbleSort, SelectionSort, InsertSort):
        ctx.sort_strategy = strategy_cls()
        ctx.sort()

    print("\n")
    return 0