"""Interpreter: evaluate left-to-right chains of 0/1 joined by 'and' / 'or'."""

from __future__ import annotations

from abc import ABC, abstractmethod

_AND = ord("&")
_OR = ord("|")


class AbstractNode(ABC):
    """A node of the expression tree; interpreting it yields a character code."""

    @abstractmethod
    def interpret(self) -> int:
        """Return the node's value as a character code."""


class ValueNode(AbstractNode):
    """A terminal holding a character code such as ord('1')."""

    def __init__(self, value: int) -> None:
        self.value = value

    def interpret(self) -> int:
        return self.value


class OperatorNode(AbstractNode):
    """A terminal for 'and' ('&') or 'or' ('|'); anything else yields 0."""

    def __init__(self, op: str) -> None:
        self.op = op

    def interpret(self) -> int:
        if self.op == "and":
            return _AND
        if self.op == "or":
            return _OR
        return 0


class SentenceNode(AbstractNode):
    """Applies the operator to both sides; any operator but 'and' acts as 'or'."""

    def __init__(
        self, left: AbstractNode, right: AbstractNode, operator: AbstractNode
    ) -> None:
        self.left = left
        self.right = right
        self.operator = operator

    def interpret(self) -> int:
        if self.operator.interpret() == _AND:
            return self.left.interpret() & self.right.interpret()
        return self.left.interpret() | self.right.interpret()


def evaluate(text: str) -> int:
    """Evaluate text left to right; return 1, 0, or -1 when the result is not a digit."""
    tokens = [token for token in text.split(" ") if token]
    if len(tokens) < 2:
        raise ValueError(f"expression needs at least two tokens: {text!r}")
    for i in range(0, len(tokens) - 2, 2):
        sentence = SentenceNode(
            ValueNode(ord(tokens[i][0])),
            ValueNode(ord(tokens[i + 2][0])),
            OperatorNode(tokens[i + 1]),
        )
        tokens[i + 2] = chr(sentence.interpret())
    last = tokens[-1]
    if last == "1":
        return 1
    if last == "0":
        return 0
    return -1


class Handler:
    """Evaluates expressions and prints each with its result."""

    def __init__(self) -> None:
        self.input = ""
        self.result: int | None = None

    def handle(self, text: str) -> int:
        self.input = text
        self.result = evaluate(text)
        self.output()
        return self.result

    def output(self) -> str:
        """Print the last expression with its result; return the line printed."""
        line = f"{self.input} = {self.result}"
        print(line)
        return line


_EXAMPLES = (
    "1 and 1",
    "1 and 0",
    "0 and 1",
    "0 and 0",
    "0 or 0",
    "0 or 1",
    "1 or 0",
    "1 or 1",
    "1 and 0 or 1",
    "0 or 0 and 1",
    "1 or 1 and 1 and 0",
    "0 and 1 and 1 and 1",
    "0 and 1 and 1 and 1 or 1 or 0 and 1",
)


def main(argv: list[str] | None = None) -> int:
    handler = Handler()
    for text in _EXAMPLES:
        handler.handle(text)
    print("\n")
    return 0