"""Proxy: log the time around each call to the real subject."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


class Subject(ABC):
    @abstractmethod
    def method(self) -> None:
        """Run the business method."""


class RealSubject(Subject):
    def method(self) -> None:
        print("调用业务方法")


class Log:
    """Supplies timestamps for the proxy."""

    def get_time(self) -> str:
        """Return the local time as YYYY-MM-DD HH:MM:SS."""
        return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


class Proxy(Subject):
    """Wraps the real subject with logging before and after each call."""

    def __init__(self) -> None:
        self.real_subject = RealSubject()
        self.log = Log()

    def pre_call_method(self) -> str:
        """Log the call with its time; return the line printed."""
        line = f"方法method()被调用，调用时间为{self.log.get_time()}"
        print(line)
        return line

    def method(self) -> None:
        self.pre_call_method()
        self.real_subject.method()
        self.post_call_method()

    def post_call_method(self) -> str:
        """Log the call's success; return the line printed."""
        line = "方法method()调用调用成功!"
        print(line)
        return line


def main(argv: list[str] | None = None) -> int:
    subject: Subject = Proxy()
    subject.method()
    print("\n")
    return 0