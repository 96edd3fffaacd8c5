"""Singletons created lazily on first use or eagerly at import."""

from __future__ import annotations

import threading
from typing import Optional

_THREAD_COUNT = 6


class LazySingleton:
    """Created on the first call to get_instance, safely across threads."""

    _instance: Optional["LazySingleton"] = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is obtained through get_instance()")

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        print("This is Singleton Lazy mode...")
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    print("创建新的实例")
                    cls._instance = object.__new__(cls)
        return cls._instance


class HungrySingleton:
    """Created when the module is imported."""

    _instance: "HungrySingleton"

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is obtained through get_instance()")

    @classmethod
    def get_instance(cls) -> "HungrySingleton":
        print("This Singleton Hungry mode...")
        return cls._instance


HungrySingleton._instance = object.__new__(HungrySingleton)


def _call_lazy() -> None:
    LazySingleton.get_instance()
    print(f"线程编号为{threading.get_ident()}")


def _call_hungry() -> None:
    HungrySingleton.get_instance()
    print(f"线程编号为{threading.get_ident()}")


def main(argv: list[str] | None = None) -> int:
    threads = [
        threading.Thread(target=_call_lazy if i < _THREAD_COUNT // 2 else _call_hungry)
        for i in range(_THREAD_COUNT)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("main exiting.")
    return 0