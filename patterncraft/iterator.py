"""Iterator: a remote control walks through a television's channels."""

from __future__ import annotations

from collections.abc import Iterator


class Television:
    """An aggregate holding a list of channels."""

    def __init__(self, channels: list[str] | None = None) -> None:
        self.channels = list(channels or [])

    def create_iterator(self) -> RemoteControl:
        return RemoteControl(self)

    def total_channel_num(self) -> int:
        return len(self.channels)

    def play(self, index: int) -> str:
        """Play the channel at index and return its name."""
        if not 0 <= index < len(self.channels):
            raise IndexError(f"no channel at position {index}")
        channel = self.channels[index]
        print(f"现在播放：{channel}……")
        return channel

    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.channels)


class RemoteControl:
    """A cursor over a television's channels that moves both ways."""

    def __init__(self, tv: Television) -> None:
        self.tv = tv
        self.cursor = -1
        self.total_num = tv.total_channel_num()

    def first(self) -> None:
        self.cursor = 0

    def last(self) -> None:
        self.cursor = self.total_num - 1

    def next(self) -> None:
        self.cursor += 1

    def previous(self) -> None:
        self.cursor -= 1

    def has_next(self) -> bool:
        return self.cursor != self.total_num

    def has_previous(self) -> bool:
        return self.cursor != -1

    def current_channel(self) -> str:
        return self.tv.play(self.cursor)


_CHANNELS = [
    "新闻频道",
    "财经频道",
    "体育频道",
    "电影频道",
    "音乐频道",
    "农业频道",
    "四川卫视",
    "成都卫视",
]


def main(argv: list[str] | None = None) -> int:
    tv = Television(_CHANNELS)
    remote = tv.create_iterator()

    print("顺序遍历:")
    remote.first()
    while remote.has_next():
        remote.current_channel()
        remote.next()

    print("\n")

    print("逆序遍历:")
    remote.last()
    while remote.has_previous():
        remote.current_channel()
        remote.previous()

    print("\n")
    return 0