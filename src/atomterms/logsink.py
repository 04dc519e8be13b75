"""推导日志输出端

谱项推导只需要一个“按顺序写入文本行”的能力；输出到哪里由调用方决定。

- :class:`NullSink`：非 verbose 模式，不产生任何 I/O
- :class:`StreamSink`：写入文本流（默认 ``sys.stdout``）
- :class:`ListSink`：收集到内存列表，便于测试
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

__all__ = [
    "LineSink",
    "NullSink",
    "StreamSink",
    "ListSink",
    "NULL_SINK",
]


class LineSink(Protocol):
    def emit(self, line: str) -> None:
        ...


class NullSink:
    """丢弃所有行。"""

    def emit(self, line: str) -> None:
        pass


class StreamSink:
    """逐行写入文本流；写入错误原样向上抛出。"""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def emit(self, line: str) -> None:
        self.stream.write(line + "\n")


class ListSink:
    def __init__(self):
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)


NULL_SINK = NullSink()
