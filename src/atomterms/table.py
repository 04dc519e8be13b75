r"""微观态表

按 :math:`(M_L, 2M_S)` 对微观态分桶：

.. math::

    \text{table}[M_L][2M_S] = [\text{label}_1, \text{label}_2, \dots]

两级键均按从大到小的顺序遍历；谱项提取时原地删除条目，空桶与空行随即剔除。
"""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from .microstates import Microstate

__all__ = [
    "MicrostateTable",
    "MicrostateTableError",
]


class MicrostateTableError(RuntimeError):
    """微观态表内部不变量被破坏（应非空的格子为空）。"""


class MicrostateTable:
    """:math:`M_L \\to (2M_S \\to \\text{labels})` 的两级映射。"""

    def __init__(self):
        self._rows: dict[int, dict[int, list[str]]] = {}
        self._size = 0

    @classmethod
    def from_microstates(cls, microstates: Iterable[Microstate]) -> "MicrostateTable":
        table = cls()
        for state in microstates:
            table.add(state.ml, state.ms, state.name)
        return table

    def add(self, ml: int, ms: int, label: str) -> None:
        self._rows.setdefault(ml, {}).setdefault(ms, []).append(label)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def ml_values(self) -> list[int]:
        return sorted(self._rows, reverse=True)

    def ms_values(self, ml: int) -> list[int]:
        return sorted(self._rows.get(ml, ()), reverse=True)

    def max_ml(self) -> int:
        if not self._rows:
            raise MicrostateTableError("微观态表为空")
        return max(self._rows)

    def max_ms(self, ml: int) -> int:
        row = self._rows.get(ml)
        if not row:
            raise MicrostateTableError(f"M_L={ml} 行不存在")
        return max(row)

    def bucket(self, ml: int, ms: int) -> tuple[str, ...]:
        return tuple(self._rows.get(ml, {}).get(ms, ()))

    def pop(self, ml: int, ms: int) -> str:
        """取出 ``table[ml][ms]`` 中的一个标签，并剔除变空的桶与行。

        Raises
        ------
        MicrostateTableError
            目标格子为空。
        """
        row = self._rows.get(ml)
        bucket = row.get(ms) if row is not None else None
        if not bucket:
            raise MicrostateTableError(
                f"格子 (M_L={ml}, 2M_S={ms}) 为空：微观态表不满足对称性"
            )
        label = bucket.pop()
        self._size -= 1
        if not bucket:
            del row[ms]
        if not row:
            del self._rows[ml]
        return label

    def __iter__(self) -> Iterator[tuple[int, int, tuple[str, ...]]]:
        for ml in self.ml_values():
            for ms in self.ms_values(ml):
                yield ml, ms, tuple(self._rows[ml][ms])

    def count_grid(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        r"""以稠密数组给出各格子的微观态数。

        Returns
        -------
        ml_axis : numpy.ndarray
            :math:`M_L` 取值（降序）。
        ms_axis : numpy.ndarray
            :math:`2M_S` 取值（降序，步长 2）。
        counts : numpy.ndarray
            形状 ``(len(ml_axis), len(ms_axis))`` 的计数。
        """
        if not self._rows:
            empty = np.zeros(0, dtype=int)
            return empty, empty, np.zeros((0, 0), dtype=int)
        ml_max = max(self._rows)
        ml_min = min(self._rows)
        ms_keys = [ms for row in self._rows.values() for ms in row]
        ms_max, ms_min = max(ms_keys), min(ms_keys)

        ml_axis = np.arange(ml_max, ml_min - 1, -1)
        ms_axis = np.arange(ms_max, ms_min - 1, -2)
        counts = np.zeros((ml_axis.size, ms_axis.size), dtype=int)
        for ml, row in self._rows.items():
            for ms, labels in row.items():
                counts[ml_max - ml, (ms_max - ms) // 2] = len(labels)
        return ml_axis, ms_axis, counts
