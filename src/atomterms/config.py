from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "TermConfig",
    "DEFAULT_CONFIG",
]


@dataclass(frozen=True)
class TermConfig:
    r"""谱项推导的固定常量。

    Attributes
    ----------
    separator : str
        推导日志中各段之间的分隔行。
    spins : tuple[int, int]
        单电子自旋投影 :math:`2 m_s`（加倍以避免分数），按枚举顺序排列。
    """

    separator: str = " ----- "
    spins: tuple[int, int] = (-1, 1)

    def __post_init__(self):
        if sorted(self.spins) != [-1, 1]:
            raise ValueError(f"spins 必须为 (-1, 1) 的某种排列: {self.spins}")


DEFAULT_CONFIG = TermConfig()
