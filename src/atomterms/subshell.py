r"""支壳层（subshell）描述

等价电子组态 :math:`\ell^n` 的输入对象：轨道角动量量子数 :math:`\ell` 与电子数 :math:`n`。

- 容量 :math:`2(2\ell+1)`：每个 :math:`m_\ell` 容纳自旋向上/向下两个电子
- 构造时校验 :math:`0 \le n \le 2(2\ell+1)`，超出即抛出 :class:`CapacityExceeded`
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "MAX_L",
    "CapacityExceeded",
    "SubshellType",
    "Subshell",
    "capacity",
]


# 容量 2(2l+1) 需能以单字节表示
MAX_L = 63

_SUBSHELL_LETTERS = "spdfghi"


def capacity(l: int) -> int:
    r"""支壳层可容纳的最大电子数 :math:`2(2\ell+1)`。

    Parameters
    ----------
    l : int
        轨道角动量量子数，:math:`0 \le \ell \le` ``MAX_L``。

    Returns
    -------
    int
        单电子态数目（即容量）。

    Examples
    --------
    >>> capacity(0), capacity(1), capacity(2)
    (2, 6, 10)
    """
    if l < 0:
        raise ValueError(f"角动量量子数必须非负: l={l}")
    if l > MAX_L:
        raise ValueError(f"角动量量子数超出支持范围 (0-{MAX_L}): l={l}")
    return 2 * (2 * l + 1)


@dataclass(frozen=True)
class SubshellType:
    r"""支壳层类型，由 :math:`\ell` 唯一确定。

    Attributes
    ----------
    l : int
        轨道角动量量子数（0=s, 1=p, 2=d, ...）。
    """

    l: int

    def __post_init__(self):
        # 触发范围检查
        capacity(self.l)

    @property
    def capacity(self) -> int:
        return capacity(self.l)

    def mls(self) -> range:
        r"""磁量子数 :math:`m_\ell = -\ell, \dots, \ell`（升序）。"""
        return range(-self.l, self.l + 1)

    def __str__(self) -> str:
        if self.l < len(_SUBSHELL_LETTERS):
            return _SUBSHELL_LETTERS[self.l]
        return f"(L={self.l})"


class CapacityExceeded(ValueError):
    """电子数超过支壳层容量。

    Attributes
    ----------
    subshell_type : SubshellType
        出错的支壳层类型。
    electrons : int
        请求的电子数。
    capacity : int
        该支壳层的容量。
    """

    def __init__(self, subshell_type: SubshellType, electrons: int):
        self.subshell_type = subshell_type
        self.electrons = electrons
        self.capacity = subshell_type.capacity
        super().__init__(
            f"{subshell_type} 支壳层最多容纳 {self.capacity} 个电子"
            f"（请求 n={electrons}）"
        )


@dataclass(frozen=True)
class Subshell:
    r"""含 :math:`n` 个等价电子的支壳层 :math:`\ell^n`。

    Attributes
    ----------
    type : SubshellType
        支壳层类型。
    electrons : int
        电子数，满足 :math:`0 \le n \le 2(2\ell+1)`。

    Raises
    ------
    CapacityExceeded
        电子数超过容量。
    ValueError
        电子数为负。
    """

    type: SubshellType
    electrons: int

    def __post_init__(self):
        if self.electrons < 0:
            raise ValueError(f"电子数必须非负: n={self.electrons}")
        if self.electrons > self.type.capacity:
            raise CapacityExceeded(self.type, self.electrons)

    @classmethod
    def new(cls, l: int, electrons: int) -> "Subshell":
        """由 ``(l, n)`` 直接构造。"""
        return cls(SubshellType(l), electrons)

    @property
    def l(self) -> int:
        return self.type.l

    @property
    def capacity(self) -> int:
        return self.type.capacity

    def __str__(self) -> str:
        return f"{self.type}^{{{self.electrons}}}"
