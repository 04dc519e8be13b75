r"""微观态枚举

对 :math:`\ell^n` 组态，列出全部 :math:`2(2\ell+1)` 个单电子态 :math:`(m_\ell, m_s)`，
并从中选取 :math:`n` 个互不相同的态（Pauli 不相容原理），得到

.. math::

    N = \binom{2(2\ell+1)}{n}

个微观态。每个微观态记录总投影

.. math::

    M_L = \sum_i m_{\ell,i}, \qquad 2M_S = \sum_i 2m_{s,i}

自旋投影在整个包内均以加倍整数 :math:`2m_s \in \{-1, +1\}` 表示。

实现说明
========

组合由 :func:`itertools.combinations` 迭代生成（字典序，无递归），
整体物化为形状 ``(N, n)`` 的 numpy 索引数组，:math:`M_L`/:math:`2M_S` 通过花式索引
一次求和得到。
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain, combinations
from typing import Iterator, Sequence

import numpy as np
from scipy.special import comb

from .config import DEFAULT_CONFIG, TermConfig
from .subshell import Subshell, SubshellType

__all__ = [
    "Microstate",
    "MicrostateSet",
    "single_electron_states",
    "enumerate_microstates",
    "format_doubled",
]


def format_doubled(value: int) -> str:
    """将加倍的半整数量 ``2x`` 格式化为 ``x``（整数）或 ``"2x/2"``。

    Examples
    --------
    >>> format_doubled(4), format_doubled(-2), format_doubled(3)
    ('2', '-1', '3/2')
    """
    if value % 2 == 0:
        return str(value // 2)
    return f"{value}/2"


def single_electron_states(
    subshell_type: SubshellType, config: TermConfig = DEFAULT_CONFIG
) -> list[tuple[int, int]]:
    r"""单电子态列表 :math:`(m_\ell, 2m_s)`。

    :math:`m_\ell` 从 :math:`-\ell` 升序，内层循环遍历 ``config.spins``；
    列表下标即该态的身份。

    Examples
    --------
    >>> single_electron_states(SubshellType(0))
    [(0, -1), (0, 1)]
    """
    return [(ml, ms) for ml in subshell_type.mls() for ms in config.spins]


@dataclass(frozen=True)
class Microstate:
    """单个微观态。

    Attributes
    ----------
    label : tuple[int, ...]
        占据的单电子态下标（从 1 开始，升序）。
    ml : int
        总磁量子数 :math:`M_L`。
    ms : int
        加倍的总自旋投影 :math:`2M_S`。
    """

    label: tuple[int, ...]
    ml: int
    ms: int

    @property
    def name(self) -> str:
        return " ".join(str(i) for i in self.label)

    def __str__(self) -> str:
        return f"{self.name}: ({self.ml}, {format_doubled(self.ms)})"


@dataclass(frozen=True, eq=False)
class MicrostateSet:
    """物化的微观态集合（可重复迭代）。

    Attributes
    ----------
    states : list[tuple[int, int]]
        枚举所用的单电子态列表。
    occupations : numpy.ndarray
        形状 ``(N, n)`` 的占据下标（从 0 开始）。
    ML : numpy.ndarray
        形状 ``(N,)``，各微观态的 :math:`M_L`。
    MS : numpy.ndarray
        形状 ``(N,)``，各微观态的 :math:`2M_S`。
    """

    states: list[tuple[int, int]]
    occupations: np.ndarray
    ML: np.ndarray
    MS: np.ndarray

    def __len__(self) -> int:
        return self.occupations.shape[0]

    def __iter__(self) -> Iterator[Microstate]:
        for row, ml, ms in zip(self.occupations, self.ML, self.MS):
            yield Microstate(tuple(int(i) + 1 for i in row), int(ml), int(ms))


def _check_states(subshell_type: SubshellType, states: Sequence[tuple[int, int]], config: TermConfig):
    expected = single_electron_states(subshell_type, config)
    if len(states) != len(expected) or sorted(states) != sorted(expected):
        raise ValueError(
            f"单电子态列表必须是 {subshell_type} 支壳层全部 {len(expected)} 个态的一个排列"
        )


def enumerate_microstates(
    subshell: Subshell,
    config: TermConfig = DEFAULT_CONFIG,
    states: Sequence[tuple[int, int]] | None = None,
) -> MicrostateSet:
    r"""枚举 :math:`\ell^n` 的全部 Pauli 允许微观态。

    Parameters
    ----------
    subshell : Subshell
        支壳层与电子数。
    config : TermConfig, optional
        自旋取值顺序等常量。
    states : sequence of (int, int), optional
        自定义的单电子态顺序；必须是标准列表的一个排列。
        默认使用 :func:`single_electron_states`。

    Returns
    -------
    MicrostateSet
        共 :math:`\binom{2(2\ell+1)}{n}` 个微观态，按下标组合的字典序排列。

    Notes
    -----
    - :math:`n=0` 时得到唯一的空微观态 :math:`(M_L, 2M_S) = (0, 0)`
    - 单电子态顺序只影响标签与日志，不影响 :math:`(M_L, M_S)` 的分布
    """
    if states is None:
        states = single_electron_states(subshell.type, config)
    else:
        states = [tuple(s) for s in states]
        _check_states(subshell.type, states, config)

    k = len(states)
    n = subshell.electrons
    count = comb(k, n, exact=True)

    flat = np.fromiter(
        chain.from_iterable(combinations(range(k), n)),
        dtype=np.uint8,
        count=count * n,
    )
    occupations = flat.reshape(count, n)

    # 下标以 uint8 存储（容量不超过 254），求和时再转为 intp
    index = occupations.astype(np.intp)
    table = np.asarray(states, dtype=np.int64).reshape(k, 2)
    ML = table[index, 0].sum(axis=1)
    MS = table[index, 1].sum(axis=1)

    return MicrostateSet(states=list(states), occupations=occupations, ML=ML, MS=MS)
