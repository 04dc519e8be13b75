r"""Russell–Saunders 谱项提取（微观态表“剥离”法）

算法
====

给定按 :math:`(M_L, 2M_S)` 分桶的微观态表，重复以下步骤直至表空：

1. 取表中最大的 :math:`M_L`，记为 :math:`L`；
2. 取该行最大的 :math:`2M_S`，记为 :math:`2S`；
3. 输出谱项 :math:`{}^{2S+1}L`；
4. 从矩形 :math:`M_L \in [-L, L]`、:math:`2M_S \in \{-2S, -2S+2, \dots, 2S\}`
   的每个格子中各取走一个微观态（同一格子内的微观态可互换）。

每个谱项恰好消耗 :math:`(2L+1)(2S+1)` 个微观态，因此

.. math::

    \sum_{\text{terms}} (2L+1)(2S+1) = \binom{2(2\ell+1)}{n}

若第 4 步遇到空格子，说明表的对称性被破坏，抛出
:class:`~atomterms.table.MicrostateTableError`，不做任何容错。

同一 :math:`(L, S)` 可能被剥离多次（如 :math:`d^3` 的两个 :math:`{}^2D`），
结果列表保留全部重复项；需要去重时使用 :func:`distinct_term_types`。

References
----------
.. [Cowan] Cowan, R. D. (1981)
   "The Theory of Atomic Structure and Spectra"
   University of California Press, Chapter 4
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from sympy import Rational

from .config import DEFAULT_CONFIG, TermConfig
from .logsink import NULL_SINK, LineSink
from .microstates import enumerate_microstates
from .subshell import Subshell
from .table import MicrostateTable, MicrostateTableError

__all__ = [
    "TermMomentum",
    "TermType",
    "Term",
    "extract_terms",
    "derive_terms",
    "ee_terms",
    "ee_terms_log",
    "distinct_term_types",
]


_TERM_LETTERS = "SPDFGHI"
_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


@dataclass(frozen=True, order=True)
class TermMomentum:
    """谱项总轨道角动量 :math:`L`。"""

    L: int

    def __post_init__(self):
        if self.L < 0:
            raise ValueError(f"总轨道角动量必须非负: L={self.L}")

    def __str__(self) -> str:
        if self.L < len(_TERM_LETTERS):
            return _TERM_LETTERS[self.L]
        return f"(L={self.L})"


@dataclass(frozen=True, order=True)
class TermType:
    r"""谱项类型 :math:`{}^{2S+1}L`。

    Attributes
    ----------
    momentum : TermMomentum
        总轨道角动量。
    multiplet : int
        多重度 :math:`2S+1`（即 :math:`2M_S + 1`，:math:`M_S` 取定义该谱项的微观态）。
    """

    momentum: TermMomentum
    multiplet: int

    def __post_init__(self):
        if self.multiplet < 1:
            raise ValueError(f"多重度必须为正: {self.multiplet}")

    @classmethod
    def of(cls, L: int, multiplet: int) -> "TermType":
        return cls(TermMomentum(L), multiplet)

    @property
    def L(self) -> int:
        return self.momentum.L

    @property
    def spin(self) -> Rational:
        """总自旋 :math:`S`（精确有理数）。"""
        return Rational(self.multiplet - 1, 2)

    @property
    def degeneracy(self) -> int:
        """该谱项包含的微观态数 :math:`(2L+1)(2S+1)`。"""
        return (2 * self.L + 1) * self.multiplet

    def pretty(self) -> str:
        """Unicode 上标形式，如 ``²P``。"""
        return f"{str(self.multiplet).translate(_SUPERSCRIPTS)}{self.momentum}"

    def __str__(self) -> str:
        return f"^{{{self.multiplet}}}{self.momentum}"


@dataclass(frozen=True)
class Term:
    """一次剥离得到的谱项及其消耗的微观态标签（按取出顺序）。"""

    term_type: TermType
    microstates: tuple[str, ...]


def extract_terms(table: MicrostateTable, sink: LineSink = NULL_SINK) -> list[Term]:
    """从微观态表中逐个剥离谱项，原地清空 ``table``。

    Parameters
    ----------
    table : MicrostateTable
        由 :meth:`MicrostateTable.from_microstates` 构建的表；调用后为空。
    sink : LineSink, optional
        每个谱项写出一行谱项符号，随后每个被消耗的微观态写出 ``"- <label>"``。

    Returns
    -------
    list[Term]
        按剥离顺序排列，保留重复的谱项类型。

    Raises
    ------
    MicrostateTableError
        剥离矩形中出现空格子。
    """
    terms: list[Term] = []
    while table:
        L = table.max_ml()
        S2 = table.max_ms(L)
        if L < 0 or S2 < 0:
            raise MicrostateTableError(
                f"最大投影为负 (M_L={L}, 2M_S={S2})：微观态表不满足对称性"
            )

        term_type = TermType.of(L, S2 + 1)
        sink.emit(str(term_type))

        consumed = []
        for ml in range(-L, L + 1):
            for ms in range(-S2, S2 + 1, 2):
                label = table.pop(ml, ms)
                sink.emit(f"- {label}")
                consumed.append(label)
        terms.append(Term(term_type, tuple(consumed)))
    return terms


def derive_terms(
    subshell: Subshell,
    sink: LineSink = NULL_SINK,
    config: TermConfig = DEFAULT_CONFIG,
    states: Sequence[tuple[int, int]] | None = None,
) -> list[Term]:
    r"""完整推导流程：枚举 → 分桶 → 剥离，并将推导过程写入 ``sink``。

    Parameters
    ----------
    subshell : Subshell
        :math:`\ell^n` 组态。
    sink : LineSink, optional
        推导日志输出端；默认 :data:`~atomterms.logsink.NULL_SINK`（无输出）。
    config : TermConfig, optional
        分隔行与自旋顺序。
    states : sequence of (int, int), optional
        自定义单电子态顺序，见 :func:`~atomterms.microstates.enumerate_microstates`。

    Returns
    -------
    list[Term]
        全部谱项（含重复）。
    """
    microstates = enumerate_microstates(subshell, config=config, states=states)

    sink.emit(f"Sublevel: {subshell}")
    sink.emit(config.separator)

    sink.emit(f"Single electron states ({len(microstates.states)} total)")
    for i, (ml, ms) in enumerate(microstates.states):
        sink.emit(f"{i}: ({ml}, {ms}/2)")
    sink.emit(config.separator)

    sink.emit("Level states")
    sink.emit(f"({len(microstates)} total)")
    for state in microstates:
        sink.emit(str(state))
    sink.emit(config.separator)

    table = MicrostateTable.from_microstates(microstates)

    sink.emit("Terms:")
    return extract_terms(table, sink)


def ee_terms(subshell: Subshell, config: TermConfig = DEFAULT_CONFIG) -> list[TermType]:
    """等价电子谱项（无日志）。"""
    return [term.term_type for term in derive_terms(subshell, NULL_SINK, config)]


def ee_terms_log(
    subshell: Subshell, sink: LineSink, config: TermConfig = DEFAULT_CONFIG
) -> list[TermType]:
    """等价电子谱项，推导过程写入 ``sink``。"""
    return [term.term_type for term in derive_terms(subshell, sink, config)]


def distinct_term_types(terms: Iterable[Term | TermType]) -> set[TermType]:
    """去重后的谱项类型集合（同一 :math:`(L, S)` 只保留一个）。"""
    return {t.term_type if isinstance(t, Term) else t for t in terms}
