"""atomterms 包
=================

等价电子组态 :math:`\\ell^n` 的 Russell–Saunders 谱项推导（微观态表方法）。

流程（单向）：

- 支壳层描述与容量校验（:mod:`atomterms.subshell`）
- Pauli 允许微观态的枚举（:mod:`atomterms.microstates`）
- 按 :math:`(M_L, M_S)` 分桶（:mod:`atomterms.table`）
- 逐个剥离谱项（:mod:`atomterms.terms`）

注：本项目所有文档与注释均使用中文，Docstring 采用 Sphinx + NumPy 风格，公式使用 ``:math:`` 标记。
"""

from atomterms.config import DEFAULT_CONFIG, TermConfig
from atomterms.logsink import NULL_SINK, ListSink, NullSink, StreamSink
from atomterms.microstates import Microstate, MicrostateSet, enumerate_microstates, single_electron_states
from atomterms.subshell import CapacityExceeded, Subshell, SubshellType, capacity
from atomterms.table import MicrostateTable, MicrostateTableError
from atomterms.terms import (
    Term,
    TermMomentum,
    TermType,
    derive_terms,
    distinct_term_types,
    ee_terms,
    ee_terms_log,
    extract_terms,
)

__all__ = [
    "TermConfig",
    "DEFAULT_CONFIG",
    "NullSink",
    "StreamSink",
    "ListSink",
    "NULL_SINK",
    "Microstate",
    "MicrostateSet",
    "enumerate_microstates",
    "single_electron_states",
    "CapacityExceeded",
    "Subshell",
    "SubshellType",
    "capacity",
    "MicrostateTable",
    "MicrostateTableError",
    "Term",
    "TermMomentum",
    "TermType",
    "derive_terms",
    "distinct_term_types",
    "ee_terms",
    "ee_terms_log",
    "extract_terms",
]

__version__ = "0.1.0"
