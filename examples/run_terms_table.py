#!/usr/bin/env python
"""打印 l^n 组态的微观态计数表与剥离得到的谱项。

用法::

    python examples/run_terms_table.py 2 3
"""

import sys
from pathlib import Path

# 添加 src 到路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from atomterms.microstates import enumerate_microstates, format_doubled
from atomterms.subshell import Subshell
from atomterms.table import MicrostateTable
from atomterms.terms import extract_terms


def main():
    l = int(sys.argv[1]) if len(sys.argv) > 1 else 2
    n = int(sys.argv[2]) if len(sys.argv) > 2 else 2
    sub = Subshell.new(l, n)

    table = MicrostateTable.from_microstates(enumerate_microstates(sub))
    ml_axis, ms_axis, counts = table.count_grid()

    print(f"{sub}: {len(table)} 个微观态")
    print("M_L \\ M_S " + "".join(f"{format_doubled(ms):>6}" for ms in ms_axis))
    for ml, row in zip(ml_axis, counts):
        print(f"{ml:>9} " + "".join(f"{c:6d}" for c in row))

    print("\n谱项:")
    for term in extract_terms(table):
        print(f"  {term.term_type.pretty():>5}  ({len(term.microstates)} 个微观态)")


if __name__ == "__main__":
    main()
