"""等价电子谱项命令行入口。

示例::

    atomterms -l 1 -n 3
    atomterms -l 2 -n 2 --verbose
"""

from __future__ import annotations

import argparse
import sys

from .logsink import NULL_SINK, StreamSink
from .subshell import CapacityExceeded, Subshell
from .terms import TermType, derive_terms

__all__ = [
    "build_parser",
    "format_terms",
    "main",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atomterms",
        description="枚举微观态并推导等价电子组态的 Russell–Saunders 谱项",
    )
    parser.add_argument("-l", dest="orbital", type=int, required=True,
                        help="支壳层类型 (0=s, 1=p, 2=d, ...)")
    parser.add_argument("-n", dest="electrons", type=int, required=True,
                        help="电子数")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="输出完整推导过程（单电子态、微观态、各谱项消耗的微观态）")
    parser.add_argument("--pretty", action="store_true",
                        help="使用 Unicode 上标显示谱项（如 ²P）")
    return parser


def format_terms(terms: list[TermType], pretty: bool = False) -> list[str]:
    """谱项逐行格式化。"""
    return [t.pretty() if pretty else str(t) for t in terms]


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        subshell = Subshell.new(args.orbital, args.electrons)
    except CapacityExceeded as e:
        print(e, file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"参数错误: {e}", file=sys.stderr)
        return 1

    sink = StreamSink(sys.stdout) if args.verbose else NULL_SINK
    terms = derive_terms(subshell, sink)

    print("\nFound terms:")
    for line in format_terms([t.term_type for t in terms], pretty=args.pretty):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
