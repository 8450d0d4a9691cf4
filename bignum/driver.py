import argparse
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from bignum.bigint import BigInt
from bignum.errors import FormatError

UNARY_OPS = {'c'}

OPERATIONS: Dict[str, Callable[[List[str]], BigInt]] = {
    'c': lambda args: BigInt(args[0]),
    'a': lambda args: BigInt(args[0]) + BigInt(args[1]),
    's': lambda args: BigInt(args[0]) - BigInt(args[1]),
    'm': lambda args: BigInt(args[0]) * BigInt(args[1]),
    'l': lambda args: BigInt(args[0]) << BigInt(args[1]),
    'r': lambda args: BigInt(args[0]) >> BigInt(args[1]),
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bignum-driver")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('-c', '--parse', dest='op', action='store_const', const='c', help="Parse and print a number.")
    group.add_argument('-a', '--add', dest='op', action='store_const', const='a', help="Add two numbers.")
    group.add_argument('-s', '--sub', dest='op', action='store_const', const='s', help="Subtract two numbers.")
    group.add_argument('-m', '--mul', dest='op', action='store_const', const='m', help="Multiply two numbers.")
    group.add_argument('-l', '--lshift', dest='op', action='store_const', const='l', help="Shift a number left.")
    group.add_argument('-r', '--rshift', dest='op', action='store_const', const='r', help="Shift a number right.")
    parser.add_argument('-f', '--file', type=Path, help="Read operands from file and write the result back into it.")
    parser.add_argument('operands', nargs='*', help="Decimal operands.")

    return parser.parse_args(argv)


def read_operands(path: Path) -> List[str]:
    with open(path, 'r') as f:
        return [line.strip() for line in f.readlines() if line.strip()]


def write_result(path: Optional[Path], result: str, elapsed: str) -> None:
    if path is None:
        print(result)
        print(elapsed)
        return

    with open(path, 'w') as f:
        f.write(result)
        f.write('\n')
        f.write(elapsed)
        f.write('\n')


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    operands = read_operands(args.file) if args.file else args.operands

    expected = 1 if args.op in UNARY_OPS else 2
    if len(operands) != expected:
        print(f"Expected {expected} operand(s), found {len(operands)}", file=sys.stderr)
        return 2

    start = time.perf_counter()
    try:
        res = OPERATIONS[args.op](operands)
        out = str(res)
    except FormatError as e:
        print(e, file=sys.stderr)
        return 1
    elapsed = (time.perf_counter() - start) * 1000

    write_result(args.file, out, f"{elapsed:.3f}ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
