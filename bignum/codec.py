import re
from typing import List, Tuple

from bignum.errors import FormatError
from bignum.limbs import BITS, DECIMAL_BASE, DECIMAL_DIGITS, MASK, MAX_VALUE, trim_limbs

NUMBER_PATTERN = re.compile(r"\s*([+-])?\s*([0-9]+)\s*")


def from_int(value: int) -> Tuple[bool, List[int]]:
    rep: List[int] = []
    n = abs(value)
    if n == 0:
        rep.append(0)
    while n > 0:
        rep.append(n & MASK)
        n >>= BITS
    return value < 0, rep


def decimal_chunks(digits: str) -> List[int]:
    """Splits a digit string into base 10^9 digits, least significant first."""
    chunks: List[int] = []
    i = len(digits)
    while i > 0:
        start = max(i - DECIMAL_DIGITS, 0)
        chunks.append(int(digits[start:i]))
        i = start
    return chunks


def convert_base(digits: List[int], from_base: int, to_base: int) -> List[int]:
    """
    Exact radix conversion of a little-endian digit list.

    Every pass divides the remaining number by `to_base`, walking from the
    most significant digit down with a double-width accumulator, and emits
    the remainder as the next output digit. Each quotient digit stays below
    `from_base` because the running remainder stays below `to_base`.
    """
    rest = list(digits)
    out: List[int] = []
    trim_limbs(rest)
    while True:
        rem = 0
        for i in range(len(rest) - 1, -1, -1):
            acc = rem * from_base + rest[i]
            rest[i], rem = divmod(acc, to_base)
        out.append(rem)
        trim_limbs(rest)
        if len(rest) == 1 and rest[0] == 0:
            break
    return out


def parse(text: str) -> Tuple[bool, List[int]]:
    match = NUMBER_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text)

    rep = convert_base(decimal_chunks(match.group(2)), DECIMAL_BASE, MAX_VALUE)
    trim_limbs(rep)
    is_neg = match.group(1) == '-' and rep != [0]
    return is_neg, rep


def to_decimal(rep: List[int]) -> List[int]:
    return convert_base(rep, MAX_VALUE, DECIMAL_BASE)


def render(is_neg: bool, rep: List[int]) -> str:
    digits = to_decimal(rep)
    parts = [str(digits[-1])]
    for x in digits[-2::-1]:
        parts.append(str(x).zfill(DECIMAL_DIGITS))

    s = ''.join(parts)
    if is_neg and s != '0':
        s = '-' + s
    return s
