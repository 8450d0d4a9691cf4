from typing import List, Tuple

from bignum.compare import compare_magnitude
from bignum.limbs import BITS, MASK, MAX_VALUE, trim_limbs


def safe_add_int(a: int, b: int) -> Tuple[int, int]:
    acc = a + b
    return acc & MASK, acc >> BITS


def safe_sub_int(a: int, b: int, p: int) -> Tuple[int, int]:
    res = a - b - p
    if res < 0:
        return res + MAX_VALUE, 1
    return res, 0


def add_magnitude(lhs: List[int], rhs: List[int]) -> List[int]:
    if len(lhs) < len(rhs):
        lhs, rhs = rhs, lhs

    out: List[int] = []
    carry = 0
    for i in range(len(lhs)):
        b = rhs[i] if i < len(rhs) else 0
        acc, carry = safe_add_int(lhs[i], b + carry)
        out.append(acc)
    if carry:
        out.append(carry)
    return out


def sub_magnitude(lhs: List[int], rhs: List[int]) -> List[int]:
    """Computes |lhs| - |rhs|; the caller guarantees |lhs| >= |rhs|."""
    out: List[int] = []
    borrow = 0
    for i in range(len(lhs)):
        b = rhs[i] if i < len(rhs) else 0
        acc, borrow = safe_sub_int(lhs[i], b, borrow)
        out.append(acc)
    if borrow:
        raise ValueError("Magnitude underflow: subtrahend is larger than minuend")
    return trim_limbs(out)


def add_signed(lhs_neg: bool, lhs: List[int], rhs_neg: bool, rhs: List[int]) -> Tuple[bool, List[int]]:
    if lhs_neg == rhs_neg:
        return lhs_neg, add_magnitude(lhs, rhs)

    order = compare_magnitude(lhs, rhs)
    if order == 0:
        return False, [0]
    if order > 0:
        return lhs_neg, sub_magnitude(lhs, rhs)
    return rhs_neg, sub_magnitude(rhs, lhs)


def mul_magnitude(lhs: List[int], rhs: List[int]) -> List[int]:
    out = [0] * (len(lhs) + len(rhs))
    for i, r in enumerate(rhs):
        if r == 0:
            continue
        carry = 0
        for j, l in enumerate(lhs):
            acc = out[i + j] + l * r + carry
            out[i + j] = acc & MASK
            carry = acc >> BITS
        out[i + len(lhs)] = carry
    return trim_limbs(out)
