from typing import List


def compare_magnitude(lhs: List[int], rhs: List[int]) -> int:
    """Three-way comparison of two trimmed limb lists."""
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1

    i = len(lhs) - 1
    while i > 0 and lhs[i] == rhs[i]:
        i -= 1
    if lhs[i] == rhs[i]:
        return 0
    return -1 if lhs[i] < rhs[i] else 1


def compare(lhs_neg: bool, lhs: List[int], rhs_neg: bool, rhs: List[int]) -> int:
    if lhs_neg != rhs_neg:
        return -1 if lhs_neg else 1

    res = compare_magnitude(lhs, rhs)
    # both negative: the larger magnitude is the smaller value
    return -res if lhs_neg else res
