from typing import List, Tuple

from bignum.limbs import BITS, MASK, trim_limbs


def shift_left(rep: List[int], shift: int) -> List[int]:
    """Magnitude times 2**shift, for shift >= 0."""
    digit_shift, shift = divmod(shift, BITS)

    out = [0] * digit_shift
    carried_bits = 0
    for digit in rep:
        acc = (digit << shift) | carried_bits
        out.append(acc & MASK)
        carried_bits = acc >> BITS

    if carried_bits > 0:
        out.append(carried_bits)
    return trim_limbs(out)


def shift_right(rep: List[int], shift: int) -> Tuple[List[int], bool]:
    """
    Magnitude divided by 2**shift, truncated, for shift >= 0.

    Also reports whether any set bit was shifted out, which the caller needs
    to round negative values toward negative infinity.
    """
    digit_shift, shift = divmod(shift, BITS)
    if digit_shift >= len(rep):
        return [0], any(rep)

    lost = any(rep[:digit_shift])
    data = rep[digit_shift:]
    out = [0] * len(data)
    carried_bits = 0
    for i in range(len(data) - 1, -1, -1):
        out[i] = (data[i] >> shift) | carried_bits
        carried_bits = (data[i] << (BITS - shift)) & MASK

    return trim_limbs(out), lost or carried_bits != 0
