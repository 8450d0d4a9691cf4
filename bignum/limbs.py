from typing import List, Optional, Union

BITS = 32
MAX_VALUE = (1<<BITS)
MASK = MAX_VALUE - 1

DECIMAL_DIGITS = 9
DECIMAL_BASE = 10 ** DECIMAL_DIGITS


def trim_limbs(rep: List[int]) -> List[int]:
    """Drops zero limbs from the top, always keeping at least one."""
    i = len(rep)
    while i > 1:
        if rep[i - 1] != 0:
            break
        i -= 1
    if i == 0:
        rep.append(0)
    else:
        del rep[i:]
    return rep


class LimbStore:
    """
    Sign and magnitude of an integer, the magnitude held as 32-bit limbs with
    the least significant limb first. The limb list is never empty, has no
    zero limbs on top and zero is never negative.
    """

    def __init__(self, rep: Optional[List[int]] = None, is_neg: bool = False) -> None:
        self.rep: List[int] = list(rep) if rep else [0]
        self.is_neg = is_neg
        self.trim()

    @staticmethod
    def convert(rep: List[int]) -> int:
        a = 0
        for x in rep[::-1]:
            a = (a << BITS) | x

        return a

    @staticmethod
    def to_internal(n: int) -> List[int]:
        a: List[int] = []
        n = abs(n)
        while n > 0:
            a.append(n & MASK)
            n >>= BITS
        return a or [0]

    def trim(self) -> None:
        trim_limbs(self.rep)
        if self.is_zero():
            self.is_neg = False

    def is_zero(self) -> bool:
        return len(self.rep) == 1 and self.rep[0] == 0

    def bit_length(self) -> int:
        return (len(self.rep) - 1) * BITS + self.rep[-1].bit_length()

    def copy(self) -> 'LimbStore':
        t = self.__class__.__new__(self.__class__)
        t.rep = list(self.rep)
        t.is_neg = self.is_neg
        return t

    def __copy__(self) -> 'LimbStore':
        return self.copy()

    def __deepcopy__(self, memo) -> 'LimbStore':
        return self.copy()

    def __getitem__(self, val: Union[int, slice]) -> Union[int, 'LimbStore']:
        if isinstance(val, slice):
            return LimbStore(self.rep[val])
        return self.rep[val]

    def __len__(self) -> int:
        return len(self.rep)

    def __repr__(self) -> str:
        return f"{'-' if self.is_neg else ''}{self.rep}"
