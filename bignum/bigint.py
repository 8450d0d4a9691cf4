from typing import List, Optional, Union

from bignum import arith, codec
from bignum.compare import compare
from bignum.limbs import LimbStore
from bignum.shift import shift_left, shift_right


class BigInt(LimbStore):
    """
    Arbitrary-precision signed integer.

    Construct from an ``int``, from decimal text or from another ``BigInt``
    (a deep copy). The compound operators (``+=``, ``-=``, ``*=``, ``<<=``,
    ``>>=``) mutate the receiver; the binary ones work on a copy of the left
    operand. Shifts follow two's-complement semantics: ``>>`` rounds toward
    negative infinity and a negative amount shifts the other way.

    >>> str(BigInt("-123456781234567812345678") * 2)
    '-246913562469135624691356'
    >>> BigInt(-2) >> 31
    BigInt('-1')
    """

    def __init__(self, value: Union[int, str, 'BigInt'] = 0) -> None:
        if isinstance(value, BigInt):
            super().__init__(value.rep, value.is_neg)
        elif isinstance(value, int):
            is_neg, rep = codec.from_int(value)
            super().__init__(rep, is_neg)
        elif isinstance(value, str):
            is_neg, rep = codec.parse(value)
            super().__init__(rep, is_neg)
        else:
            raise TypeError(f"Cannot create BigInt from {type(value).__name__}")

    @classmethod
    def from_int(cls, value: int) -> 'BigInt':
        if not isinstance(value, int):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        return cls(value)

    @classmethod
    def from_string(cls, text: str) -> 'BigInt':
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return cls(text)

    @staticmethod
    def _coerce(other) -> Optional['BigInt']:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return BigInt(other)
        return None

    def _assign(self, is_neg: bool, rep: List[int]) -> 'BigInt':
        self.rep = rep
        self.is_neg = is_neg
        self.trim()
        return self

    def to_int(self) -> int:
        n = LimbStore.convert(self.rep)
        return -n if self.is_neg else n

    # conversions

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return codec.render(self.is_neg, self.rep)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    # comparison

    def _compare(self, other) -> Optional[int]:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return None
        return compare(self.is_neg, self.rep, rhs.is_neg, rhs.rep)

    def __eq__(self, other) -> bool:
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.is_neg == rhs.is_neg and self.rep == rhs.rep

    def __ne__(self, other) -> bool:
        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    def __lt__(self, other) -> bool:
        res = self._compare(other)
        return NotImplemented if res is None else res < 0

    def __le__(self, other) -> bool:
        res = self._compare(other)
        return NotImplemented if res is None else res <= 0

    def __gt__(self, other) -> bool:
        res = self._compare(other)
        return NotImplemented if res is None else res > 0

    def __ge__(self, other) -> bool:
        res = self._compare(other)
        return NotImplemented if res is None else res >= 0

    __hash__ = None  # mutable through the compound operators

    # arithmetic

    def __neg__(self) -> 'BigInt':
        res = self.copy()
        res.is_neg = not res.is_neg
        res.trim()
        return res

    def __pos__(self) -> 'BigInt':
        return self.copy()

    def __abs__(self) -> 'BigInt':
        res = self.copy()
        res.is_neg = False
        return res

    def __iadd__(self, other) -> 'BigInt':
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(*arith.add_signed(self.is_neg, self.rep, rhs.is_neg, rhs.rep))

    def __isub__(self, other) -> 'BigInt':
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.__iadd__(-rhs)

    def __imul__(self, other) -> 'BigInt':
        rhs = BigInt._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(self.is_neg != rhs.is_neg, arith.mul_magnitude(self.rep, rhs.rep))

    def __add__(self, other) -> 'BigInt':
        if BigInt._coerce(other) is None:
            return NotImplemented
        res = self.copy()
        res += other
        return res

    def __sub__(self, other) -> 'BigInt':
        if BigInt._coerce(other) is None:
            return NotImplemented
        res = self.copy()
        res -= other
        return res

    def __mul__(self, other) -> 'BigInt':
        if BigInt._coerce(other) is None:
            return NotImplemented
        res = self.copy()
        res *= other
        return res

    def __radd__(self, other) -> 'BigInt':
        return self.__add__(other)

    def __rsub__(self, other) -> 'BigInt':
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __rmul__(self, other) -> 'BigInt':
        return self.__mul__(other)

    # shifts

    @staticmethod
    def _shift_amount(other) -> Optional[int]:
        if isinstance(other, BigInt):
            return other.to_int()
        if isinstance(other, int):
            return other
        return None

    def __ilshift__(self, other) -> 'BigInt':
        shift = BigInt._shift_amount(other)
        if shift is None:
            return NotImplemented
        if shift < 0:
            return self.__irshift__(-shift)
        return self._assign(self.is_neg, shift_left(self.rep, shift))

    def __irshift__(self, other) -> 'BigInt':
        shift = BigInt._shift_amount(other)
        if shift is None:
            return NotImplemented
        if shift < 0:
            return self.__ilshift__(-shift)

        rep, lost = shift_right(self.rep, shift)
        if self.is_neg and lost:
            # floor division: -5 >> 1 is -3, not -2
            rep = arith.add_magnitude(rep, [1])
        return self._assign(self.is_neg, rep)

    def __lshift__(self, other) -> 'BigInt':
        if BigInt._shift_amount(other) is None:
            return NotImplemented
        res = self.copy()
        res <<= other
        return res

    def __rshift__(self, other) -> 'BigInt':
        if BigInt._shift_amount(other) is None:
            return NotImplemented
        res = self.copy()
        res >>= other
        return res

    def __rlshift__(self, other) -> 'BigInt':
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs << self

    def __rrshift__(self, other) -> 'BigInt':
        lhs = BigInt._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs >> self


def stobi(text: str) -> BigInt:
    return BigInt.from_string(text)
