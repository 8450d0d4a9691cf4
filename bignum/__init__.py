"""
Arbitrary-precision signed integers built from 32-bit limbs.
"""

from bignum.bigint import BigInt, stobi
from bignum.errors import FormatError

__all__ = [
    "BigInt",
    "FormatError",
    "stobi",
]
