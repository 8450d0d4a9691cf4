import sys
from random import Random

import pytest

sys.set_int_max_str_digits(0)


@pytest.fixture
def rng() -> Random:
    return Random("BigNum")
