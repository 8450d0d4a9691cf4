import copy

from bignum.limbs import BITS, MASK, MAX_VALUE, LimbStore, trim_limbs


class TestTrim:
    def test_drops_zero_limbs_on_top(self):
        assert trim_limbs([1, 2, 0, 0]) == [1, 2]

    def test_keeps_last_limb(self):
        assert trim_limbs([0, 0, 0]) == [0]
        assert trim_limbs([0]) == [0]

    def test_empty_becomes_zero(self):
        assert trim_limbs([]) == [0]

    def test_keeps_inner_zeros(self):
        assert trim_limbs([0, 0, 7]) == [0, 0, 7]

    def test_trims_in_place(self):
        rep = [5, 0]
        assert trim_limbs(rep) is rep
        assert rep == [5]

    def test_idempotent(self):
        store = LimbStore([3, 0, 0], is_neg=True)
        store.trim()
        store.trim()
        assert store.rep == [3]
        assert store.is_neg


class TestLimbStore:
    def test_constants(self):
        assert BITS == 32
        assert MAX_VALUE == 4294967296
        assert MASK == 0xffffffff

    def test_default_is_zero(self):
        store = LimbStore()
        assert store.rep == [0]
        assert not store.is_neg
        assert store.is_zero()

    def test_negative_zero_is_normalized(self):
        store = LimbStore([0, 0], is_neg=True)
        assert store.rep == [0]
        assert not store.is_neg

    def test_copies_input(self):
        rep = [1, 2]
        store = LimbStore(rep)
        rep.append(3)
        assert store.rep == [1, 2]

    def test_copy_does_not_alias(self):
        store = LimbStore([1, 2], is_neg=True)
        for other in (store.copy(), copy.copy(store), copy.deepcopy(store)):
            assert other.rep == store.rep
            assert other.is_neg
            assert other.rep is not store.rep
        dup = store.copy()
        dup.rep[0] = 9
        assert store.rep == [1, 2]

    def test_convert_and_to_internal(self):
        assert LimbStore.convert([0, 1]) == MAX_VALUE
        assert LimbStore.convert([MASK, MASK]) == (1 << 64) - 1
        assert LimbStore.to_internal(0) == [0]
        assert LimbStore.to_internal(-(MAX_VALUE + 5)) == [5, 1]

    def test_bit_length(self):
        assert LimbStore().bit_length() == 0
        assert LimbStore([1]).bit_length() == 1
        assert LimbStore([0, 1]).bit_length() == 33
        assert LimbStore([MASK, MASK]).bit_length() == 64

    def test_len_and_getitem(self):
        store = LimbStore([1, 2, 3])
        assert len(store) == 3
        assert store[0] == 1
        assert store[-1] == 3
        low = store[:2]
        assert isinstance(low, LimbStore)
        assert low.rep == [1, 2]
        assert store[1:].rep == [2, 3]

    def test_slice_is_trimmed(self):
        store = LimbStore([1, 0, 5])
        assert store[:2].rep == [1]

    def test_repr(self):
        assert repr(LimbStore([1, 2], is_neg=True)) == "-[1, 2]"
        assert repr(LimbStore([7])) == "[7]"
