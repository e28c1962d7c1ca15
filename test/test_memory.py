"""
Tests for the abstract memory lattice.
"""

import itertools

from signai.abstractions.sign_abstraction import BOTTOM, NEGATIVE, POSITIVE, TOP, ZERO
from signai.memory import Memory

MEMORIES = [
    Memory.bottom(),
    Memory.of(x=POSITIVE),
    Memory.of(x=NEGATIVE, y=ZERO),
    Memory.of(y=TOP),
    Memory.of(x=BOTTOM, z=POSITIVE),
]


class TestLookupBind:
    def test_bottom_is_empty(self):
        assert len(Memory.bottom()) == 0
        assert str(Memory.bottom()) == ""

    def test_lookup_unbound(self):
        """An unbound variable reads as bottom."""
        assert Memory.bottom().lookup("x") == BOTTOM
        assert Memory.of(y=ZERO)["x"] == BOTTOM

    def test_bind_copies(self):
        m = Memory.of(x=POSITIVE)
        m2 = m.bind("x", ZERO).bind("y", NEGATIVE)
        assert m["x"] == POSITIVE
        assert "y" not in m
        assert m2["x"] == ZERO
        assert m2["y"] == NEGATIVE

    def test_source_dict_not_shared(self):
        d = {"x": POSITIVE}
        m = Memory(d)
        d["x"] = ZERO
        assert m["x"] == POSITIVE

    def test_items_sorted(self):
        m = Memory.of(y=NEGATIVE, x=POSITIVE)
        assert m.items() == [("x", POSITIVE), ("y", NEGATIVE)]
        assert list(m) == ["x", "y"]

    def test_str(self):
        m = Memory.of(y=NEGATIVE, x=POSITIVE, z=TOP)
        assert str(m) == "x -> +\ny -> -\nz -> Top"

    def test_equality(self):
        assert Memory.of(x=ZERO) == Memory.bottom().bind("x", ZERO)
        assert hash(Memory.of(x=ZERO)) == hash(Memory.bottom().bind("x", ZERO))
        assert Memory.of(x=ZERO) != Memory.of(x=POSITIVE)


class TestLattice:
    def test_leq_is_one_sided(self):
        """Keys only bound on the right do not matter."""
        small = Memory.of(x=POSITIVE)
        big = Memory.of(x=TOP, y=ZERO)
        assert small <= big
        assert not big <= small
        assert Memory.bottom() <= small

    def test_leq_pointwise(self):
        assert not Memory.of(x=POSITIVE) <= Memory.of(x=NEGATIVE)
        assert not Memory.of(x=POSITIVE) <= Memory.bottom()
        assert Memory.of(x=BOTTOM) <= Memory.bottom()

    def test_join(self):
        assert Memory.of(x=POSITIVE) | Memory.of(y=NEGATIVE) == Memory.of(x=POSITIVE, y=NEGATIVE)
        assert Memory.of(x=POSITIVE) | Memory.of(x=NEGATIVE) == Memory.of(x=TOP)
        assert Memory.of(x=ZERO) | Memory.bottom() == Memory.of(x=ZERO)

    def test_join_is_upper_bound(self):
        for m1, m2 in itertools.product(MEMORIES, repeat=2):
            j = m1.join(m2)
            assert m1 <= j
            assert m2 <= j
            assert j == m2 | m1

    def test_leq_reflexive(self):
        for m in MEMORIES:
            assert m <= m
            assert m | m == m
