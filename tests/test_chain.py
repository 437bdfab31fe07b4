import pytest

from convex_hull_2d.chain import HullChain
from convex_hull_2d.exceptions import HullInvariantError


def test_chain_starts_with_both_seeds():
    chain = HullChain(3, 7)
    assert list(chain) == [3, 7]
    assert list(chain.edges()) == [(3, 7), (7, 3)]


def test_insert_before_keeps_cyclic_order():
    chain = HullChain(0, 1)
    chain.insert_before(2, 1)
    chain.insert_before(3, 0)
    chain.insert_before(4, 2)
    assert list(chain) == [0, 4, 2, 1, 3]
    assert chain.next_of(3) == 0
    assert chain.prev_of(0) == 3
    assert len(chain) == 5
    assert 4 in chain


def test_insert_before_missing_point_is_fatal():
    chain = HullChain(0, 1)
    with pytest.raises(HullInvariantError):
        chain.insert_before(2, 5)


def test_points_are_inserted_once():
    chain = HullChain(0, 1)
    chain.insert_before(2, 1)
    with pytest.raises(HullInvariantError):
        chain.insert_before(2, 0)


def test_chain_needs_distinct_seeds():
    with pytest.raises(HullInvariantError):
        HullChain(4, 4)
