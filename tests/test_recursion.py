import sys

import pytest

from psi.recursion import MAX_DEPTH_CEILING, recursion_headroom


def test_limit_is_raised_and_restored():
    before = sys.getrecursionlimit()
    with recursion_headroom(2000):
        assert sys.getrecursionlimit() >= 2 * 2000
    assert sys.getrecursionlimit() == before


def test_limit_is_restored_after_an_exception():
    before = sys.getrecursionlimit()
    with pytest.raises(ValueError):
        with recursion_headroom(2000):
            raise ValueError("boom")
    assert sys.getrecursionlimit() == before


def test_shallow_depth_leaves_limit_alone():
    before = sys.getrecursionlimit()
    with recursion_headroom(1):
        assert sys.getrecursionlimit() == before


def test_headroom_stops_at_the_ceiling():
    with recursion_headroom(10 * MAX_DEPTH_CEILING):
        capped = sys.getrecursionlimit()
    with recursion_headroom(MAX_DEPTH_CEILING):
        assert sys.getrecursionlimit() == capped
