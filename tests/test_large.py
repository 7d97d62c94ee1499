import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.large import Bounds, Sorter, choose_rotation, find_median
from pushswap.parse import INT_MAX, INT_MIN, build_elements
from pushswap.stacks import Stacks


def _run(values):
    stacks = Stacks(build_elements(values))
    Sorter(stacks, len(values)).run()
    return stacks


def _replay(values, operations):
    stacks = Stacks(build_elements(values))
    for operation in operations:
        getattr(stacks, operation.value)()
    return stacks


def test_find_median_pinned():
    assert find_median(19, 0) == 9


@given(st.integers(-1000, 1000), st.integers(0, 1000))
def test_find_median_lies_between_bounds(low, width):
    high = low + width
    middle = find_median(high, low)
    assert low <= middle <= high
    assert high - middle >= middle - low


def test_choose_rotation_prefers_nearer_end():
    assert choose_rotation([5, 1, 2, 3], 3) is True
    assert choose_rotation([3, 1, 2, 5], 3) is False


@given(st.lists(st.integers(0, 50), unique=True, max_size=20), st.integers(51, 100))
def test_choose_rotation_missing_target_rotates_up(indices, target):
    assert choose_rotation(indices, target) is False


@given(st.lists(st.integers(0, 50), unique=True, min_size=1, max_size=20), st.data())
def test_choose_rotation_not_both_directions(indices, data):
    target = data.draw(st.sampled_from(indices))
    forward = choose_rotation(indices, target)
    backward = choose_rotation(list(reversed(indices)), target)
    assert not (forward and backward)


def test_sorter_initial_bounds():
    total = 20
    sorter = Sorter(Stacks(build_elements(range(total))), total)
    assert sorter.a_bounds == Bounds(mid=0, high=total - 1, low=0)
    assert sorter.b_bounds == Bounds(mid=0, high=INT_MIN, low=INT_MAX)


@settings(max_examples=40, deadline=None)
@given(st.integers(1, 60).flatmap(lambda n: st.permutations(list(range(n)))))
def test_sorter_sorts_permutations(values):
    stacks = _run(values)
    assert stacks.a_values() == sorted(values)
    assert stacks.b_values() == []


@settings(max_examples=30, deadline=None)
@given(st.lists(st.integers(INT_MIN, INT_MAX), unique=True, max_size=40))
def test_sorter_moves_replay_to_sorted(values):
    stacks = _run(values)
    replayed = _replay(values, stacks.operations)
    assert replayed.a_values() == sorted(values)
    assert replayed.b_values() == []


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_sorter_hundred_values(seed):
    values = list(range(100))
    random.Random(seed).shuffle(values)
    stacks = _run(values)
    assert stacks.a_values() == list(range(100))
    assert _replay(values, stacks.operations).a_values() == list(range(100))


def test_sorter_reversed_hundred():
    values = list(range(99, -1, -1))
    stacks = _run(values)
    assert stacks.a_values() == list(range(100))
    assert stacks.b_values() == []


def test_sorter_sorted_input_makes_no_moves():
    stacks = _run(list(range(-10, 40)))
    assert stacks.operations == []


def test_sorter_moves_low_bound_to_total():
    values = list(range(30))
    random.Random(7).shuffle(values)
    stacks = Stacks(build_elements(values))
    sorter = Sorter(stacks, len(values))
    sorter.run()
    assert stacks.a_values() == sorted(values)
    assert sorter.a_bounds.low <= len(values)