from collections import Counter
from math import factorial

import pytest

from games.permutations import distinct_permutations, next_permutation, reverse, swap


def multiset_count(values):
    total = factorial(len(values))
    for count in Counter(values).values():
        total //= factorial(count)
    return total


def test_swap_and_reverse():
    data = [1, 2, 3, 4, 5]
    swap(data, 0, 4)
    assert data == [5, 2, 3, 4, 1]

    reverse(data, 1, 4)
    assert data == [5, 4, 3, 2, 1]

    reverse(data, 0, len(data))
    assert data == [1, 2, 3, 4, 5]


def test_walk_with_duplicates():
    """{1,1,2} has exactly three distinct arrangements."""
    data = [1, 1, 2]
    seen = [tuple(data)]
    while next_permutation(data):
        seen.append(tuple(data))
    assert seen == [(1, 1, 2), (1, 2, 1), (2, 1, 1)]


@pytest.mark.parametrize("values", [
    [1, 2, 3, 4],
    [1, 1, 2, 2],
    [1, 1, 1],
    [1, 2, 2, 3, 3, 3],
    [6, 1, 6, 1, 4],
])
def test_visits_each_distinct_arrangement_once(values):
    perms = list(distinct_permutations(values))
    assert len(perms) == multiset_count(values)
    assert len(set(perms)) == len(perms)
    assert all(a < b for a, b in zip(perms, perms[1:]))
    assert all(Counter(p) == Counter(values) for p in perms)


@pytest.mark.parametrize("data", [[], [5]])
def test_short_sequences_are_exhausted_immediately(data):
    before = list(data)
    assert next_permutation(data) is False
    assert data == before


def test_last_permutation_left_untouched():
    data = [3, 2, 2, 1]
    assert next_permutation(data) is False
    assert data == [3, 2, 2, 1]


def test_distinct_permutations_does_not_modify_input():
    values = [3, 1, 2]
    assert next(distinct_permutations(values)) == (1, 2, 3)
    assert values == [3, 1, 2]
