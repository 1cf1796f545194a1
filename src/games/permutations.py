"""
Lexicographic permutation generation over a multiset.

Works on value order rather than element identity, so repeated values never
produce a repeated arrangement as long as the walk starts from sorted data.
"""

from typing import Iterator, List, Sequence, Tuple


def swap(data: List[int], i: int, j: int) -> None:
    """Swap two elements in place."""
    data[i], data[j] = data[j], data[i]


def reverse(data: List[int], start: int, end: int) -> None:
    """Reverse data[start:end] in place."""
    end -= 1
    while start < end:
        swap(data, start, end)
        start += 1
        end -= 1


def next_permutation(data: List[int]) -> bool:
    """
    Rearrange data into its next distinct permutation.

    Args:
        data: Sequence to permute in place. Start from ascending order to
            visit every distinct arrangement exactly once.

    Returns:
        True if data now holds the next arrangement, False if it was already
        the last one (data is left untouched).
    """
    length = len(data)

    # Largest k such that data[k] < data[k+1]
    k = -1
    for i in range(length - 2, -1, -1):
        if data[i] < data[i + 1]:
            k = i
            break
    if k == -1:
        return False

    # Largest l > k such that data[k] < data[l]; exists because data[k+1] qualifies
    l = length - 1
    while data[l] <= data[k]:
        l -= 1

    swap(data, k, l)
    reverse(data, k + 1, length)
    return True


def distinct_permutations(values: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """Yield every distinct arrangement of values in lexicographic order."""
    data = sorted(values)
    yield tuple(data)
    while next_permutation(data):
        yield tuple(data)
