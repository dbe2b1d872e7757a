import random

from primer.treesort import tree_sort


def test_sort_random():
    rng = random.Random(1)
    data = [rng.randrange(1 << 62) % 50 for _ in range(50)]
    expected = sorted(data)
    tree_sort(data)
    assert data == expected
    assert all(a <= b for a, b in zip(data, data[1:]))


def test_sort_empty():
    data = []
    tree_sort(data)
    assert data == []


def test_sort_keeps_duplicates():
    data = [3, 1, 3, 2, 1]
    tree_sort(data)
    assert data == [1, 1, 2, 3, 3]


def test_sort_long_presorted_input():
    data = list(range(5000, 0, -1))
    tree_sort(data)
    assert data == list(range(1, 5001))