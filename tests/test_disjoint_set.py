import pytest

from hypermaze.generators.maze import DisjointSet


def test_merge_roots():
    cells = DisjointSet(3)

    assert cells.try_merge(0, 1) is True
    assert cells.try_merge(0, 1) is False
    assert cells.try_merge(1, 0) is False

    assert cells.try_merge(1, 2) is True
    assert cells.try_merge(0, 2) is False


def test_merge_roots_alternate():
    cells = DisjointSet(3)

    assert cells.try_merge(0, 1) is True
    assert cells.try_merge(0, 1) is False
    assert cells.try_merge(1, 0) is False

    assert cells.try_merge(0, 2) is True
    assert cells.try_merge(1, 2) is False


def test_components_count_down():
    cells = DisjointSet(5)
    assert cells.components == 5
    cells.try_merge(0, 1)
    cells.try_merge(3, 4)
    cells.try_merge(1, 0)
    assert cells.components == 3
    assert cells.connected(0, 1)
    assert not cells.connected(1, 3)


def test_find_root_compresses_paths():
    cells = DisjointSet(6)
    for i in range(5):
        cells.try_merge(i, i + 1)
    root = cells.find_root(5)
    for node in range(6):
        assert cells.find_root(node) == root
    assert all(int(p) == root for p in cells.parent)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)
