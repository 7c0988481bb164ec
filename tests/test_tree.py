import random

import pytest

from redblack.tree import Color, RBTree

FIXED = [10, 5, 8, 34, 67, 23, 156, 24, 2, 12, 24, 36, 990, 25]
DISTINCT = [10, 5, 8, 34, 67, 23, 156, 24, 2, 12]
DUPLICATES = [10, 5, 5, 34, 6, 23, 12, 12, 6, 12]


def _build(keys):
    tree = RBTree()
    for key in keys:
        tree.insert(key)
    return tree


def _search_ok(tree):
    def walk(node, low, high):
        if node is tree.nil:
            return True
        if low is not None and node.key < low:
            return False
        if high is not None and node.key > high:
            return False
        return walk(node.left, low, node.key) and walk(node.right, node.key, high)

    return walk(tree.root, None, None)


def _black_height(tree, node, parent_color=Color.BLACK):
    """Return the black height below node, or -1 on a violation."""
    if node is tree.nil:
        return 0
    if parent_color is Color.RED and node.color is Color.RED:
        return -1
    left = _black_height(tree, node.left, node.color)
    right = _black_height(tree, node.right, node.color)
    if left < 0 or right < 0 or left != right:
        return -1
    return left + (1 if node.color is Color.BLACK else 0)


def _assert_rb(tree):
    assert tree.root is tree.nil or tree.root.color is Color.BLACK
    assert _black_height(tree, tree.root) >= 0
    assert _search_ok(tree)


def test_init():
    tree = RBTree()
    assert tree.nil.color is Color.BLACK
    assert tree.root is tree.nil
    assert len(tree) == 0


def test_insert_single():
    tree = RBTree()
    node = tree.insert(1024)
    assert tree.root is node
    assert node.key == 1024
    assert node.color is Color.BLACK
    assert node.left is tree.nil
    assert node.right is tree.nil
    assert node.parent is tree.nil


def test_find_single():
    tree = RBTree()
    node = tree.insert(512)
    found = tree.find(512)
    assert found is node
    assert found.key == 512
    assert tree.find(1024) is None


def test_erase_root():
    tree = RBTree()
    node = tree.insert(128)
    assert tree.root is node
    assert node.key == 128
    tree.erase(node)
    assert tree.root is tree.nil
    assert len(tree) == 0


def _find_erase(tree, keys):
    for key in keys:
        assert tree.insert(key) is tree.root

    for key in keys:
        node = tree.find(key)
        assert node is not None and node.key == key
        tree.erase(node)

    for key in keys:
        assert tree.find(key) is None

    for key in keys:
        node = tree.insert(key)
        found = tree.find(key)
        assert found is node
        assert found.key == key
        tree.erase(node)
        assert tree.find(key) is None


def test_find_erase_fixed():
    tree = RBTree()
    _find_erase(tree, FIXED)
    assert len(tree) == 0


def test_find_erase_random():
    rng = random.Random(17)
    keys = [rng.randint(0, 2**31 - 1) for _ in range(10000)]
    tree = RBTree()
    _find_erase(tree, keys)
    assert tree.root is tree.nil


def test_minmax():
    tree = _build(DISTINCT)
    ordered = sorted(DISTINCT)
    low = tree.min()
    high = tree.max()
    assert low.key == ordered[0]
    assert high.key == ordered[-1]

    tree.erase(low)
    assert tree.min().key == ordered[1]

    tree.erase(high)
    assert tree.max().key == ordered[-2]


def test_minmax_empty():
    tree = RBTree()
    assert tree.min() is None
    assert tree.max() is None


def test_to_array():
    tree = _build(FIXED)
    assert tree.to_array(len(FIXED)) == sorted(FIXED)


def test_to_array_limits():
    tree = _build(FIXED)
    assert tree.to_array(3) == [2, 5, 8]
    assert tree.to_array(0) == []
    assert tree.to_array(100) == sorted(FIXED)
    with pytest.raises(ValueError):
        tree.to_array(-1)


def test_multi_instance():
    first_keys = list(FIXED)
    second_keys = [4, 8, 10, 5, 3]
    first = _build(first_keys)
    second = _build(second_keys)
    assert first.to_array(len(first_keys)) == sorted(first_keys)
    assert second.to_array(len(second_keys)) == [3, 4, 5, 8, 10]


@pytest.mark.parametrize("keys", [DISTINCT, DUPLICATES])
def test_rb_constraints(keys):
    tree = _build(keys)
    assert tree.root is not tree.nil
    _assert_rb(tree)
    assert list(tree) == sorted(keys)
    assert len(tree) == len(keys)


def test_constraints_hold_through_erasures():
    rng = random.Random(3)
    keys = [rng.randint(0, 200) for _ in range(300)]
    tree = _build(keys)
    remaining = list(keys)
    for key in keys[::2]:
        tree.erase(tree.find(key))
        remaining.remove(key)
        _assert_rb(tree)
    assert list(tree) == sorted(remaining)
    assert len(tree) == len(remaining)


def test_erase_sentinel_rejected():
    tree = _build([1, 2, 3])
    with pytest.raises(ValueError):
        tree.erase(tree.nil)
    assert list(tree) == [1, 2, 3]


def test_clear():
    tree = _build(FIXED)
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    tree.insert(7)
    assert tree.to_array(5) == [7]