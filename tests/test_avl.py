import random

import pytest

from dsalgo.avl import AVLTree

EXAMPLE = [9, 5, 10, 0, 6, 11, -1, 1, 2]


def _check_balanced(preorder):
    """Rebuild the BST from its preorder and assert the AVL property; return height."""
    position = 0

    def build(low, high):
        nonlocal position
        if position == len(preorder):
            return 0
        key = preorder[position]
        if not low < key < high:
            return 0
        position += 1
        left = build(low, key)
        right = build(key, high)
        assert abs(left - right) <= 1
        return 1 + max(left, right)

    height = build(float("-inf"), float("inf"))
    assert position == len(preorder)
    return height


def test_example_preorder_after_insertion():
    tree = AVLTree(EXAMPLE)
    assert tree.preorder() == [9, 1, 0, -1, 5, 2, 6, 10, 11]


def test_example_preorder_after_deletion():
    tree = AVLTree(EXAMPLE)
    assert tree.delete(10) is True
    assert tree.preorder() == [1, 0, -1, 9, 5, 2, 6, 11]
    assert 10 not in tree


def test_ascending_inserts_stay_balanced():
    tree = AVLTree(range(1, 8))
    assert tree.preorder() == [4, 2, 1, 3, 6, 5, 7]


def test_contains():
    tree = AVLTree(EXAMPLE)
    for key in EXAMPLE:
        assert key in tree
    assert 100 not in tree
    assert 3 not in tree


def test_duplicates_are_ignored():
    tree = AVLTree([5, 5, 3])
    assert len(tree) == 2
    assert tree.insert(3) is False
    assert len(tree) == 2


def test_delete_missing_key():
    tree = AVLTree(EXAMPLE)
    before = tree.preorder()
    assert tree.delete(42) is False
    assert tree.preorder() == before
    assert len(tree) == len(EXAMPLE)


def test_empty_tree():
    tree = AVLTree()
    assert tree.preorder() == []
    assert len(tree) == 0
    assert 1 not in tree
    assert tree.delete(1) is False


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_inserts_and_deletes_keep_invariants(seed):
    rng = random.Random(seed)
    keys = rng.sample(range(1000), 200)
    tree = AVLTree(keys)
    assert sorted(tree.preorder()) == sorted(keys)
    _check_balanced(tree.preorder())

    removed = set(rng.sample(keys, 120))
    for key in removed:
        assert tree.delete(key) is True
    remaining = sorted(set(keys) - removed)
    assert sorted(tree.preorder()) == remaining
    assert len(tree) == len(remaining)
    _check_balanced(tree.preorder())
    for key in removed:
        assert key not in tree


def test_height_is_logarithmic():
    tree = AVLTree(range(1023))
    assert _check_balanced(tree.preorder()) <= 14