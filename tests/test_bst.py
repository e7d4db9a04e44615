import math

import pytest

from dsakit.bst import (
    balance,
    bst_from_preorder,
    build_bst,
    delete,
    insert,
    is_valid_bst,
    kth_smallest,
    lca_bst,
    min_node,
)
from dsakit.node import Node
from dsakit.properties import height
from dsakit.traversal import inorder, preorder

SAMPLE = [10, 8, 21, 7, 27, 5, 4, 3]


def sample_tree():
    return build_bst(SAMPLE + [-1])


def test_build_gives_sorted_inorder():
    assert inorder(sample_tree()) == sorted(SAMPLE)


def test_build_stops_at_marker():
    root = build_bst([4, 2, -1, 9, 1])
    assert inorder(root) == [2, 4]


def test_build_empty():
    assert build_bst([-1]) is None


def test_insert_into_empty_makes_root():
    root = insert(None, 42)
    assert root.data == 42 and root.is_leaf


def test_duplicate_goes_left():
    root = build_bst([5, 5])
    assert root.left is not None and root.left.data == 5
    assert root.right is None


def test_min_node():
    assert min_node(sample_tree()).data == min(SAMPLE)


def test_min_node_empty_raises():
    with pytest.raises(ValueError):
        min_node(None)


@pytest.mark.parametrize("key", SAMPLE)
def test_delete_each_value(key):
    root = delete(sample_tree(), key)
    expected = sorted(SAMPLE)
    expected.remove(key)
    assert inorder(root) == expected
    assert is_valid_bst(root)


def test_delete_root_with_two_children_takes_successor():
    root = delete(sample_tree(), 10)
    assert root.data == 21
    assert 10 not in inorder(root)


def test_delete_missing_key_keeps_tree():
    root = delete(sample_tree(), 100)
    assert inorder(root) == sorted(SAMPLE)


def test_delete_last_node():
    assert delete(Node(1), 1) is None


def test_valid_bst_true():
    assert is_valid_bst(sample_tree())


def test_valid_bst_rejects_wrong_side():
    assert not is_valid_bst(Node(5, left=Node(10)))


def test_valid_bst_rejects_deep_violation():
    root = Node(10, left=Node(5, right=Node(12)))
    assert not is_valid_bst(root)


def test_valid_bst_rejects_duplicates():
    assert not is_valid_bst(build_bst([5, 5]))


def test_valid_bst_empty():
    assert is_valid_bst(None)


def test_from_preorder_round_trip():
    values = [8, 5, 1, 7, 10, 12]
    root = bst_from_preorder(values)
    assert preorder(root) == values
    assert inorder(root) == sorted(values)
    assert is_valid_bst(root)


def test_from_preorder_of_built_tree():
    original = sample_tree()
    rebuilt = bst_from_preorder(preorder(original))
    assert preorder(rebuilt) == preorder(original)


def test_from_preorder_empty():
    assert bst_from_preorder([]) is None


@pytest.mark.parametrize("k", range(1, len(SAMPLE) + 1))
def test_kth_smallest(k):
    assert kth_smallest(sample_tree(), k) == sorted(SAMPLE)[k - 1]


@pytest.mark.parametrize("k", [0, -2, len(SAMPLE) + 1])
def test_kth_smallest_out_of_range(k):
    assert kth_smallest(sample_tree(), k) is None


def test_lca_from_source_example():
    assert lca_bst(sample_tree(), 8, 21) == 10


def test_lca_in_left_subtree():
    assert lca_bst(sample_tree(), 3, 7) == 7


def test_lca_empty():
    assert lca_bst(None, 1, 2) is None


def test_balance_keeps_values_and_is_balanced():
    skewed = build_bst(list(range(1, 16)))
    balanced = balance(skewed)
    assert inorder(balanced) == list(range(1, 16))
    assert height(balanced) == math.ceil(math.log2(16))
    assert is_valid_bst(balanced)


def test_balance_empty():
    assert balance(None) is None