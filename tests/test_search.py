import pytest

from thermobench.search import (
    BinarySearchTree,
    LinkedList,
    Node,
    PbRandom,
    binary_array_search,
    binary_tree_search,
    linear_array_search,
    linkedlist_search,
    make_evens_array,
    make_evens_list,
    make_evens_tree,
    pb_rand,
    pb_srand,
    tree_merge,
)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_pb_rand_first_value_from_seed_one():
    rng = PbRandom()
    assert rng.next() == 16838


def test_pb_rand_deterministic_after_seed():
    pb_srand(42)
    first = [pb_rand() for _ in range(10)]
    pb_srand(42)
    second = [pb_rand() for _ in range(10)]
    assert first == second
    assert all(0 <= v < 32768 for v in first)


def test_pbrandom_seed_matches_global():
    rng = PbRandom()
    rng.seed(7)
    pb_srand(7)
    assert [rng.next() for _ in range(5)] == [pb_rand() for _ in range(5)]


def test_make_evens_array():
    assert make_evens_array(5) == [0, 2, 4, 6, 8]
    assert make_evens_array(0) == []


@pytest.mark.parametrize("search", [linear_array_search, binary_array_search])
def test_array_searches_find_evens_only(search):
    array = make_evens_array(17)
    assert all(search(array, q) for q in range(0, 34, 2))
    assert not any(search(array, q) for q in range(1, 34, 2))
    assert not search(array, -2)
    assert not search(array, 34)


def test_binary_search_empty():
    assert binary_array_search([], 0) is False


def test_linked_list_order_and_links():
    pb_srand(1)
    lst = make_evens_list(9)
    assert list(lst) == make_evens_array(9)
    assert len(lst) == 9
    assert lst.head.left is None
    node = lst.head
    while node.right is not None:
        assert node.right.left is node
        node = node.right
    assert node.data == 16


def test_linkedlist_search():
    lst = make_evens_list(12)
    assert all(linkedlist_search(lst, q) for q in range(0, 24, 2))
    assert not any(linkedlist_search(lst, q) for q in range(1, 24, 2))


def test_single_node_list():
    lst = make_evens_list(1)
    assert list(lst) == [0]
    assert linkedlist_search(lst, 0)


@pytest.mark.parametrize("length", [1, 2, 3, 7, 10, 33])
def test_tree_is_sorted_and_balanced(length):
    tree = make_evens_tree(length)
    assert list(tree) == make_evens_array(length)
    assert len(tree) == length
    assert _height(tree.root) <= length.bit_length()


def test_binary_tree_search():
    tree = make_evens_tree(20)
    assert all(binary_tree_search(tree, q) for q in range(0, 40, 2))
    assert not any(binary_tree_search(tree, q) for q in range(1, 40, 2))


def test_empty_structures_find_nothing():
    assert not linkedlist_search(LinkedList(), 0)
    assert not binary_tree_search(BinarySearchTree(), 0)


def test_make_structures_reject_nonpositive_length():
    with pytest.raises(ValueError):
        make_evens_list(0)
    with pytest.raises(ValueError):
        make_evens_tree(-1)


def test_tree_merge_single_and_pair():
    nodes = [Node(0), Node(2)]
    assert tree_merge(nodes, 1, 1) is nodes[1]
    root = tree_merge(nodes, 0, 1)
    assert root is nodes[0]
    assert root.right is nodes[1]
    assert root.left is None


def test_tree_merge_middle_root():
    nodes = [Node(2 * i) for i in range(5)]
    root = tree_merge(nodes, 0, 4)
    assert root is nodes[2]
    assert list(BinarySearchTree(root, 5)) == [0, 2, 4, 6, 8]


def test_structures_consume_generator_deterministically():
    pb_srand(3)
    make_evens_list(4)
    after_list = pb_rand()
    pb_srand(3)
    make_evens_tree(4)
    after_tree = pb_rand()
    assert after_list == after_tree