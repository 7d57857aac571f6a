import pytest

from ftkit.btree import (
    BTreeNode,
    apply_by_level,
    apply_infix,
    apply_prefix,
    apply_suffix,
    insert,
    level_count,
    print_tree,
    render,
    search,
)


def cmp(a, b):
    return (a > b) - (a < b)


def build(items):
    root = None
    for item in items:
        root = insert(root, item, cmp)
    return root


def collect(applier, root):
    out = []
    applier(root, out.append)
    return out


@pytest.mark.parametrize("items", [[5, 3, 8, 1, 4, 9, 7], [10, 2, 30, 25], [1]])
def test_infix_is_sorted(items):
    root = build(items)
    assert collect(apply_infix, root) == sorted(items)


def test_insert_none_item_keeps_root():
    root = build([4, 2])
    assert insert(root, None, cmp) is root
    assert insert(None, None, cmp) is None


def test_insert_equal_goes_right():
    root = build([5, 5])
    assert root.left is None
    assert root.right.item == 5


def test_prefix_and_suffix_order():
    items = [5, 3, 8]
    root = build(items)
    assert collect(apply_prefix, root) == [5, 3, 8]
    assert collect(apply_suffix, root) == [3, 8, 5]


def test_traversals_on_empty_tree():
    prefix_out = []
    infix_out = []
    suffix_out = []
    apply_prefix(None, prefix_out.append)
    apply_infix(None, infix_out.append)
    apply_suffix(None, suffix_out.append)
    assert prefix_out == []
    assert infix_out == []
    assert suffix_out == []


def test_level_count_chain_and_empty():
    items = list(range(6))
    assert level_count(build(items)) == len(items)
    assert level_count(None) == level_count(build([]))


def test_level_count_balanced_smaller_than_chain():
    items = [4, 2, 6, 1, 3, 5, 7]
    assert level_count(build(items)) < level_count(build(sorted(items)))


def test_search_finds_items_on_left_path():
    root = build([5, 3, 8, 1])
    assert search(root, 5, cmp) == 5
    assert search(root, 3, cmp) == 3
    assert search(root, 1, cmp) == 1


def test_search_skips_right_when_left_exists():
    root = build([5, 3, 8])
    assert search(root, 8, cmp) is None


def test_search_follows_right_when_no_left():
    root = build([5, 8, 9])
    assert search(root, 9, cmp) == 9


def test_search_none_ref_and_empty_tree():
    assert search(build([1]), None, cmp) is None
    assert search(None, 1, cmp) is None


def test_apply_by_level_prefix_order_and_first_flags():
    items = [5, 3, 8, 1, 4, 9]
    root = build(items)
    calls = []

    def record(item, level, first):
        calls.append((item, level, first))

    apply_by_level(root, record)
    visited = [item for item, _, _ in calls]
    levels = [level for _, level, _ in calls]
    flags = [first for _, _, first in calls]
    assert visited == collect(apply_prefix, root)
    assert calls[0] == (5, 0, True)
    first_levels = [level for level, first in zip(levels, flags) if first]
    assert sorted(first_levels) == list(range(level_count(root)))
    expected_flags = [level not in levels[:pos] for pos, level in enumerate(levels)]
    assert flags == expected_flags


def test_apply_by_level_empty():
    calls = []
    apply_by_level(None, lambda *a: calls.append(a))
    assert calls == []


def test_render_single_node():
    assert render(BTreeNode("a")) == "\na\n"


def test_render_three_nodes():
    root = build(["b", "a", "c"])
    assert render(root) == "\n          c\n\nb\n\n          a\n"


def test_render_empty():
    assert render(None) == ""


def test_print_tree_writes_render(capsys):
    root = build([2, 1, 3])
    print_tree(root)
    assert capsys.readouterr().out == render(root)