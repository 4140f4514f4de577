import pytest

from aocsolver.y2018.day08 import Node, parse

INPUT = "2 3 0 3 10 11 12 1 1 0 1 99 2 1 1 2"


def test_metadata_sum():
    node = Node.from_data(parse(INPUT))
    assert node.metadata_sum() == 138


def test_value():
    node = Node.from_data(parse(INPUT))
    assert node.value() == 66


def test_tree_shape():
    node = Node.from_data(parse(INPUT))
    assert len(node.children) == 2
    assert node.metadata == [1, 1, 2]
    assert node.children[0].metadata == [10, 11, 12]
    assert node.children[1].children[0].metadata == [99]


def test_out_of_range_indexes_count_nothing():
    node = Node.from_data(parse("1 2 0 1 5 3 7"))
    assert node.value() == 0
    assert node.metadata_sum() == 15


def test_parse_rejects_values_above_a_byte():
    with pytest.raises(ValueError):
        parse("1 256")


def test_parse_rejects_words():
    with pytest.raises(ValueError):
        parse("1 two")


def test_truncated_data_raises():
    with pytest.raises(ValueError):
        Node.from_data([1, 1, 0])