"""
Collection Helpers Tests

Pure function tests for zip_to_dict, pairs_to_dict, as_batches and is_in.
"""

import math

import pytest

from etlkit.exceptions import InvalidArgumentError
from etlkit.transformation.collections import (
    as_batches,
    is_in,
    pairs_to_dict,
    zip_to_dict,
)


def test_zip_to_dict_maps_co_indexed_values():
    """Each key maps to the value at the same index"""
    keys = ["a", "b", "c"]
    values = [1, 2, 3]

    result = zip_to_dict(keys, values)

    assert result == {"a": 1, "b": 2, "c": 3}
    for i, key in enumerate(keys):
        assert result[key] == values[i]


def test_zip_to_dict_last_duplicate_wins():
    """Duplicate keys keep the last value, size is the number of distinct keys"""
    keys = ["a", "b", "a"]
    result = zip_to_dict(keys, [1, 2, 3])

    assert result == {"a": 3, "b": 2}
    assert len(result) == len(set(keys))


def test_zip_to_dict_accepts_generators():
    """Inputs are materialized once, so one-shot iterables work"""
    result = zip_to_dict((k for k in "xy"), iter([10, 20]))
    assert result == {"x": 10, "y": 20}


def test_zip_to_dict_empty():
    assert zip_to_dict([], []) == {}


@pytest.mark.parametrize(
    "keys, values",
    [
        (["a", "b"], [1]),
        (["a"], [1, 2]),
        ([], [1]),
    ],
)
def test_zip_to_dict_length_mismatch_raises(keys, values):
    """Mismatched lengths fail with InvalidArgumentError naming both sizes"""
    with pytest.raises(InvalidArgumentError) as exc_info:
        zip_to_dict(keys, values)

    assert str(len(keys)) in str(exc_info.value)
    assert str(len(values)) in str(exc_info.value)


def test_zip_to_dict_none_key_raises():
    with pytest.raises(InvalidArgumentError, match="None"):
        zip_to_dict(["a", None], [1, 2])


def test_zip_to_dict_error_is_a_value_error():
    """Callers catching ValueError still catch argument errors"""
    with pytest.raises(ValueError):
        zip_to_dict(["a"], [])


def test_pairs_to_dict():
    pairs = [("a", 1), ("b", 2), ("a", 3)]
    assert pairs_to_dict(pairs) == {"a": 3, "b": 2}
    assert pairs_to_dict([]) == {}


@pytest.mark.parametrize(
    "n, batch_size",
    [(0, 3), (1, 3), (3, 3), (7, 3), (10, 1), (5, 10), (2500, 1000)],
)
def test_as_batches_partition(n, batch_size):
    """Batches count is ceil(n / size), all full but the last, order kept"""
    items = list(range(n))
    batches = as_batches(items, batch_size)

    assert len(batches) == math.ceil(n / batch_size)
    assert [x for batch in batches for x in batch] == items
    for batch in batches[:-1]:
        assert len(batch) == batch_size
    if batches:
        assert 0 < len(batches[-1]) <= batch_size


def test_as_batches_default_size_is_1000():
    batches = as_batches(range(2001))
    assert [len(b) for b in batches] == [1000, 1000, 1]


def test_as_batches_shares_elements():
    """Elements are not copied, and the input list is left untouched"""
    items = [{"id": 1}, {"id": 2}, {"id": 3}]
    batches = as_batches(items, 2)

    assert batches[0][0] is items[0]
    assert batches[1][0] is items[2]
    assert items == [{"id": 1}, {"id": 2}, {"id": 3}]


@pytest.mark.parametrize("batch_size", [0, -1])
def test_as_batches_rejects_non_positive_size(batch_size):
    with pytest.raises(InvalidArgumentError):
        as_batches([1, 2, 3], batch_size)


def test_is_in():
    assert is_in("my_string", "myString", "MYSTRING", "my_string")
    assert not is_in("my_string", "myString", "MYSTRING")
    assert is_in(3, 1, 2, 3)
    assert not is_in(3)


def test_is_in_is_case_sensitive():
    assert not is_in("a", "A")
