from dataclasses import dataclass

import pytest

from loutils.selection import (
    all_match,
    any_match,
    compact,
    count,
    count_by,
    count_values,
    count_values_by,
    drop,
    drop_by_index,
    drop_right,
    drop_right_while,
    drop_while,
    filter_reject,
    is_sorted,
    is_sorted_by_key,
    reject,
    reject_map,
    replace,
    replace_all,
    slice_between,
    splice,
    subset,
)

MAX_UINT = 2**64 - 1


@pytest.mark.parametrize(
    "n, expected",
    [(1, [1, 2, 3, 4]), (2, [2, 3, 4]), (3, [3, 4]), (4, [4]), (5, []), (6, [])],
)
def test_drop(n, expected):
    assert drop([0, 1, 2, 3, 4], n) == expected


def test_drop_negative_raises():
    with pytest.raises(ValueError):
        drop([1, 2], -1)


@pytest.mark.parametrize(
    "n, expected",
    [(1, [0, 1, 2, 3]), (2, [0, 1, 2]), (3, [0, 1]), (4, [0]), (5, []), (6, [])],
)
def test_drop_right(n, expected):
    assert drop_right([0, 1, 2, 3, 4], n) == expected


def test_drop_right_negative_raises():
    with pytest.raises(ValueError):
        drop_right([1, 2], -1)


def test_drop_while():
    data = [0, 1, 2, 3, 4, 5, 6]
    assert drop_while(data, lambda t: t != 4) == [4, 5, 6]
    assert drop_while(data, lambda t: True) == []
    assert drop_while(data, lambda t: t == 10) == data


def test_drop_right_while():
    data = [0, 1, 2, 3, 4, 5, 6]
    assert drop_right_while(data, lambda t: t != 3) == [0, 1, 2, 3]
    assert drop_right_while(data, lambda t: t != 1) == [0, 1]
    assert drop_right_while(data, lambda t: t == 10) == data
    assert drop_right_while(data, lambda t: t != 10) == []


@pytest.mark.parametrize(
    "collection, indexes, expected",
    [
        ([0, 1, 2, 3, 4], (0,), [1, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (0, 1, 2), [3, 4]),
        ([0, 1, 2, 3, 4], (-4, -2, -3), [0, 4]),
        ([0, 1, 2, 3, 4], (-4, -4), [0, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (3, 1, 0), [2, 4]),
        ([0, 1, 2, 3, 4], (2,), [0, 1, 3, 4]),
        ([0, 1, 2, 3, 4], (4,), [0, 1, 2, 3]),
        ([0, 1, 2, 3, 4], (5,), [0, 1, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (100,), [0, 1, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (-1,), [0, 1, 2, 3]),
        ([], (0, 1), []),
        ([42], (0, 1), []),
        ([42], (1, 0), []),
        ([], (1,), []),
        ([1], (0,), []),
    ],
)
def test_drop_by_index(collection, indexes, expected):
    assert drop_by_index(collection, *indexes) == expected


def test_drop_by_index_leaves_input_alone():
    data = [0, 1, 2]
    drop_by_index(data, 0)
    assert data == [0, 1, 2]


def test_reject():
    assert reject([1, 2, 3, 4], lambda x, _: x % 2 == 0) == [1, 3]
    assert reject(
        ["Smith", "foo", "Domin", "bar", "Olivia"], lambda x, _: len(x) > 3
    ) == ["foo", "bar"]


def test_reject_map():
    r1 = reject_map(
        [1, 2, 3, 4], lambda x, _: (str(x), False) if x % 2 == 0 else ("", True)
    )
    r2 = reject_map(
        ["cpu", "gpu", "mouse", "keyboard"],
        lambda x, _: ("xpu", False) if x.endswith("pu") else ("", True),
    )
    assert r1 == ["2", "4"]
    assert r2 == ["xpu", "xpu"]


def test_filter_reject():
    left1, right1 = filter_reject([1, 2, 3, 4], lambda x, _: x % 2 == 0)
    assert left1 == [2, 4]
    assert right1 == [1, 3]

    left2, right2 = filter_reject(
        ["Smith", "foo", "Domin", "bar", "Olivia"], lambda x, _: len(x) > 3
    )
    assert left2 == ["Smith", "Domin", "Olivia"]
    assert right2 == ["foo", "bar"]


def test_count():
    assert count([1, 2, 1], 1) == 2
    assert count([1, 2, 1], 3) == 0
    assert count([], 1) == 0


def test_count_by():
    assert count_by([1, 2, 1], lambda i: i < 2) == 2
    assert count_by([1, 2, 1], lambda i: i > 2) == 0
    assert count_by([], lambda i: i <= 2) == 0


def test_count_values():
    assert count_values([]) == {}
    assert count_values([1, 2]) == {1: 1, 2: 1}
    assert count_values([1, 2, 2]) == {1: 1, 2: 2}
    assert count_values(["foo", "bar", ""]) == {"": 1, "foo": 1, "bar": 1}
    assert count_values(["foo", "bar", "bar"]) == {"foo": 1, "bar": 2}


def test_count_values_by():
    def odd_even(v):
        return v % 2 == 0

    assert count_values_by([], odd_even) == {}
    assert count_values_by([1, 2], odd_even) == {True: 1, False: 1}
    assert count_values_by([1, 2, 2], odd_even) == {True: 2, False: 1}
    assert count_values_by(["foo", "bar", ""], len) == {0: 1, 3: 2}
    assert count_values_by(["foo", "bar", "bar"], len) == {3: 3}


@pytest.mark.parametrize(
    "offset, length, expected",
    [
        (0, 0, []),
        (10, 2, []),
        (-10, 2, [0, 1]),
        (0, 10, [0, 1, 2, 3, 4]),
        (0, 2, [0, 1]),
        (2, 2, [2, 3]),
        (2, 5, [2, 3, 4]),
        (2, 3, [2, 3, 4]),
        (2, 4, [2, 3, 4]),
        (-2, 4, [3, 4]),
        (-4, 1, [1]),
        (-4, MAX_UINT, [1, 2, 3, 4]),
    ],
)
def test_subset(offset, length, expected):
    assert subset([0, 1, 2, 3, 4], offset, length) == expected


def test_subset_negative_length_raises():
    with pytest.raises(ValueError):
        subset([0, 1], 0, -1)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (0, 0, []),
        (0, 1, [0]),
        (0, 5, [0, 1, 2, 3, 4]),
        (0, 6, [0, 1, 2, 3, 4]),
        (1, 1, []),
        (1, 5, [1, 2, 3, 4]),
        (1, 6, [1, 2, 3, 4]),
        (4, 5, [4]),
        (5, 5, []),
        (6, 5, []),
        (6, 6, []),
        (1, 0, []),
        (5, 0, []),
        (6, 4, []),
        (6, 7, []),
        (-10, 1, [0]),
        (-1, 3, [0, 1, 2]),
        (-10, 7, [0, 1, 2, 3, 4]),
    ],
)
def test_slice_between(start, end, expected):
    assert slice_between([0, 1, 2, 3, 4], start, end) == expected


@pytest.mark.parametrize(
    "old, n, expected",
    [
        (0, 2, [42, 1, 42, 1, 2, 3, 0]),
        (0, 1, [42, 1, 0, 1, 2, 3, 0]),
        (0, 0, [0, 1, 0, 1, 2, 3, 0]),
        (0, -1, [42, 1, 42, 1, 2, 3, 42]),
        (-1, 2, [0, 1, 0, 1, 2, 3, 0]),
        (-1, 1, [0, 1, 0, 1, 2, 3, 0]),
        (-1, 0, [0, 1, 0, 1, 2, 3, 0]),
        (-1, -1, [0, 1, 0, 1, 2, 3, 0]),
    ],
)
def test_replace(old, n, expected):
    data = [0, 1, 0, 1, 2, 3, 0]
    assert replace(data, old, 42, n) == expected
    assert data == [0, 1, 0, 1, 2, 3, 0]


def test_replace_all():
    data = [0, 1, 0, 1, 2, 3, 0]
    assert replace_all(data, 0, 42) == [42, 1, 42, 1, 2, 3, 42]
    assert replace_all(data, -1, 42) == [0, 1, 0, 1, 2, 3, 0]


@dataclass
class _Record:
    bar: int
    baz: str


def test_compact():
    assert compact([2, 0, 4, 0]) == [2, 4]
    assert compact(["", "foo", "", "bar", ""]) == ["foo", "bar"]
    assert compact([True, False, True, False]) == [True, True]

    e1, e2, e3 = _Record(1, "a"), _Record(0, ""), _Record(2, "")
    result = compact([e1, e2, None, e3])
    assert len(result) == 3
    assert result[0] is e1
    assert result[1] is e2
    assert result[2] is e3


def test_is_sorted():
    assert is_sorted([0, 1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert is_sorted(list("abcdefghij"))
    assert not is_sorted([0, 1, 4, 3, 2, 5, 6, 7, 8, 9, 10])
    assert not is_sorted(list("abdcefghij"))


def test_is_sorted_by_key():
    assert is_sorted_by_key(["a", "bb", "ccc"], len)
    assert not is_sorted_by_key(["aa", "b", "ccc"], len)
    assert is_sorted_by_key(["1", "2", "3", "11"], int)


def test_splice():
    sample = ["a", "b", "c", "d", "e", "f", "g"]
    original = list(sample)

    assert splice(sample, 1, "1", "2") == ["a", "1", "2", "b", "c", "d", "e", "f", "g"]
    assert sample == original

    results = splice(sample, 1)
    results[0] = "b"
    assert sample == original

    assert splice(sample, 42, "1", "2") == original + ["1", "2"]
    assert splice(sample, -42, "1", "2") == ["1", "2"] + original
    assert splice(sample, -2, "1", "2") == ["a", "b", "c", "d", "e", "1", "2", "f", "g"]
    assert splice(sample, -7, "1", "2") == ["1", "2"] + original
    assert sample == original


@pytest.mark.parametrize(
    "collection, index, expected",
    [
        ([], 0, ["1", "2"]),
        ([], 1, ["1", "2"]),
        ([], -1, ["1", "2"]),
        (["0"], 0, ["1", "2", "0"]),
        (["0"], 1, ["0", "1", "2"]),
        (["0"], -1, ["1", "2", "0"]),
    ],
)
def test_splice_small(collection, index, expected):
    assert splice(collection, index, "1", "2") == expected


def test_any_match():
    assert any_match([1, 2, 3], lambda x: x == 2)
    assert not any_match([1, 2, 3], lambda x: x > 5)
    assert not any_match([], lambda x: True)


def test_all_match():
    assert all_match([1, 2, 3], lambda x: x > 0)
    assert not all_match([1, 2, 3], lambda x: x > 1)
    assert all_match([], lambda x: False)