import collections

import pytest
from hypothesis import given, strategies as st

from blockdeque.deque import Deque, swap

B = Deque.BLOCK_SIZE


def build(items):
    d = Deque()
    for item in items:
        d.push_back(item)
    return d


def test_default_is_empty():
    d = Deque()
    assert d.empty()
    assert len(d) == 0
    assert list(d) == []


@pytest.mark.parametrize("count", [0, 1, B - 1, B, B + 1, 3 * B + 5])
def test_fill_constructor(count):
    d = Deque(count, "x")
    assert len(d) == count
    assert list(d) == ["x"] * count
    assert d.empty() == (count == 0)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Deque(-1)


def test_at_bounds():
    d = build(range(5))
    assert d.at(4) == 4
    with pytest.raises(IndexError):
        d.at(5)
    with pytest.raises(IndexError):
        d.at(-1)


def test_getitem_negative_and_setitem():
    d = build(range(2 * B))
    assert d[-1] == 2 * B - 1
    d[B] = "mid"
    assert d[B] == "mid"
    with pytest.raises(IndexError):
        d[2 * B]


def test_front_back_and_empty_errors():
    d = build([1, 2, 3])
    assert d.front() == 1
    assert d.back() == 3
    empty = Deque()
    for method in (empty.front, empty.back, empty.pop_back, empty.pop_front):
        with pytest.raises(IndexError):
            method()


def test_push_front_across_blocks():
    d = Deque()
    items = list(range(3 * B + 7))
    for item in items:
        d.push_front(item)
    assert list(d) == items[::-1]
    assert list(reversed(d)) == items


def test_pops_return_values_and_cross_blocks():
    items = list(range(2 * B + 3))
    d = build(items)
    assert [d.pop_front() for _ in range(B + 1)] == items[: B + 1]
    assert [d.pop_back() for _ in range(B)] == items[::-1][:B]
    assert list(d) == items[B + 1 : len(items) - B]


def test_insert_and_erase():
    d = build([0, 1, 2, 3, 4])
    assert d.insert(1, "a") == 1
    assert d.insert(5, "b") == 5
    assert d.insert(len(d), "end") == len(d) - 1
    assert list(d) == [0, "a", 1, 2, 3, "b", 4, "end"]
    assert d.erase(1) == 1
    assert d.erase(4) == 4
    assert list(d) == [0, 1, 2, 3, 4, "end"]
    with pytest.raises(IndexError):
        d.erase(6)
    with pytest.raises(IndexError):
        d.insert(7, "z")


def test_clear_then_reuse():
    d = build(range(3 * B))
    d.clear()
    assert d.empty()
    d.push_back("p")
    d.push_front("q")
    assert list(d) == ["q", "p"]


def test_resize():
    d = build([1, 2, 3])
    d.resize(5, 9)
    assert list(d) == [1, 2, 3, 9, 9]
    d.resize(2)
    assert list(d) == [1, 2]
    with pytest.raises(ValueError):
        d.resize(-1)


def test_shrink_to_fit_keeps_contents():
    d = build(range(4 * B))
    for _ in range(2 * B):
        d.pop_front()
    d.shrink_to_fit()
    assert list(d) == list(range(2 * B, 4 * B))
    d.push_front("f")
    d.push_back("b")
    assert d.front() == "f" and d.back() == "b"


def test_copy_is_independent():
    d = build([1, 2, 3])
    c = d.copy()
    c.push_back(4)
    assert list(d) == [1, 2, 3]
    assert list(c) == [1, 2, 3, 4]


def test_swap_method_and_function():
    a = build([1, 2])
    b = build(["x"])
    a.swap(b)
    assert list(a) == ["x"] and list(b) == [1, 2]
    swap(a, b)
    assert list(a) == [1, 2] and list(b) == ["x"]


def test_comparisons():
    a = build([1, 2, 3])
    b = build([1, 2, 4])
    c = build([1, 2])
    assert a == build([1, 2, 3])
    assert a != b
    assert a < b and b > a
    assert c < a and a >= c
    assert a <= a and a >= a
    assert not (a < a)


def test_repr_round_trip_contents():
    d = build([1, "two"])
    assert repr(d) == "Deque([1, 'two'])"


def test_max_size_at_least_len():
    d = build(range(10))
    assert d.max_size() >= len(d)


operation = st.one_of(
    st.tuples(st.just("push_back"), st.integers()),
    st.tuples(st.just("push_front"), st.integers()),
    st.tuples(st.just("pop_back"), st.none()),
    st.tuples(st.just("pop_front"), st.none()),
)


@given(st.lists(operation, max_size=400))
def test_matches_collections_deque(ops):
    d = Deque()
    model = collections.deque()
    for name, arg in ops:
        if name.startswith("push"):
            getattr(d, name)(arg)
            (model.append if name == "push_back" else model.appendleft)(arg)
        elif model:
            expected = model.pop() if name == "pop_back" else model.popleft()
            assert getattr(d, name)() == expected
        else:
            with pytest.raises(IndexError):
                getattr(d, name)()
    assert list(d) == list(model)
    assert len(d) == len(model)


@given(st.lists(st.integers(), max_size=200), st.data())
def test_insert_erase_match_list(items, data):
    d = build(items)
    model = list(items)
    pos = data.draw(st.integers(0, len(model)))
    d.insert(pos, "new")
    model.insert(pos, "new")
    assert list(d) == model
    pos = data.draw(st.integers(0, len(model) - 1))
    d.erase(pos)
    del model[pos]
    assert list(d) == model