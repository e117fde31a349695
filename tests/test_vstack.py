from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dskit.vstack import StackEmptyError, VectorStack


@dataclass
class IntData:
    value: int


@dataclass
class StringData:
    text: list


def int_copy(item: IntData) -> IntData:
    return IntData(item.value)


def string_copy(item: StringData) -> StringData:
    return StringData(list(item.text))


def make_int_stack() -> VectorStack:
    return VectorStack(int_copy)


def test_create_is_empty():
    vs = make_int_stack()
    assert vs.empty() is True
    assert len(vs) == 0


def test_push_basic():
    vs = make_int_stack()
    vs.push(IntData(42))
    assert vs.empty() is False
    assert len(vs) == 1
    vs.push(IntData(100))
    assert len(vs) == 2
    vs.push(IntData(-5))
    assert len(vs) == 3


def test_pop_basic_lifo():
    vs = make_int_stack()
    for value in (10, 20, 30):
        vs.push(IntData(value))
    assert vs.pop().value == 30
    assert len(vs) == 2
    assert vs.pop().value == 20
    assert len(vs) == 1
    assert vs.pop().value == 10
    assert vs.empty() is True


def test_pop_discarding_result_empties_stack():
    vs = make_int_stack()
    vs.push(IntData(999))
    popped = vs.pop()
    assert popped == IntData(999)
    assert vs.empty() is True


def test_pop_empty_stack_raises():
    vs = make_int_stack()
    with pytest.raises(StackEmptyError):
        vs.pop()


def test_top_empty_stack_raises():
    vs = make_int_stack()
    with pytest.raises(StackEmptyError):
        vs.top()


def test_stack_empty_error_is_index_error():
    vs = make_int_stack()
    with pytest.raises(IndexError):
        vs.pop()


def test_top_is_non_destructive():
    vs = make_int_stack()
    vs.push(IntData(100))
    vs.push(IntData(200))
    assert vs.top().value == 200
    assert len(vs) == 2
    assert vs.top().value == 200


def test_empty_transitions():
    vs = make_int_stack()
    assert vs.empty() is True
    vs.push(IntData(42))
    assert vs.empty() is False
    vs.pop()
    assert vs.empty() is True


def test_size_tracks_pushes_and_pops():
    vs = make_int_stack()
    assert len(vs) == 0
    for i in range(1, 11):
        vs.push(IntData(i))
        assert len(vs) == i
    for i in range(9, -1, -1):
        vs.pop()
        assert len(vs) == i


def test_walk_visits_every_item():
    vs = make_int_stack()
    for i in range(1, 6):
        vs.push(IntData(i * 10))
    values = [item.value for item in vs]
    assert len(values) == 5
    assert sum(values) == 150


def test_iteration_runs_bottom_to_top():
    vs = make_int_stack()
    for i in range(1, 6):
        vs.push(IntData(i * 10))
    assert [item.value for item in vs] == [10, 20, 30, 40, 50]


def test_string_stack():
    vs = VectorStack(string_copy)
    for word in ("Hello", "World", "Stack"):
        vs.push(StringData(list(word)))
    assert len(vs) == 3
    assert "".join(vs.pop().text) == "Stack"
    assert "".join(vs.pop().text) == "World"
    assert "".join(vs.pop().text) == "Hello"
    assert vs.empty() is True


def test_stored_items_are_copies():
    vs = VectorStack(string_copy)
    original = StringData(list("Hello"))
    vs.push(original)
    original.text.append("!")
    peeked = vs.top()
    peeked.text.clear()
    assert "".join(vs.pop().text) == "Hello"


def test_stress_push_pop():
    vs = make_int_stack()
    count = 1000
    for i in range(count):
        vs.push(IntData(i))
    assert len(vs) == count
    popped = [vs.pop().value for _ in range(count)]
    assert popped == list(range(count - 1, -1, -1))
    assert vs.empty() is True


def test_interleaved_operations():
    vs = make_int_stack()
    vs.push(IntData(1))
    vs.push(IntData(2))
    assert vs.top().value == 2
    assert vs.pop().value == 2
    vs.push(IntData(3))
    vs.push(IntData(4))
    assert vs.top().value == 4
    assert len(vs) == 3
    assert vs.pop().value == 4
    assert vs.pop().value == 3
    assert vs.pop().value == 1
    assert vs.empty() is True


def test_default_copy_keeps_items():
    vs = VectorStack()
    vs.push("a")
    vs.push("b")
    assert vs.pop() == "b"
    assert vs.top() == "a"


def test_failing_copy_on_push_leaves_stack_unchanged():
    def refuse_negative(item: IntData) -> IntData:
        if item.value < 0:
            raise ValueError("negative")
        return IntData(item.value)

    vs = VectorStack(refuse_negative)
    vs.push(IntData(7))
    with pytest.raises(ValueError):
        vs.push(IntData(-1))
    assert len(vs) == 1
    assert vs.top().value == 7


def test_failing_copy_on_pop_keeps_item():
    calls = {"n": 0}

    def flaky(item: IntData) -> IntData:
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("copy failed")
        return IntData(item.value)

    vs = VectorStack(flaky)
    vs.push(IntData(5))
    with pytest.raises(RuntimeError):
        vs.pop()
    assert len(vs) == 1
    assert vs.pop().value == 5


@given(st.lists(st.integers()))
def test_pop_order_is_reverse_of_push(values):
    vs = VectorStack()
    for value in values:
        vs.push(value)
    assert list(vs) == values
    assert [vs.pop() for _ in values] == values[::-1]
    assert vs.empty() is True