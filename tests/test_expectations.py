"""Tests for the expectation variants."""

import pytest

from scout_errors import ArgumentCountMismatch, ArgumentMismatch
from scout_expectations import (
    FUNCTION,
    VALUE,
    ComputedValueExpectation,
    FunctionExpectation,
    MultiValueExpectation,
    PersistentValueExpectation,
    SingleValueExpectation,
)
from scout_matchers import anything, equal_to


def test_single_value_is_consumed_once():
    expectation = SingleValueExpectation("bar")
    assert expectation.has_next()
    assert expectation.next_value() == "bar"
    assert not expectation.has_next()


def test_multi_value_yields_in_order_destructively():
    values = [0, 1, 2]
    expectation = MultiValueExpectation(values)
    assert [expectation.next_value() for _ in range(3)] == [0, 1, 2]
    assert not expectation.has_next()
    # the declared sequence is copied, not consumed
    assert values == [0, 1, 2]


def test_multi_value_with_empty_sequence_is_exhausted():
    assert not MultiValueExpectation([]).has_next()


def test_persistent_value_never_exhausts():
    expectation = PersistentValueExpectation(7)
    for _ in range(100):
        assert expectation.has_next()
        assert expectation.next_value() == 7


def test_computed_value_calls_getter_each_time():
    counter = iter(range(100))
    expectation = ComputedValueExpectation(lambda: next(counter))
    assert [expectation.next_value() for _ in range(100)] == list(range(100))
    assert expectation.has_next()


def test_kinds_and_required_flags():
    assert SingleValueExpectation(1).kind == VALUE
    assert SingleValueExpectation(1).required
    assert MultiValueExpectation([1]).required
    assert not PersistentValueExpectation(1).required
    assert not ComputedValueExpectation(lambda: 1).required

    func = FunctionExpectation("baz", [], lambda: None)
    assert func.kind == FUNCTION
    assert func.required
    assert not FunctionExpectation("baz", None, lambda: None, repeat=True).required


def test_function_expectation_is_exhausted_immediately():
    expectation = FunctionExpectation("baz", [], lambda: "baz return")
    assert not expectation.has_next()
    action = expectation.next_value()
    assert action((), {}) == "baz return"


def test_repeating_function_expectation_never_exhausts():
    expectation = FunctionExpectation("baz", None, lambda: 1, repeat=True)
    assert expectation.has_next()


def test_function_expectation_passes_arguments_to_action():
    expectation = FunctionExpectation("add", [anything(), anything()], lambda a, b, scale=1: (a + b) * scale,
                                      kw_matchers={"scale": 2})
    assert expectation.call((1, 2), {"scale": 2}) == 6


def test_function_expectation_wraps_plain_values_in_matchers():
    expectation = FunctionExpectation("buz", [0], lambda value: value)
    assert expectation.call((0,), {}) == 0
    with pytest.raises(ArgumentMismatch):
        expectation.call((1,), {})


def test_argument_count_mismatch_reports_counts():
    expectation = FunctionExpectation("buz", [equal_to(0)], lambda *args: None)
    with pytest.raises(ArgumentCountMismatch, match="Expected 1 arguments, but got 2") as excinfo:
        expectation.call((0, 1), {})
    assert excinfo.value.member == "buz"
    assert excinfo.value.expected == 1
    assert excinfo.value.actual == 2


def test_unexpected_keyword_is_a_count_mismatch():
    expectation = FunctionExpectation("buz", [equal_to(0)], lambda *args, **kwargs: None)
    with pytest.raises(ArgumentCountMismatch, match="Expected 1 arguments, but got 2"):
        expectation.call((0,), {"extra": 1})


def test_renamed_keyword_names_missing_and_unexpected():
    expectation = FunctionExpectation("open", [], lambda **kwargs: None, kw_matchers={"mode": "r"})
    with pytest.raises(ArgumentCountMismatch) as excinfo:
        expectation.call((), {"flags": "r"})
    error = excinfo.value
    assert error.missing == ["mode"]
    assert error.unexpected == ["flags"]
    assert "Expected 1 arguments" not in str(error)
    assert "missing keyword arguments ['mode']" in str(error)
    assert "unexpected keyword arguments ['flags']" in str(error)


def test_argument_failure_handed_to_fail_callback():
    failures = []
    expectation = FunctionExpectation("buz", [equal_to(0)], lambda value: "ran")
    assert expectation.call((1,), {}, failures.append) is None
    assert isinstance(failures[0], ArgumentMismatch)
    assert expectation.call((0,), {}, failures.append) == "ran"
    assert len(failures) == 1


def test_argument_mismatch_lists_every_failing_pair():
    expectation = FunctionExpectation("move", [equal_to(0), equal_to(1), equal_to(2)], lambda *args: None)
    with pytest.raises(ArgumentMismatch) as excinfo:
        expectation.call((9, 1, 8), {})
    error = excinfo.value
    assert [arg for arg, _ in error.mismatches] == [9, 8]
    assert "Arguments to move didn't match" in str(error)
    assert "(9, Equal to 0)" in str(error)
    assert "(8, Equal to 2)" in str(error)


def test_keyword_mismatch_is_reported():
    expectation = FunctionExpectation("open", [], lambda **kwargs: None, kw_matchers={"mode": "r"})
    with pytest.raises(ArgumentMismatch, match=r"\('w', Equal to 'r'\)"):
        expectation.call((), {"mode": "w"})


def test_action_not_run_when_arguments_mismatch():
    calls = []
    expectation = FunctionExpectation("buz", [equal_to(0)], calls.append)
    with pytest.raises(ArgumentMismatch):
        expectation.call((1,), {})
    assert calls == []


def test_any_arguments_when_no_matchers_declared():
    expectation = FunctionExpectation("log", None, lambda *args, **kwargs: len(args) + len(kwargs))
    assert expectation.call((1, 2, 3), {"level": "info"}) == 4
