import threading

import pytest

from shouldpack.capture import (
    UNAVAILABLE,
    ExpressionPair,
    capture_expressions,
    get_actual,
    get_current_expressions,
    get_expected,
    normalize_expression,
)


@pytest.fixture(autouse=True)
def _assert_no_expression_leak() -> None:
    assert get_current_expressions() is UNAVAILABLE
    yield
    assert get_current_expressions() is UNAVAILABLE


def test_no_active_scope_yields_empty_pair() -> None:
    assert get_current_expressions() == ExpressionPair("", "")
    assert get_actual() == ""
    assert get_expected() == ""


def test_scope_exposes_labels_and_resets_on_exit() -> None:
    with capture_expressions(actual="result.total", expected="expected_total") as pair:
        assert pair == ExpressionPair("result.total", "expected_total")
        assert get_actual() == "result.total"
        assert get_expected() == "expected_total"

    assert get_current_expressions() is UNAVAILABLE


def test_scope_is_reset_when_the_body_raises() -> None:
    with pytest.raises(RuntimeError):
        with capture_expressions(actual="value"):
            raise RuntimeError("boom")


def test_nested_scope_inherits_fields_it_does_not_override() -> None:
    with capture_expressions(actual="outer", expected="outer_expected"):
        with capture_expressions(expected="inner_expected") as inner:
            assert inner == ExpressionPair("outer", "inner_expected")
        with capture_expressions() as untouched:
            assert untouched == ExpressionPair("outer", "outer_expected")
        assert get_current_expressions() == ExpressionPair("outer", "outer_expected")


def test_nested_scope_can_clear_a_field_with_empty_string() -> None:
    with capture_expressions(actual="outer", expected="expected"):
        with capture_expressions(expected="") as inner:
            assert inner == ExpressionPair("outer", "")


def test_normalize_expression_never_raises() -> None:
    assert normalize_expression("  padded  ") == "padded"
    assert normalize_expression(None) == ""
    assert normalize_expression(42) == ""
    assert normalize_expression(object()) == ""


def test_scope_is_isolated_per_thread() -> None:
    seen: list[ExpressionPair] = []

    def worker() -> None:
        seen.append(get_current_expressions())

    with capture_expressions(actual="main-thread"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen == [UNAVAILABLE]


def test_expression_pair_to_dict() -> None:
    assert ExpressionPair("a", "b").to_dict() == {"actual": "a", "expected": "b"}
