import pytest

from shouldpack.assertions import AssertionFailure, should


def test_substring_assertions_pass_and_chain() -> None:
    wrapper = should("hello world", "greeting")

    assert wrapper.should_contain("lo w").should_not_contain("xyz") is wrapper
    wrapper.should_start_with("hello").and_.should_end_with("world")


def test_missing_substring_report() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should("hello world", "greeting").should_contain("xyz")

    assert str(excinfo.value) == 'greeting\nshould contain "xyz"\nbut was        "hello world"'


def test_unexpected_substring_report_points_at_match() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should("hello world", "greeting").should_not_contain("world", "no planets")

    assert str(excinfo.value).split("\n") == [
        "greeting",
        'should not contain "world"',
        'but was            "hello world"',
        " " * 26 + "^",
        "Found at index 6.",
        "no planets",
    ]


def test_prefix_and_suffix_failures() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should("hello", "s").should_start_with("he!")
    assert str(excinfo.value) == 's\nshould start with "he!"\nbut starts with   "hello"'

    with pytest.raises(AssertionFailure) as excinfo:
        should("hello", "s").should_end_with("xyz", expected_expr="suffix")
    assert str(excinfo.value) == (
        's\nshould end with suffix\n                "xyz"\nbut ends with   "hello"'
    )


def test_long_actual_string_is_truncated_in_reports() -> None:
    text = "a" * 100

    with pytest.raises(AssertionFailure) as excinfo:
        should(text).should_start_with("b")

    actual_line = str(excinfo.value).split("\n")[-1]
    assert actual_line == 'but starts with   "' + "a" * 57 + '..."'

    with pytest.raises(AssertionFailure) as excinfo:
        should(text).should_end_with("b")

    actual_line = str(excinfo.value).split("\n")[-1]
    assert actual_line == 'but ends with   "...' + "a" * 57 + '"'


def test_none_arguments_are_usage_errors() -> None:
    with pytest.raises(ValueError):
        should("text").should_contain(None)
    with pytest.raises(ValueError):
        should("text").should_not_contain(None)
    with pytest.raises(ValueError):
        should("text").should_start_with(None)
    with pytest.raises(ValueError):
        should("text").should_end_with(None)


def test_none_actual_fails_with_type_mismatch() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "name").should_start_with("a")

    assert str(excinfo.value) == "name\nshould be <str>\nbut was   <NoneType>"

    with pytest.raises(AssertionFailure):
        should(None).should_contain("a")


def test_non_string_actual_with_string_prefix_fails() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(42, "number").should_end_with("2")

    assert str(excinfo.value) == "number\nshould be <str>\nbut was   <int>"
