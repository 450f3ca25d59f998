from pathlib import Path

import pytest

import shouldkit
from shouldpack.assertions import AssertionResult, check, should


def test_check_passes_when_block_completes() -> None:
    result = check(lambda: should(3).should_be(3))

    assert result.passed is True
    assert result.exit_code == 0
    assert result.to_dict() == {"status": "pass", "exit_code": 0, "message": ""}


def test_check_turns_assertion_failure_into_result() -> None:
    result = check(lambda: should(None, "value").should_not_be_none("ctx"))

    assert result.passed is False
    assert result.exit_code == 1
    payload = result.to_dict()
    assert payload["status"] == "fail"
    assert payload["message"] == "value\nshould not be None, but was.\nctx"


def test_check_lets_usage_errors_propagate() -> None:
    with pytest.raises(TypeError):
        check(lambda: should(0.1).should_be(0.1))


def test_compare_text_labels_both_operands() -> None:
    result = shouldkit.compare_text(
        "foobarbaz",
        "foobarqux",
        expected_expr="golden",
        actual_expr="rendered",
    )

    assert isinstance(result, AssertionResult)
    assert result.passed is False
    assert result.message.split("\n") == [
        "rendered",
        "should be golden",
        '          "foobarbaz"',
        'but was   "foobarqux"',
        " " * 17 + "^",
        "Difference at index 6.",
    ]


def test_compare_text_match() -> None:
    assert shouldkit.compare_text("same", "same").passed is True


def test_compare_files_uses_paths_as_labels(tmp_path: Path) -> None:
    expected = tmp_path / "expected.txt"
    actual = tmp_path / "actual.txt"
    expected.write_text("line one\nline two\n", encoding="utf-8")
    actual.write_text("line one\nline 2\n", encoding="utf-8")

    result = shouldkit.compare_files(expected, actual, message="golden drift")

    lines = result.message.split("\n")
    assert result.passed is False
    assert lines[0] == str(actual)
    assert lines[1] == f"should be {expected}"
    assert lines[-2] == "Length differs: expected 18 characters, but was 16."
    assert lines[-1] == "golden drift"


def test_compare_files_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        shouldkit.compare_files(tmp_path / "missing.txt", tmp_path / "other.txt")
