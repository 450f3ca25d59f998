from shouldpack.diff import (
    ELLIPSES,
    build_snippet,
    element_listing,
    get_snippet,
    pointer,
    select_first_few,
    string_snippets,
    tail_snippet,
)

_DIGITS = "0123456789" * 10


def test_short_string_is_not_truncated() -> None:
    snippet = build_snippet("abcdef", 0, 60)

    assert snippet.text == "abcdef"
    assert snippet.truncated is False


def test_long_string_gets_trailing_marker_only() -> None:
    snippet = build_snippet(_DIGITS, 0, 20)

    assert snippet.text == "01234567890123456..."
    assert len(snippet.text) == 20
    assert snippet.truncated_start is False
    assert snippet.truncated_end is True


def test_window_in_the_middle_gets_both_markers_and_keeps_columns_aligned() -> None:
    snippet = build_snippet(_DIGITS, 30, 20)

    assert snippet.text == "...34567890123456..."
    assert len(snippet.text) == 20
    assert snippet.text[3] == _DIGITS[33]
    assert snippet.to_dict() == {
        "text": "...34567890123456...",
        "offset": 30,
        "truncated_start": True,
        "truncated_end": True,
    }


def test_window_reaching_the_end_has_leading_marker_only() -> None:
    snippet = build_snippet(_DIGITS, 90, 20)

    assert snippet.text == "...3456789"
    assert snippet.truncated_start is True
    assert snippet.truncated_end is False


def test_out_of_range_offsets_are_clamped() -> None:
    assert get_snippet("abc", -5, 60) == "abc"
    assert get_snippet("abc", 500, 60) == ELLIPSES


def test_tail_snippet_shows_the_end_of_the_string() -> None:
    assert tail_snippet("short", 60) == "short"
    assert tail_snippet(_DIGITS, 20) == "...34567890123456789"


def test_string_snippets_point_at_first_divergence() -> None:
    snippets = string_snippets("foobarbaz", "foobarqux", 6)

    assert snippets.offset == 0
    assert snippets.expected.text == "foobarbaz"
    assert snippets.actual.text == "foobarqux"
    assert snippets.arrow == "      ^"


def test_string_snippets_window_far_divergence() -> None:
    expected = "x" * 50 + "A" + "y" * 30
    actual = "x" * 50 + "B" + "y" * 30

    snippets = string_snippets(expected, actual, 50)

    assert snippets.offset == 30
    assert snippets.actual.text.startswith(ELLIPSES)
    assert len(snippets.actual.text) <= 60
    assert snippets.arrow == " " * 20 + "^"
    assert snippets.actual.text[20] == "B"
    assert snippets.expected.text[20] == "A"


def test_pointer_shifts_once_per_escaped_character() -> None:
    assert pointer("abc", 2) == "  ^"
    assert pointer("a\nbc", 3) == "    ^"
    assert pointer("\r\n\r\nx", 4) == "        ^"
    assert pointer("abc", -3) == "^"


def test_select_first_few_replaces_the_overflow_item() -> None:
    assert select_first_few(2, [1, 2, 3, 4], str, "...") == ["1", "2", "..."]
    assert select_first_few(3, [1, 2, 3], str, "...") == ["1", "2", "3"]
    assert select_first_few(3, [], str, "...") == []


def test_element_listing_limits_and_marks_truncation() -> None:
    assert element_listing([1, 2, 3, 4, 5], 3) == (
        "[\n    <1>,\n    <2>,\n    <3>,\n    ...\n]"
    )
    assert element_listing(["a", "b"], 3) == "[\n    <a>,\n    <b>\n]"
    assert element_listing([1, 2], 3, newline="\r\n") == "[\r\n    <1>,\r\n    <2>\r\n]"


def test_small_widths_never_overflow_the_window() -> None:
    whole = "abcdefghijklmnopqrst"

    for max_width in range(8):
        for from_index in (0, 1, 5, 19, 30):
            snippet = build_snippet(whole, from_index, max_width)
            assert len(snippet.text) <= max_width, (max_width, from_index, snippet.text)


def test_markers_are_dropped_when_there_is_no_room_for_them() -> None:
    assert get_snippet("abcdefghijklmnopqrst", 1, 2) == "bc"
    assert get_snippet("abcdefghijklmnopqrst", 1, 5) == "...ef"
    assert get_snippet("abcdefghijklmnopqrst", 0, 3) == "abc"
    assert get_snippet("abcdefghijklmnopqrst", 1, 7) == "...e..."

    clipped = build_snippet("abcdefghijklmnopqrst", 1, 2)
    assert clipped.truncated_start is True
    assert clipped.truncated_end is True
