import io

import pytest

from minish.text import (
    count_useless_spaces,
    error_message,
    join3,
    join_with,
    slice_tokens,
    substring,
    trim,
)


def test_trim_worked_example():
    assert trim(" le  monde ") == "le monde"


def test_trim_keeps_first_whitespace_of_run():
    assert trim("a\t  b") == "a\tb"


def test_trim_all_whitespace():
    assert trim(" \t\n ") == ""


@pytest.mark.parametrize(
    "text", ["", "plain", "  lead", "trail  ", " a  b\t\tc \n", " \t "]
)
def test_count_useless_spaces_invariant(text):
    assert count_useless_spaces(text) + len(trim(text)) == len(text)


@pytest.mark.parametrize("text", [" le  monde ", "a\n\n b", "   "])
def test_trim_idempotent(text):
    assert trim(trim(text)) == trim(text)


def test_join_with():
    assert join_with("line", "next", "\n") == "line\nnext"


def test_substring_basic():
    assert substring("hello", 1, 3) == "ell"


def test_substring_clips_length():
    assert substring("hello", 3, 10) == "lo"


def test_substring_out_of_range():
    assert substring("hello", 5, 2) is None
    assert substring("hello", 0, 0) is None


def test_join3():
    assert join3("KEY", "=", "value") == "KEY=value"


def test_slice_tokens_inclusive():
    tokens = ["echo", "a", ">", "f"]
    assert slice_tokens(tokens, 1, 2) == ["a", ">"]
    assert slice_tokens(tokens, 0, 3) == tokens


def test_slice_tokens_is_copy():
    tokens = ["a", "b"]
    part = slice_tokens(tokens, 0, 1)
    part.append("c")
    assert tokens == ["a", "b"]


def test_slice_tokens_out_of_bounds():
    with pytest.raises(IndexError):
        slice_tokens(["a"], 0, 1)


def test_error_message_to_stream():
    buf = io.StringIO()
    error_message("bad thing", buf)
    assert buf.getvalue() == "bad thing\n"


def test_error_message_default_stderr(capsys):
    error_message("oops")
    captured = capsys.readouterr()
    assert captured.err == "oops\n"
    assert captured.out == ""