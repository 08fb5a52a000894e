import pytest

from minish.environment import Environment, is_valid_key


ENTRIES = ["PATH=/bin:/usr/bin", "HOME=/home/user", "EMPTY=", "EQ=a=b"]


def test_from_strings_round_trip():
    env = Environment.from_strings(ENTRIES)
    assert env.to_list() == ENTRIES


def test_value_split_on_first_equal():
    env = Environment.from_strings(ENTRIES)
    assert env.get("EQ") == "a=b"
    assert env.get("EMPTY") == ""


def test_entry_without_equal_raises():
    with pytest.raises(ValueError):
        Environment.from_strings(["NOEQUAL"])


def test_get_missing_is_none():
    env = Environment.from_strings(ENTRIES)
    assert env.get("MISSING") is None
    assert env.exists("MISSING") is False
    assert env.exists("HOME") is True


def test_set_updates_in_place_and_appends_new():
    env = Environment.from_strings(ENTRIES)
    env.set("HOME", "/root")
    env.set("NEW", "1")
    assert env.to_list() == [
        "PATH=/bin:/usr/bin",
        "HOME=/root",
        "EMPTY=",
        "EQ=a=b",
        "NEW=1",
    ]


def test_unset_removes_and_reports():
    env = Environment.from_strings(ENTRIES)
    assert env.unset("HOME") is True
    assert env.get("HOME") is None
    assert env.unset("HOME") is False
    assert len(env) == len(ENTRIES) - 1


def test_sorted_entries():
    env = Environment.from_strings(ENTRIES)
    assert env.sorted_entries() == sorted(ENTRIES)
    assert env.to_list() == ENTRIES


def test_format_lines():
    env = Environment.from_strings(["A=1", "B=2"])
    assert env.format() == "A=1\nB=2\n"


def test_empty_environment():
    env = Environment()
    assert env.to_list() == []
    assert env.format() == ""
    assert env.sorted_entries() == []


def test_contains_and_iteration():
    env = Environment.from_strings(ENTRIES)
    assert "PATH" in env
    assert list(env) == ["PATH", "HOME", "EMPTY", "EQ"]


@pytest.mark.parametrize(
    "key, expected",
    [
        ("HOME", True),
        ("_under", True),
        ("a1_b2", True),
        ("", False),
        (None, False),
        ("1abc", False),
        ("a-b", False),
        ("a b", False),
        ("é", False),
    ],
)
def test_is_valid_key(key, expected):
    assert is_valid_key(key) is expected