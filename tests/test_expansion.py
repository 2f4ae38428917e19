import pytest

from minishell.environment import Environment, Shell
from minishell.expansion import (
    expand_array,
    expand_str,
    is_varstart,
    next_quote,
    next_var,
    next_word,
)


@pytest.fixture
def shell():
    env = Environment([("HOME", "/home/user"), ("PAIR", "one two"), ("EMPTY", None)])
    return Shell(env=env, status=7)


@pytest.mark.parametrize("char,expected", [("a", True), ("_", True), ("?", True), ("1", False), ("$", False), ("", False)])
def test_is_varstart(char, expected):
    assert is_varstart(char) is expected


def test_next_word_stops_at_space():
    text = "ab cd"
    assert next_word(text, 0) == text.index(" ")
    assert next_word(text, 3) == len(text)


def test_next_var_reference_and_plain_run():
    text = "$HOME/x"
    assert next_var(text, 0) == len("$HOME")
    text = "ab$HOME"
    assert next_var(text, 0) == text.index("$")


def test_next_var_status_and_invalid_start():
    assert next_var("$?x", 0) == len("$?")
    assert next_var("$1", 0) == len("$1")


def test_next_quote_segments():
    text = "'a b'c"
    assert next_quote(text, 0) == text.index("c")
    text = "ab'c'"
    assert next_quote(text, 0) == text.index("'")
    assert next_quote("'abc", 0) == len("'abc")


def test_expand_plain_variable(shell):
    assert expand_str("$HOME", shell) == ["/home/user"]


def test_expand_status(shell):
    assert expand_str("$?", shell) == [str(shell.status)]


def test_single_quotes_are_literal(shell):
    assert expand_str("'$HOME'", shell) == ["$HOME"]


def test_double_quotes_keep_one_word(shell):
    assert expand_str('"$PAIR x"', shell) == ["one two x"]


def test_unquoted_value_is_split(shell):
    assert expand_str("$PAIR", shell) == ["one", "two"]


def test_unquoted_whitespace_split(shell):
    assert expand_str("a  b", shell) == ["a", "b"]


def test_unset_variable_vanishes_unquoted(shell):
    assert expand_str("$NOPE", shell) == []
    assert expand_str("$EMPTY", shell) == []


def test_unset_variable_quoted_gives_empty_word(shell):
    assert expand_str('"$NOPE"', shell) == [""]


def test_segments_give_separate_words(shell):
    assert expand_str("a'b'", shell) == ["a", "b"]


def test_expand_str_rejects_none(shell):
    with pytest.raises(TypeError):
        expand_str(None, shell)


def test_expand_array_concatenates(shell):
    words = ["$HOME", "'x y'", "$PAIR"]
    expected = []
    for word in words:
        expected.extend(expand_str(word, shell))
    assert expand_array(words, shell) == expected
    assert expand_array([], shell) == []