"""Quote handling and variable expansion of command words."""

from __future__ import annotations

from minishell.environment import Shell
from minishell.text import is_alnum, is_alpha, is_space, no_skip, skip_space, strtrim, ultra_split

_QUOTES = "'\""


def _is_varchar(c: str) -> bool:
    return is_alnum(c) or c == "_"


def is_varstart(c: str) -> bool:
    """True for a character that may follow ``$`` to start a variable."""
    return is_alpha(c) or c in ("_", "?")


def _var_at(text: str, pos: int) -> bool:
    return text[pos] == "$" and pos + 1 < len(text) and is_varstart(text[pos + 1])


def next_word(text: str, pos: int) -> int:
    """Position of the first whitespace at or after ``pos``, or the end."""
    length = len(text)
    while pos < length and not is_space(text[pos]):
        pos += 1
    return pos


def next_var(text: str, pos: int) -> int:
    """End of the variable reference or the plain run starting at ``pos``.

    A reference is ``$?`` or ``$`` followed by a name; a plain run lasts
    until the next reference or the end of the text.
    """
    length = len(text)
    if pos < length and _var_at(text, pos):
        pos += 1
        if text[pos] == "?":
            return pos + 1
        while pos < length and _is_varchar(text[pos]):
            pos += 1
        return pos
    while pos < length and not _var_at(text, pos):
        pos += 1
    return pos


def next_quote(text: str, pos: int) -> int:
    """End of the quoted or unquoted segment starting at ``pos``.

    A quoted segment ends just past its closing quote, or at the end of the
    text when unterminated; an unquoted one ends before the next quote.
    """
    length = len(text)
    if pos < length and text[pos] in _QUOTES:
        quote = text[pos]
        closing = text.find(quote, pos + 1)
        return length if closing < 0 else closing + 1
    while pos < length and text[pos] not in _QUOTES:
        pos += 1
    return pos


def _expand_piece(piece: str, shell: Shell) -> str:
    if len(piece) < 2 or piece[0] != "$" or not is_varstart(piece[1]):
        return piece
    name = piece[1:]
    if name == "?":
        return str(shell.status)
    return shell.env.get(name) or ""


def _expand_vars(text: str, shell: Shell) -> str:
    return "".join(_expand_piece(piece, shell) for piece in ultra_split(text, no_skip, next_var))


def _expand_segment(segment: str, shell: Shell) -> list[str]:
    if segment[0] == "'":
        return [strtrim(segment, "'")]
    if segment[0] == '"':
        return [_expand_vars(strtrim(segment, '"'), shell)]
    return ultra_split(_expand_vars(segment, shell), skip_space, next_word)


def expand_str(text: str, shell: Shell) -> list[str]:
    """Expand one command word into the words it produces.

    Single-quoted segments are taken literally, double-quoted ones have
    their variables expanded and stay one word, and unquoted ones are
    expanded and then split on whitespace. Each segment yields its own words.
    """
    if text is None or shell is None:
        raise TypeError("expand_str needs a string and a shell")
    words: list[str] = []
    for segment in ultra_split(text, no_skip, next_quote):
        words.extend(_expand_segment(segment, shell))
    return words


def expand_array(words: list[str], shell: Shell) -> list[str]:
    """Expand every word in turn and return all the results in order."""
    expanded: list[str] = []
    for word in words:
        expanded.extend(expand_str(word, shell))
    return expanded