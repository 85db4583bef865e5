"""Character classification tables and the small predicates built on them.

Whitespace everywhere means ``str.isspace``: U+001C..U+001F count as
whitespace and U+FEFF (zero-width no-break space) does not.
"""

from __future__ import annotations

import re
import string

from ._abbreviations import ABBREVIATIONS

# Newline counts as a terminator: a blank line ends a sentence.
TERMINATORS: frozenset[str] = frozenset(".!?…。？！\n")

# Closing quotes and brackets that stick to the terminator before them.
TRAILING_CHARS: frozenset[str] = frozenset("\"')]}」』")

QUOTES: frozenset[str] = frozenset("\"'")

# closer -> opener
MATCHING: dict[str, str] = {
    ")": "(",
    "]": "[",
    "}": "{",
    "》": "《",
    "〉": "〈",
    "›": "‹",
    "»": "«",
    "」": "「",
    "』": "『",
}

OPENING: frozenset[str] = frozenset(MATCHING.values())

_ASCII_LETTERS = frozenset(string.ascii_letters)
_POSSESSIVE_RE = re.compile(r"['’]s$", re.IGNORECASE)
_TRAILING_DOTS_RE = re.compile(r"\.+$")


def is_sentence_terminator(c: str) -> bool:
    return c in TERMINATORS


def is_trailing_char(c: str) -> bool:
    return c in TRAILING_CHARS


def update_stack(c: str, stack: list[str], i: int, text: str) -> None:
    """Track quotes and paired brackets for the character at ``text[i]``.

    Quotes toggle, openers push, and a closer pops only when it matches the
    top of the stack; a stray closer is ignored. An apostrophe with a letter
    on each side is part of a word (``can't``) and leaves the stack alone.
    """
    if c in QUOTES:
        if (
            c == "'"
            and 0 < i < len(text) - 1
            and text[i - 1] in _ASCII_LETTERS
            and text[i + 1] in _ASCII_LETTERS
        ):
            return
        if stack and stack[-1] == c:
            stack.pop()
        else:
            stack.append(c)
        return
    if c in OPENING:
        stack.append(c)
        return
    opener = MATCHING.get(c)
    if opener is not None and stack and stack[-1] == opener:
        stack.pop()


def token_at(text: str, start: int) -> str:
    """Return the run of non-whitespace characters beginning at ``start``."""
    end = start
    while end < len(text) and not text[end].isspace():
        end += 1
    return text[start:end]


def is_abbreviation(token: str) -> bool:
    """Check a token (possessive and trailing periods allowed) against ABBREVIATIONS."""
    token = _POSSESSIVE_RE.sub("", token)
    token = _TRAILING_DOTS_RE.sub("", token)
    return token.lower() in ABBREVIATIONS
