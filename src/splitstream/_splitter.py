"""Incremental sentence splitter for text that arrives in arbitrary chunks."""

from __future__ import annotations

import logging
import re
from collections import deque
import string
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable

from ._chars import (
    is_abbreviation,
    is_sentence_terminator,
    is_trailing_char,
    token_at,
    update_stack,
)
from ._errors import StreamClosedError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)

# Digits alone on their line: "12." is a list marker, not a sentence.
_LIST_MARKER_RE = re.compile(r"(?:^|\n)[0-9]+\Z")
# Comma tolerated in place of the colon ("https,//").
_URL_SCHEME_RE = re.compile(r"https?[,:]//")
_INITIALS_RE = re.compile(r"(?:[A-Za-z]\.)+")
_ELLIPSES = ("...", "…")

_ASCII_UPPER = frozenset(string.ascii_uppercase)
_ASCII_LOWER = frozenset(string.ascii_lowercase)


class SentenceStream:
    """Accumulates streamed text and emits complete sentences.

    Every ``push`` re-scans the unfinalized buffer, so the way text is
    chunked never changes the result. A boundary is only confirmed once the
    next non-whitespace character has arrived (and, for a terminator glued to
    the following word, once that word is complete); until then the tail
    stays buffered. ``close`` settles those last decisions and flushes
    whatever is left.

    Example:
        sentences = []
        stream = SentenceStream(sentences.append)
        stream.push("Dr. Smith is ", "here. At 10")   # -> ["Dr. Smith is here."]
        stream.push(" a.m. I saw him.")              # nothing new yet
        stream.close()                               # -> [..., "At 10 a.m. I saw him."]
    """

    __slots__ = (
        "_callback", "_options", "_buffer", "_closed", "_ready", "_draining",
    )

    def __init__(
        self,
        callback: Callable[[str], object],
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._callback = callback
        self._options = MappingProxyType(dict(options or {}))
        if self._options:
            logger.debug("Ignoring unrecognized options: %s", list(self._options))
        self._buffer = ""
        self._closed = False
        # Sentences found but not yet handed to the callback, oldest first.
        self._ready: deque[str] = deque()
        self._draining = False

    @property
    def options(self) -> Mapping[str, Any]:
        """Read-only copy of the options given at construction."""
        return self._options

    @property
    def pending(self) -> str:
        """Text received but not yet emitted as a sentence.

        Whitespace left after the last boundary is kept as received.
        """
        return self._buffer

    @property
    def closed(self) -> bool:
        """True once ``close`` has been called."""
        return self._closed

    def push(self, *chunks: str) -> None:
        """Append each chunk in order, emitting any sentences it completes.

        Raises:
            StreamClosedError: If the stream was already closed.
        """
        if self._closed:
            raise StreamClosedError("Cannot push text into a closed stream")
        for chunk in chunks:
            self._buffer += chunk
            self._process()

    def close(self) -> None:
        """Flush the remaining buffer as a final sentence. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        # Tokens that ran up to the end of the buffer are complete now.
        self._process(final=True)
        remainder = self._buffer.strip()
        self._buffer = ""
        if remainder:
            logger.debug("Flushing %d trailing chars on close", len(remainder))
            self._ready.append(remainder)
        self._drain()

    def __enter__(self) -> SentenceStream:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _process(self, final: bool = False) -> None:
        buffer = self._buffer
        length = len(buffer)
        flush_index = 0
        stack: list[str] = []
        sentences: list[str] = []
        i = 0

        while i < length:
            c = buffer[i]
            update_stack(c, stack, i, buffer)

            # Only a terminator outside quotes and brackets can end a sentence.
            if stack or not is_sentence_terminator(c):
                i += 1
                continue

            if _LIST_MARKER_RE.search(buffer[flush_index:i]):
                i += 1
                continue

            # Swallow "?!", "...", "。。" and closing quotes/brackets after them.
            j = i
            while j + 1 < length and is_sentence_terminator(buffer[j + 1]):
                j += 1
            while j + 1 < length and is_trailing_char(buffer[j + 1]):
                j += 1

            n = j + 1
            while n < length and buffer[n].isspace():
                n += 1

            # Glued to the next character: $9.99, U.S.A, file.txt
            if n == i + 1:
                i += 1
                continue

            # Nothing after the whitespace yet, so the boundary can't be proven.
            if n == length:
                logger.debug("Deferring at offset %d until more text arrives", i)
                break

            token_start = i - 1
            while token_start >= 0 and not buffer[token_start].isspace():
                token_start -= 1
            token_start = max(flush_index, token_start + 1)
            token = token_at(buffer, token_start)

            # "a!?b@..." may still grow into an address; decide once it can't.
            if not final and token_start + len(token) == length:
                break

            # Inside a URL or email address: jump past the whole token.
            if _URL_SCHEME_RE.search(token) or "@" in token:
                if not is_sentence_terminator(token[-1:]):
                    i = max(i + 1, token_start + len(token))
                    continue

            if is_abbreviation(token):
                i += 1
                continue

            following = buffer[n]

            # J.R.R. Tolkien
            if _INITIALS_RE.fullmatch(token) and following in _ASCII_UPPER:
                i += 1
                continue

            if c == "." and following in _ASCII_LOWER:
                i += 1
                continue

            sentence = buffer[flush_index:j + 1].strip()

            # A lone leading ellipsis belongs to the sentence after it.
            if sentence in _ELLIPSES:
                i += 1
                continue

            if sentence:
                sentences.append(sentence)
            i = flush_index = j + 1

        self._buffer = buffer[flush_index:]

        if sentences:
            logger.debug(
                "Emitting %d sentence(s), %d chars pending",
                len(sentences), len(self._buffer),
            )
        self._ready.extend(sentences)
        self._drain()

    def _drain(self) -> None:
        # A callback that pushes again only queues; the outermost call delivers.
        if self._draining:
            return
        self._draining = True
        try:
            while self._ready:
                self._callback(self._ready.popleft())
        finally:
            self._draining = False


def split(text: str) -> list[str]:
    """Split a complete text into trimmed sentences."""
    sentences: list[str] = []
    stream = SentenceStream(sentences.append)
    stream.push(text)
    stream.close()
    return sentences


def iter_sentences(chunks: Iterable[str]) -> Iterator[str]:
    """Yield sentences from a chunk iterable as soon as each one is complete.

    The remainder is yielded once ``chunks`` is exhausted. Suited to
    token streams, where sentences should be handed on before the stream ends.
    """
    ready: list[str] = []
    stream = SentenceStream(ready.append)
    for chunk in chunks:
        stream.push(chunk)
        if ready:
            yield from ready
            ready.clear()
    stream.close()
    yield from ready
