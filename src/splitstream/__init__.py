"""splitstream: incremental sentence splitting for streamed text."""

from __future__ import annotations

from ._abbreviations import ABBREVIATIONS
from ._errors import SplitStreamError, StreamClosedError
from ._splitter import SentenceStream, iter_sentences, split

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ABBREVIATIONS",
    "SentenceStream",
    "SplitStreamError",
    "StreamClosedError",
    "iter_sentences",
    "split",
]
