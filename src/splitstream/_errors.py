"""splitstream error types."""


class SplitStreamError(Exception):
    """Base error for all splitstream failures."""


class StreamClosedError(SplitStreamError):
    """Text pushed into a stream that was already closed."""
