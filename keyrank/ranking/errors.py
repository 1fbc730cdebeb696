"""Module implementing the exceptions raised by the ranking engine."""


class InvalidSpanError(ValueError):
    """Raised when a vertex is backed by an ngram without terms."""
