"""Module implementing factory methods for the preprocessing objects."""

from keyrank.data.preprocessing.constants import IGNORE_TAGS, STOP_WORDS
from keyrank.data.preprocessing.filters import TermFilter
from keyrank.data.preprocessing.ngrams import NgramGenerator


def default_term_filter() -> TermFilter:
    """Creates the default TermFilter, removing English stop words and ignored tags."""
    return TermFilter(STOP_WORDS, IGNORE_TAGS)


def default_ngram_generator(min_size: int = 2, max_size: int = 5) -> NgramGenerator:
    """Creates the default NgramGenerator.

    Args:
        min_size: The smallest allowed ngram length.
        max_size: The largest allowed ngram length.
    Returns:
        The corresponding NgramGenerator.
    """
    return NgramGenerator(min_size, max_size)
