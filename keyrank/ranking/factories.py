"""Module implementing factory methods of Textrank objects.

The functions in this module return the default rankers for
words (co-reference window) and for ngrams (lexical overlap).
"""

from keyrank.ranking.strategies import CoreferenceWindowStrategy, LexicalOverlapStrategy, SIMILARITY_THRESHOLD, \
    WINDOW_SIZE
from keyrank.ranking.textrank import Textrank


def default_keyword_textrank(window_size: int = WINDOW_SIZE) -> Textrank:
    """Factory method returning the Textrank ranking single words.
    
    Args:
        window_size: The distance in words considered a co-reference.
    Returns:
        The corresponding Textrank.
    """
    return Textrank(CoreferenceWindowStrategy(window_size))


def default_ngram_textrank(threshold: float = SIMILARITY_THRESHOLD) -> Textrank:
    """Factory method returning the Textrank ranking ngrams.
    
    Args:
        threshold: The similarity from which two ngrams are linked.
    Returns:
        The corresponding Textrank.
    """
    return Textrank(LexicalOverlapStrategy(threshold))
