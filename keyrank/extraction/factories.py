"""Module implementing factory methods of keyword extractors."""

from keyrank.data.preprocessing.factories import default_ngram_generator, default_term_filter
from keyrank.extraction.extractor import KeywordExtractor
from keyrank.ranking.factories import default_keyword_textrank, default_ngram_textrank
from keyrank.ranking.strategies import SIMILARITY_THRESHOLD, WINDOW_SIZE


def default_keyword_extractor(window_size: int = WINDOW_SIZE) -> KeywordExtractor:
    """Creates the default extractor of single word keywords.
    
    Args:
        window_size: The distance in words considered a co-reference.
    Returns:
        The corresponding KeywordExtractor.
    """
    return KeywordExtractor(default_term_filter(), default_keyword_textrank(window_size))


def default_ngram_extractor(min_size: int = 2, max_size: int = 5,
                            threshold: float = SIMILARITY_THRESHOLD) -> KeywordExtractor:
    """Creates the default extractor of keyphrases.
    
    Args:
        min_size: The smallest allowed ngram length.
        max_size: The largest allowed ngram length.
        threshold: The similarity from which two ngrams are linked.
    Returns:
        The corresponding KeywordExtractor.
    """
    return KeywordExtractor(
        default_term_filter(), default_ngram_textrank(threshold), default_ngram_generator(min_size, max_size)
    )
