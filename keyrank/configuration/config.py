"""Module implementing the utility class Config."""

from dataclasses import dataclass
from typing import Optional

from keyrank.extraction.extractor import KeywordExtractor
from keyrank.extraction.factories import default_keyword_extractor, default_ngram_extractor
from keyrank.ranking.strategies import SIMILARITY_THRESHOLD, WINDOW_SIZE

MODES = ('keywords', 'ngrams')


@dataclass
class Config:
    mode: str = 'keywords'
    window_size: int = WINDOW_SIZE
    threshold: float = SIMILARITY_THRESHOLD
    min_size: int = 2
    max_size: int = 5
    limit: Optional[int] = None
    evaluate: bool = False
    sentences_field: str = 'sentences'
    keywords_field: str = 'keywords'
    output_field: str = 'textrank'
    log_path: Optional[str] = None

    """Utility class for ranking documents.
    
    Attributes:
        mode: Either 'keywords' (single words ranked by
            co-reference) or 'ngrams' (spans ranked by overlap).
        window_size: The co-reference window of the keywords mode.
        threshold: The similarity threshold of the ngrams mode.
        min_size: The smallest ngram length of the ngrams mode.
        max_size: The largest ngram length of the ngrams mode.
        limit: The maximum number of results kept per document.
        evaluate: Whether or not to match results with the
            annotated keywords of the document.
        sentences_field: The field holding the tagged sentences.
        keywords_field: The field holding the annotated keywords.
        output_field: The field the ranking is written to.
        log_path: The file used to log processed documents.
    """

    def __post_init__(self):
        """Validates the ranking mode."""
        if self.mode not in MODES:
            raise ValueError(f'unknown mode {self.mode!r}, expected one of {MODES}')
        if self.limit is not None and self.limit < 0:
            raise ValueError(f'limit must not be negative, got {self.limit}')

    def extractor(self) -> KeywordExtractor:
        """Creates the KeywordExtractor described by the configuration."""
        if self.mode == 'keywords':
            return default_keyword_extractor(self.window_size)
        return default_ngram_extractor(self.min_size, self.max_size, self.threshold)
