"""Module implementing the KeywordExtractor class.

The extractor chains the preprocessing and the ranking of a
tagged document: unwanted terms are filtered out, the remaining
ones are turned into spans and the spans are ranked.
"""

from dataclasses import dataclass
from typing import List, Optional

from keyrank.data.preprocessing.ngrams import unigrams
from keyrank.data.types import BaseFilter, BaseGenerator, Document, Ngram, ScoredResult
from keyrank.ranking.textrank import Textrank


@dataclass
class KeywordExtractor:
    term_filter: BaseFilter
    textrank: Textrank
    generator: Optional[BaseGenerator] = None

    """Extracts ranked keywords or keyphrases from a tagged document.
    
    Attributes:
        term_filter: Removes the terms not worth ranking.
        textrank: The ranker of the spans.
        generator: Turns the filtered document into ngrams, when
            None every term is ranked as a span of its own.
    """

    def spans(self, document: Document) -> List[Ngram]:
        """Returns the candidate spans of document."""
        filtered = self.term_filter(document)
        if self.generator is None:
            return unigrams(filtered)
        return self.generator(filtered)

    def extract(self, document: Document, limit: Optional[int] = None) -> ScoredResult:
        """Ranks the candidate spans of document.
        
        Args:
            document: The tagged document.
            limit: The maximum number of results, all when None.
        Returns:
            The (text, score) pairs by descending score.
        """
        ranked = self.textrank(self.spans(document), document)
        if limit is not None:
            ranked = ranked[:limit]
        return ranked

    def __call__(self, document: Document, limit: Optional[int] = None) -> ScoredResult:
        """Ranks the candidate spans of document, equivalent to self.extract(document, limit)."""
        return self.extract(document, limit)
