"""Module implementing the Textrank class.

Implementation of the TextRank algorithm, see Mihalcea, R. and
Tarau, P. (2004), TextRank: Bringing Order into Texts. The
strategy decides whether words (co-references) or ngrams
(similarity) are ranked.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from keyrank.data.types import Document, Ngram, ScoredResult
from keyrank.ranking.finalizer import ResultFinalizer, sort_vertices
from keyrank.ranking.graph import GraphBuilder, TermGraph
from keyrank.ranking.scorer import ScoreIterator
from keyrank.ranking.strategies import Strategy
from keyrank.ranking.vertex import Vertex

logger = logging.getLogger(__name__)


@dataclass
class Textrank:
    strategy: Strategy
    scorer: ScoreIterator = field(default_factory=ScoreIterator)
    finalizer: ResultFinalizer = field(default_factory=ResultFinalizer)

    """The ranking pipeline: build, collect, score and finalize.
    
    Every call works on a graph of its own, nothing is kept
    between calls.
    
    Attributes:
        strategy: The edge collection strategy.
        scorer: The score iterator.
        finalizer: The result finalizer.
    """

    def graph(self, ngrams: List[Ngram]) -> TermGraph:
        """Builds the scored term graph of ngrams.
        
        Args:
            ngrams: The ordered candidate spans.
        Returns:
            The graph, its edges collected and its vertices scored.
        """
        graph = GraphBuilder(self.strategy.transform)(ngrams)
        self.strategy.collect(graph)
        logger.debug('collected %d edges with %s', graph.G.number_of_edges(), type(self.strategy).__name__)
        self.scorer(graph)
        return graph

    def extract(self, ngrams: List[Ngram]) -> List[Vertex]:
        """Returns the scored vertices of ngrams by descending score."""
        return sort_vertices(self.graph(ngrams).vertices)

    def rank(self, ngrams: List[Ngram], document: Optional[Document] = None) -> ScoredResult:
        """Ranks ngrams.
        
        Args:
            ngrams: The ordered candidate spans.
            document: The unfiltered tagged document the spans come
                from, used to display multi-word spans.
        Returns:
            The deduplicated (text, score) pairs by descending score.
        """
        return self.finalizer(self.graph(ngrams).vertices, document)

    def __call__(self, ngrams: List[Ngram], document: Optional[Document] = None) -> ScoredResult:
        """Ranks ngrams, equivalent to self.rank(ngrams, document)."""
        return self.rank(ngrams, document)
