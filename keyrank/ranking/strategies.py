"""Module implementing the edge collection strategies.

The strategy decides how a span is canonicalized and how the
edges of the term graph are weighted: single words are linked
to the words following them within a small window, ngrams are
linked to the ngrams they share words with. Graph creation,
scoring and sorting are the same for both.
"""

import itertools as it
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Union

from keyrank.data.types import Ngram
from keyrank.ranking.graph import TermGraph

WINDOW_SIZE = 2
SIMILARITY_THRESHOLD = .1


class ExtractionStrategy(ABC):
    """Base class of the two edge collection policies."""

    @abstractmethod
    def transform(self, ngram: Ngram) -> str:
        """Returns the canonical text key of ngram."""

    @abstractmethod
    def collect(self, graph: TermGraph):
        """Adds the edges and their weights to graph, in place."""


@dataclass
class CoreferenceWindowStrategy(ExtractionStrategy):
    window_size: int = WINDOW_SIZE

    """Ranks individual terms using co-references.
    
    Every word is linked to the words occurring within
    `window_size` positions after it; repeated co-occurrences
    strengthen the edge, so that weights approximate the local
    co-occurrence frequency.
    
    Attributes:
        window_size: The distance in words considered a co-reference.
    """

    def __post_init__(self):
        if self.window_size < 1:
            raise ValueError(f'window_size must be positive, got {self.window_size}')

    def transform(self, ngram: Ngram) -> str:
        return ngram[0].normal

    def collect(self, graph: TermGraph):
        """Collects the co-references of each position of the token vector.
        
        Args:
            graph: The term graph, modified in place.
        """
        tokens = graph.token_vec
        for i, source in enumerate(tokens):
            for target in tokens[i + 1:i + 1 + self.window_size]:
                graph.add_weight(source, target)


@dataclass
class LexicalOverlapStrategy(ExtractionStrategy):
    threshold: float = SIMILARITY_THRESHOLD

    """Ranks ngrams using the amount of word overlap between them.
    
    Co-occurrences cannot be applied to multi-word spans, so
    two spans are linked when their normalized overlap reaches
    `threshold`, the edge weight being the overlap itself.
    
    Attributes:
        threshold: The similarity from which two spans are linked.
    """

    def __post_init__(self):
        if self.threshold < 0:
            raise ValueError(f'threshold must not be negative, got {self.threshold}')

    def transform(self, ngram: Ngram) -> str:
        return ' '.join(term.normal for term in ngram)

    @staticmethod
    def similarity(a: Sequence[str], b: Sequence[str]) -> float:
        """Calculates the normalized overlap between two spans.
        
        The overlap is the number of distinct words of `a` also
        found in `b`, divided by the sum of the logarithms of the
        lengths of the spans. Two single word spans have a null
        denominator, their similarity is then 0.
        
        Args:
            a: The words of the first span.
            b: The words of the second span.
        Returns:
            The normalized similarity.
        """
        denominator = math.log(len(a)) + math.log(len(b))
        if denominator == 0:
            return 0.
        return len(set(a) & set(b)) / denominator

    def collect(self, graph: TermGraph):
        """Collects the similar spans of every position of the token vector.
        
        Every ordered pair of distinct positions whose spans are
        similar enough adds one link; the weight is overwritten with
        the similarity, not accumulated. Positions holding the same
        span share their vertex and are not linked, which rules out
        self-loops.
        
        Args:
            graph: The term graph, modified in place.
        """
        words = [vertex.val.split(' ') for vertex in graph.vertices]
        similarities = {}
        for a, b in it.permutations(graph.token_vec, 2):
            if a == b:
                continue
            if (a, b) not in similarities:
                similarities[a, b] = self.similarity(words[a], words[b])
            if similarities[a, b] >= self.threshold:
                graph.set_weight(a, b, similarities[a, b])


Strategy = Union[CoreferenceWindowStrategy, LexicalOverlapStrategy]
