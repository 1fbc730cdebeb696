"""Module implementing the NgramGenerator class.

The generator slides a window over each sentence and emits
the contiguous spans of terms which are later ranked.
"""

from dataclasses import dataclass
from typing import List

from keyrank.data.types import Document, Ngram


@dataclass
class NgramGenerator:
    min_size: int = 2
    max_size: int = 5

    """Converts sentences into ngrams, isolated to their respective sentences.
    
    For each start position the prefixes of the window of
    `max_size` terms are emitted in increasing length, then
    those shorter than `min_size` are discarded.
    
    Attributes:
        min_size: The smallest allowed ngram length.
        max_size: The largest allowed ngram length.
    """

    def __post_init__(self):
        if self.min_size < 1:
            raise ValueError(f'min_size must be at least 1, got {self.min_size}')
        if self.max_size < self.min_size:
            raise ValueError(f'max_size ({self.max_size}) is smaller than min_size ({self.min_size})')

    def generate(self, document: Document) -> List[Ngram]:
        """Generates the ngrams of document.
        
        Args:
            document: The (filtered) tagged sentences.
        Returns:
            The ngrams in document order.
        """
        ngrams = []
        for sentence in document:
            for i in range(len(sentence)):
                window = sentence[i:i + self.max_size]
                for j in range(len(window)):
                    if j + 1 >= self.min_size:
                        ngrams.append(window[:j + 1])
        return ngrams

    def __call__(self, document: Document) -> List[Ngram]:
        """Generates the ngrams of document, equivalent to self.generate(document)."""
        return self.generate(document)


def unigrams(document: Document) -> List[Ngram]:
    """Turns every term of document into a span of its own."""
    return [[term] for sentence in document for term in sentence]
