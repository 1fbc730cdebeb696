"""Module implementing the TermFilter class.

The TermFilter object removes stop words and terms carrying
unwanted tags (numbers, function words, web markup) from a
tagged document.
"""

from dataclasses import dataclass
from typing import AbstractSet

from keyrank.data.terms import Term
from keyrank.data.types import Document


@dataclass
class TermFilter:
    stop_words: AbstractSet[str]
    ignore_tags: AbstractSet[str]

    """A callable term filter.
    
    Attributes:
        stop_words: The normal forms or roots to be removed.
        ignore_tags: The tags whose terms are to be removed.
    """

    def keep(self, term: Term) -> bool:
        """Whether `term` survives the filter."""
        if term.root and term.root in self.stop_words:
            return False
        if term.normal in self.stop_words:
            return False
        return not any(tag in self.ignore_tags for tag in term.tags)

    def filter(self, document: Document) -> Document:
        """Removes unwanted terms from every sentence of document.
        
        Sentences are never merged, so that ngrams generated
        afterwards do not cross sentence boundaries.
        
        Args:
            document: The tagged document.
        Returns:
            The filtered document, with the same number of sentences.
        """
        return [[term for term in sentence if self.keep(term)] for sentence in document]

    def __call__(self, document: Document) -> Document:
        """Removes unwanted terms from every sentence of document,
        equivalent to self.filter(document).
        """
        return self.filter(document)
