"""Module implementing parsers to convert from the `Data` to a suitable format.

The classes defined in this module are used by the app for
converting a document loaded in the `Data` format to the
tagged document and the annotated keywords it needs.
"""

from dataclasses import dataclass
from typing import List

from keyrank.data.terms import Term
from keyrank.data.types import Data, Document, Keyword


@dataclass
class SentenceParser:
    field: str = 'sentences'

    """Parses the tagged sentences of a document.
    
    The field is expected to hold a list of sentences, each of
    them a list of term mappings (see `Term.from_data`). Terms
    lacking a position are given their (sentence, term) index.
    
    Attributes:
        field: The name of the sentences field within the data.
    """

    def parse(self, data: Data) -> Document:
        """Parses `data` into a document of type `Document`.
        
        Args:
            data: The data to be parsed i.e a dictionary with string keys.
            
        Returns:
            The document as type `Document=List[List[Term]]`.
        """
        document = []
        for i, sentence in enumerate(data[self.field]):
            terms = []
            for j, term in enumerate(sentence):
                if term.get('index') is None:
                    term = {**term, 'index': (i, j)}
                terms.append(Term.from_data(term))
            document.append(terms)
        return document

    def __call__(self, data: Data) -> Document:
        return self.parse(data)


@dataclass
class KeywordsParser:
    field: str = 'keywords'

    """Parses the annotated keywords of a document, if any.
    
    Attributes:
        field: The name of the keywords field within the data.
    """

    def parse(self, data: Data) -> List[Keyword]:
        """Returns the annotated keywords, an empty list when the field is absent."""
        return list(data.get(self.field) or [])

    def __call__(self, data: Data) -> List[Keyword]:
        return self.parse(data)
