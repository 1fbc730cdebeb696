"""Module implementing the Term class.

A term is the unit produced by the external linguistic analysis:
the surface text of a token together with its normalized form,
its tags and its position within the document.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from keyrank.data.types import Data, Position


@dataclass(frozen=True)
class Term:
    text: str
    normal: str
    tags: FrozenSet[str] = field(default_factory=frozenset)
    root: Optional[str] = None
    index: Optional[Position] = None

    """A tagged token.
    
    Attributes:
        text: The surface text, as it appears in the document.
        normal: The normalized form used as the ranking key.
        tags: The part-of-speech and entity tags of the term.
        root: The lemma of the term, if known.
        index: The (sentence, term) position of the term, if known.
    """

    @classmethod
    def from_data(cls, data: Data) -> 'Term':
        """Creates a Term from its `json` representation.
        
        Args:
            data: A dictionary with at least the `text` key; `normal`
                defaults to the lower-cased text.
        Returns:
            The corresponding Term.
        """
        text = data['text']
        index = data.get('index')
        return cls(
            text=text,
            normal=data.get('normal') or text.lower(),
            tags=frozenset(data.get('tags') or ()),
            root=data.get('root'),
            index=tuple(index) if index is not None else None
        )
