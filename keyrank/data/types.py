"""Module implementing type aliases for enhanced readability.

The type aliases in this module are used for typing purposes
as well as for a gain in readability of the code.
"""

import os
from typing import Any, Callable, Dict, List, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from keyrank.data.terms import Term

# dataset types
Data = Dict[str, Any]
FilePath = Union[str, bytes, os.PathLike]

# term types
Position = Tuple[int, int]  # (sentence index, term index)
Sentence = List['Term']
Document = List[Sentence]
Ngram = List['Term']
Keyword = str

BaseFilter = Callable[[Document], Document]
BaseGenerator = Callable[[Document], List[Ngram]]

# ranking types
VertexId = int
TokenVector = List[VertexId]
Transform = Callable[[Ngram], str]

ScoredTerm = Tuple[str, float]
ScoredResult = List[ScoredTerm]

# evaluation types
Target = Prediction = str
BaseScorer = Callable[[Target, Prediction], float]
Corpus = List[List[str]]
