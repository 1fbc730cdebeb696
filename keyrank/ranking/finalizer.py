"""Module implementing the ResultFinalizer class.

The finalizer sorts the scored vertices, recovers the surface
text of the spans they stand for and deduplicates the result.
"""

from typing import List, Optional

from keyrank.data.types import Document, ScoredResult
from keyrank.ranking.errors import InvalidSpanError
from keyrank.ranking.vertex import Vertex


def sort_vertices(vertices: List[Vertex]) -> List[Vertex]:
    """Sorts vertices by descending score, ties kept in id order."""
    return sorted(vertices, key=lambda vertex: -vertex.score)


class ResultFinalizer:
    """Turns scored vertices into an ordered list of (text, score) pairs."""

    @staticmethod
    def surface(vertex: Vertex, document: Optional[Document] = None) -> str:
        """Rebuilds the original text of the span of vertex.
        
        A single term is shown as its surface text; a longer span
        is sliced from the sentence of `document` between the
        positions of its first and last terms, so that words
        filtered out before ranking reappear. When the positions
        cannot be resolved the canonical text is used instead.
        
        Args:
            vertex: The vertex to display.
            document: The unfiltered tagged document.
        Returns:
            The text to display for vertex.
        Raises:
            InvalidSpanError: If the ngram of vertex is empty.
        """
        ngram = vertex.ngram
        if len(ngram) == 0:
            raise InvalidSpanError(f'vertex {vertex.id} ({vertex.val!r}) has an empty ngram')
        if len(ngram) == 1:
            return ngram[0].text
        first, last = ngram[0].index, ngram[-1].index
        if document is None or first is None or last is None:
            return vertex.val
        (line, start), (end_line, end) = first, last
        if line != end_line or not 0 <= line < len(document) or not 0 <= start <= end < len(document[line]):
            return vertex.val
        return ' '.join(term.text for term in document[line][start:end + 1])

    def finalize(self, vertices: List[Vertex], document: Optional[Document] = None) -> ScoredResult:
        """Sorts, displays and deduplicates vertices.
        
        Args:
            vertices: The scored vertices.
            document: The unfiltered tagged document, if available.
        Returns:
            The (text, score) pairs by descending score, each text
            appearing once with its best score.
        """
        scores = {}
        for vertex in sort_vertices(vertices):
            scores.setdefault(self.surface(vertex, document), vertex.score)
        return list(scores.items())

    def __call__(self, vertices: List[Vertex], document: Optional[Document] = None) -> ScoredResult:
        """Sorts, displays and deduplicates vertices,
        equivalent to self.finalize(vertices, document).
        """
        return self.finalize(vertices, document)
