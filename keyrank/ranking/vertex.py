"""Module implementing the Vertex class, the node of the term graph."""

from dataclasses import dataclass, field
from typing import List

from keyrank.data.types import Ngram, VertexId


@dataclass
class Vertex:
    id: VertexId
    val: str
    ngram: Ngram = field(default_factory=list)
    score: float = 1.
    inbound: List[VertexId] = field(default_factory=list)
    outbound: List[VertexId] = field(default_factory=list)

    """A distinct canonical span of the ranked document.
    
    Neighbours are stored as vertex ids, once per occurrence
    of the link; its strength lives in the graph's weight matrix.
    
    Attributes:
        id: The zero-based id, in order of first occurrence.
        val: The canonical text of the span.
        ngram: The terms the vertex was first derived from.
        score: The current rank of the vertex.
        inbound: The ids of the vertices linking to this one.
        outbound: The ids of the vertices this one links to.
    """

    @property
    def isolated(self) -> bool:
        return not self.inbound
