"""Module implementing the term graph and the GraphBuilder class.

The weight matrix is kept as a weighted `networkx.DiGraph` whose
nodes are the vertex ids, an absent edge meaning a null weight.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import networkx as nx

from keyrank.data.types import Ngram, TokenVector, Transform, VertexId
from keyrank.ranking.vertex import Vertex

logger = logging.getLogger(__name__)


@dataclass
class TermGraph:
    vertices: List[Vertex] = field(default_factory=list)
    token_vec: TokenVector = field(default_factory=list)
    G: nx.DiGraph = field(default_factory=nx.DiGraph)

    """The unit of computation of a ranking call.
    
    Attributes:
        vertices: The vertices, indexed by their id.
        token_vec: The vertex id of each input span, in input order.
        G: The weight matrix, one node per vertex id.
    """

    def __len__(self) -> int:
        return len(self.vertices)

    def weight(self, source: VertexId, target: VertexId) -> float:
        """Returns the weight of the edge from source to target, 0 if absent."""
        if self.G.has_edge(source, target):
            return self.G[source][target]['weight']
        return 0.

    def out_weight(self, source: VertexId) -> float:
        """Sums the weights over the outbound list of source, repeated entries included."""
        return sum(self.weight(source, target) for target in self.vertices[source].outbound)

    def link(self, source: VertexId, target: VertexId):
        """Appends target to the outbound list of source and source to the inbound list of target.
        
        Every call records one occurrence of the link, so a pair linked
        several times appears as many times in both lists; the weighted
        edge itself is created once.
        
        Args:
            source: The id of the vertex the edge leaves.
            target: The id of the vertex the edge reaches.
        """
        self.vertices[source].outbound.append(target)
        self.vertices[target].inbound.append(source)
        if not self.G.has_edge(source, target):
            self.G.add_edge(source, target, weight=0.)

    def add_weight(self, source: VertexId, target: VertexId, weight: float = 1.):
        """Links source to target, increasing the edge weight by weight."""
        self.link(source, target)
        self.G[source][target]['weight'] += weight

    def set_weight(self, source: VertexId, target: VertexId, weight: float):
        """Links source to target, overwriting the edge weight with weight."""
        self.link(source, target)
        self.G[source][target]['weight'] = weight


@dataclass
class GraphBuilder:
    transform: Transform

    """Utility class converting candidate spans into a TermGraph.
    
    Spans sharing the same canonical key, as computed by
    `transform`, are represented by a single vertex.
    
    Attributes:
        transform: Maps a span to its canonical text key.
    """

    def build(self, ngrams: List[Ngram]) -> TermGraph:
        """Builds the edgeless graph of the spans.
        
        Vertex ids are assigned in order of first occurrence and
        the token vector holds one id per input span.
        
        Args:
            ngrams: The ordered candidate spans.
        Returns:
            The term graph, with one empty weight row per vertex.
        """
        corpus: Dict[str, VertexId] = {}
        graph = TermGraph()
        for ngram in ngrams:
            key = self.transform(ngram)
            id_ = corpus.get(key)
            if id_ is None:
                id_ = len(corpus)
                corpus[key] = id_
                graph.vertices.append(Vertex(id_, key, list(ngram)))
            graph.token_vec.append(id_)
        graph.G.add_nodes_from(range(len(graph.vertices)))
        logger.debug('built graph of %d vertices from %d spans', len(graph), len(ngrams))
        return graph

    def __call__(self, ngrams: List[Ngram]) -> TermGraph:
        """Builds the edgeless graph of the spans, equivalent to self.build(ngrams)."""
        return self.build(ngrams)
