"""Module implementing the ScoreIterator class.

The iterator solves the weighted TextRank fixed point

    S(v) = (1 - d) + d * sum_{u in In(v)} w(u, v) / sum_{x in Out(u)} w(u, x) * S(u)

approximately, stopping when every score moved by no more than
the tolerance or after a bounded number of iterations.
"""

import logging
from dataclasses import dataclass

import networkx as nx
import numpy as np

from keyrank.ranking.graph import TermGraph

logger = logging.getLogger(__name__)

DAMPING = .85
TOLERANCE = .0001
MAX_ITERATIONS = 100


def multiplicities(graph: TermGraph) -> np.ndarray:
    """Counts the occurrences of each link.
    
    Entry `[u, v]` is the number of times v appears in the outbound
    list of u, which is also the number of times u appears in the
    inbound list of v.
    """
    counts = np.zeros((len(graph), len(graph)))
    for vertex in graph.vertices:
        np.add.at(counts, (vertex.id, vertex.outbound), 1)
    return counts


def transition_matrix(graph: TermGraph) -> np.ndarray:
    """Computes the matrix of the normalized inbound weights.
    
    The sums of the fixed point run over the inbound and outbound
    lists, repeated entries included: entry `[v, u]` is the number
    of occurrences of u in the inbound list of v times the weight of
    the edge u->v, divided by the sum of the weights over the
    outbound list of u. Vertices without outbound weight contribute
    nothing.
    
    Args:
        graph: The term graph with its edges collected.
    Returns:
        The (n_vertices, n_vertices) transition matrix.
    """
    weights = nx.to_numpy_array(graph.G, nodelist=list(range(len(graph))), weight='weight')
    weighted = multiplicities(graph) * weights
    out_weights = np.array([[graph.out_weight(vertex.id)] for vertex in graph.vertices])
    normalized = np.divide(weighted, out_weights, out=np.zeros_like(weighted), where=out_weights != 0)
    return normalized.T


@dataclass
class ScoreIterator:
    damping: float = DAMPING
    tolerance: float = TOLERANCE
    max_iterations: int = MAX_ITERATIONS

    """Runs the weighted scores of a term graph to a fixed point.
    
    Updates are synchronous: each pass computes the new scores
    of all vertices from the previous ones only, in a separate
    buffer, before replacing them.
    
    Attributes:
        damping: The probability mass retained from the neighbours.
        tolerance: The largest change of a converged score.
        max_iterations: The cap on the number of passes.
    """

    def iterate(self, graph: TermGraph) -> int:
        """Scores the vertices of graph, in place.
        
        Args:
            graph: The term graph with its edges collected.
        Returns:
            The number of passes performed.
        """
        n = len(graph)
        if n == 0:
            return 0
        transition = transition_matrix(graph)
        scores = np.array([vertex.score for vertex in graph.vertices], dtype=float)
        converged, iterations = 0, 0
        while converged < n and iterations < self.max_iterations:
            iterations += 1
            updated = (1 - self.damping) + self.damping * (transition @ scores)
            converged = int(np.count_nonzero(np.abs(updated - scores) <= self.tolerance))
            scores = updated
        for vertex, score in zip(graph.vertices, scores):
            vertex.score = float(score)
        logger.debug('scored %d vertices in %d iterations (%d converged)', n, iterations, converged)
        return iterations

    def __call__(self, graph: TermGraph) -> int:
        """Scores the vertices of graph, equivalent to self.iterate(graph)."""
        return self.iterate(graph)
