import math

import pytest

from keyrank.ranking.graph import GraphBuilder
from keyrank.ranking.strategies import CoreferenceWindowStrategy, LexicalOverlapStrategy
from tests.helpers import spans


def collect(strategy, ngrams):
    graph = GraphBuilder(strategy.transform)(ngrams)
    strategy.collect(graph)
    return graph


def test_window_links_following_words():
    graph = collect(CoreferenceWindowStrategy(2), spans(*'a b c d e'.split()))
    assert [vertex.outbound for vertex in graph.vertices] == [[1, 2], [2, 3], [3, 4], [4], []]
    assert [vertex.inbound for vertex in graph.vertices] == [[], [0], [0, 1], [1, 2], [2, 3]]


@pytest.mark.parametrize('window_size', [1, 2, 3])
def test_outbound_bounded_by_window(window_size):
    graph = collect(CoreferenceWindowStrategy(window_size), spans(*'one two three four five six'.split()))
    assert all(len(vertex.outbound) <= window_size for vertex in graph.vertices)


@pytest.mark.parametrize('window_size', [1, 2, 3])
def test_outbound_bounded_by_window_per_occurrence(window_size):
    tokens = 'a b a c a b b'.split()
    graph = collect(CoreferenceWindowStrategy(window_size), spans(*tokens))
    for vertex in graph.vertices:
        assert len(vertex.outbound) <= window_size * graph.token_vec.count(vertex.id)
    expected = sum(min(window_size, len(tokens) - 1 - i) for i in range(len(tokens)))
    assert sum(len(vertex.outbound) for vertex in graph.vertices) == expected
    assert sum(len(vertex.inbound) for vertex in graph.vertices) == expected


def test_window_weights_are_additive():
    graph = collect(CoreferenceWindowStrategy(1), spans(*'a b a b'.split()))
    assert graph.weight(0, 1) == 2.
    assert graph.weight(1, 0) == 1.
    assert graph.vertices[0].outbound == [1, 1]
    assert graph.vertices[1].outbound == [0]


def test_around_and_around():
    graph = collect(CoreferenceWindowStrategy(2), spans(*'around and around and around'.split()))
    assert len(graph) == 2
    assert graph.weight(0, 1) == 2.
    assert graph.weight(0, 0) == 2.
    assert graph.weight(1, 0) == 2.
    assert graph.weight(1, 1) == 1.
    assert graph.vertices[0].outbound == [1, 0, 1, 0]
    assert graph.vertices[0].inbound == [0, 1, 0, 1]
    assert graph.vertices[1].outbound == [0, 1, 0]
    assert graph.vertices[1].inbound == [0, 1, 0]


def test_invalid_window_size():
    with pytest.raises(ValueError):
        CoreferenceWindowStrategy(0)


def test_similarity():
    assert LexicalOverlapStrategy.similarity(['able', 'hire'], ['able']) == pytest.approx(1 / math.log(2))
    assert LexicalOverlapStrategy.similarity(['a', 'b', 'c'], ['c', 'b']) == pytest.approx(
        2 / (math.log(3) + math.log(2)))


def test_similarity_counts_distinct_words():
    assert LexicalOverlapStrategy.similarity(['a', 'a'], ['a', 'b']) == pytest.approx(1 / (2 * math.log(2)))


def test_single_word_similarity_is_zero():
    assert LexicalOverlapStrategy.similarity(['able'], ['able']) == 0.
    assert LexicalOverlapStrategy.similarity(['able'], ['hire']) == 0.


def test_overlap_edges():
    graph = collect(LexicalOverlapStrategy(), spans('able hire', 'overview', 'able', 'hire'))
    assert graph.vertices[0].outbound == [2, 3]
    assert graph.vertices[0].inbound == [2, 3]
    assert graph.vertices[1].inbound == graph.vertices[1].outbound == []
    assert graph.weight(2, 0) == pytest.approx(1 / math.log(2))
    assert graph.weight(2, 3) == 0.
    assert not graph.G.has_edge(2, 3)


def test_overlap_weights_are_overwritten():
    graph = collect(LexicalOverlapStrategy(), spans('able hire', 'able', 'able hire', 'able'))
    assert graph.weight(0, 1) == pytest.approx(1 / math.log(2))
    assert graph.vertices[0].outbound == [1, 1, 1, 1]
    assert graph.vertices[1].inbound == [0, 0, 0, 0]


def test_overlap_has_no_self_loops():
    graph = collect(LexicalOverlapStrategy(), spans('big data', 'big data'))
    assert len(graph) == 1
    assert graph.G.number_of_edges() == 0


def test_overlap_threshold():
    ngrams = spans('a b c d e f', 'f g h i j k')
    similarity = 1 / (2 * math.log(6))
    assert collect(LexicalOverlapStrategy(similarity), ngrams).G.number_of_edges() == 2
    assert collect(LexicalOverlapStrategy(similarity + .01), ngrams).G.number_of_edges() == 0


def test_invalid_threshold():
    with pytest.raises(ValueError):
        LexicalOverlapStrategy(-.1)
