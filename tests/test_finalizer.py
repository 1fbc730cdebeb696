import pytest

from keyrank.data.terms import Term
from keyrank.ranking.errors import InvalidSpanError
from keyrank.ranking.finalizer import ResultFinalizer, sort_vertices
from keyrank.ranking.vertex import Vertex
from tests.helpers import spans


def test_sort_is_stable_on_ties():
    vertices = [Vertex(0, 'a', score=.5), Vertex(1, 'b', score=1.), Vertex(2, 'c', score=.5)]
    assert [vertex.val for vertex in sort_vertices(vertices)] == ['b', 'a', 'c']


def test_single_term_keeps_surface_text(henry):
    vertex = Vertex(0, 'henry', [henry[0][0]])
    assert ResultFinalizer.surface(vertex, henry) == 'Henry'
    assert ResultFinalizer.surface(vertex) == 'Henry'


def test_span_is_sliced_from_document(henry):
    bad, golf = henry[0][2], henry[0][4]
    vertex = Vertex(0, 'bad golf', [bad, golf])
    assert ResultFinalizer.surface(vertex, henry) == 'bad at golf'


def test_span_falls_back_to_key(henry):
    bad, golf = henry[0][2], henry[0][4]
    assert ResultFinalizer.surface(Vertex(0, 'bad golf', [bad, golf])) == 'bad golf'
    assert ResultFinalizer.surface(Vertex(0, 'able hire', spans('able hire')[0]), henry) == 'able hire'


def test_span_across_sentences_falls_back_to_key(henry):
    vertex = Vertex(0, 'henry golf', [Term('Henry', 'henry', index=(0, 0)), Term('golf', 'golf', index=(1, 4))])
    assert ResultFinalizer.surface(vertex, henry + henry) == 'henry golf'


def test_span_out_of_range_falls_back_to_key(henry):
    vertex = Vertex(0, 'bad golf', [Term('bad', 'bad', index=(0, 2)), Term('golf', 'golf', index=(0, 9))])
    assert ResultFinalizer.surface(vertex, henry) == 'bad golf'


def test_empty_ngram_is_invalid():
    with pytest.raises(InvalidSpanError):
        ResultFinalizer()([Vertex(0, 'empty', [])])


def test_deduplicates_keeping_best_score(henry):
    bad, at, golf = henry[0][2:5]
    vertices = [Vertex(0, 'bad golf', [bad, golf], score=1.), Vertex(1, 'bad at golf', [bad, at, golf], score=2.)]
    assert ResultFinalizer()(vertices, henry) == [('bad at golf', 2.)]


def test_empty_result():
    assert ResultFinalizer()([]) == []
