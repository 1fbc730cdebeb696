import pytest

from keyrank.ranking.factories import default_keyword_textrank, default_ngram_textrank
from tests.helpers import spans


def test_around_and_around():
    result = default_keyword_textrank(2)(spans(*'around and around and around'.split()))
    assert [text for text, _ in result] == ['around', 'and']
    assert result[0][1] > result[1][1]


def test_lexical_overlap_with_single_words():
    result = default_ngram_textrank(.1)(spans('able hire', 'overview', 'able', 'hire'))
    assert len(result) == 4
    assert result[0][0] == 'able hire'
    assert result[-1] == ('overview', pytest.approx(.15))
    assert {text for text, _ in result[1:3]} == {'able', 'hire'}


def test_single_span():
    assert default_ngram_textrank()(spans('big data')) == [('big data', pytest.approx(.15))]
    assert default_keyword_textrank()(spans('watson')) == [('watson', pytest.approx(.15))]


def test_empty_input():
    assert default_keyword_textrank()([]) == []
    assert default_ngram_textrank()([]) == []
    assert default_keyword_textrank().extract([]) == []


def test_ranking_is_deterministic():
    ngrams = spans(*'the cat sat on the mat and the cat ran'.split())
    textrank = default_keyword_textrank()
    assert textrank(ngrams) == textrank(ngrams)
    assert default_keyword_textrank()(ngrams) == textrank(ngrams)


def test_extract_returns_sorted_vertices():
    vertices = default_keyword_textrank().extract(spans(*'around and around and around'.split()))
    assert [vertex.val for vertex in vertices] == ['around', 'and']
    assert vertices[0].score >= vertices[1].score


def test_calls_do_not_share_state():
    textrank = default_keyword_textrank()
    first = textrank(spans('a', 'b', 'a'))
    textrank(spans(*'x y z x y z'.split()))
    assert textrank(spans('a', 'b', 'a')) == first
