"""Module implementing the TextRank ranking engine.

The graph of the candidate spans is built by the GraphBuilder,
its edges are collected by one of the two extraction strategies
(co-reference window for words, lexical overlap for ngrams),
the ScoreIterator runs the weighted scores to a fixed point and
the ResultFinalizer turns the scored vertices into the ranking.
"""
