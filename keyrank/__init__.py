"""KEYRANK.

This package ranks the words and the multi-word spans (ngrams) of a
tagged document by importance using the graph-based TextRank algorithm
as described by Mihalcea and Tarau in
TextRank: Bringing Order into Texts.

Documents are consumed already tokenized and tagged; the package
builds the term graph, collects its edges, iterates the weighted
scores to a fixed point and returns the ranked terms.
"""
