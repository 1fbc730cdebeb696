"""Module implementing the comparison of ranked keywords with annotations.

TF-IDF weighting, cosine similarity and string distances are
provided as plain numerical helpers; the scorers combine them to
pair extracted terms with the keywords annotated on a document.
"""
