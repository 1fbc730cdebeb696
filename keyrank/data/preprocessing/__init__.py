"""Module implementing the preprocessing of tagged documents.

The TermFilter drops the terms which are not worth ranking
and the NgramGenerator turns the filtered sentences into
the candidate spans consumed by the ranking module.
"""
