"""Module implementing the term model and the document preprocessing.

Classes and functions in this module are used to load tagged
documents and to prepare the candidate spans ranked by the
`ranking` module.
"""
