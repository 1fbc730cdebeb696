"""Module implementing TF-IDF weighting and cosine similarity.

A corpus is a list of documents, each document a list of terms;
matrices are laid out with one row per document and one column
per distinct term of the corpus.
"""

from typing import Dict, Optional

import numpy as np

from keyrank.data.types import Corpus


def get_terms(corpus: Corpus) -> Dict[str, int]:
    """Maps each distinct term of corpus to its column, in order of first occurrence.
    
    Args:
        corpus: The documents, as lists of terms.
    Returns:
        The term to column mapping.
    """
    columns = {}
    for document in corpus:
        for term in document:
            columns.setdefault(term, len(columns))
    return columns


def compute_tf(corpus: Corpus, terms: Dict[str, int]) -> np.ndarray:
    """Counts the occurrences of each term in each document.
    
    Args:
        corpus: The documents, as lists of terms.
        terms: The term to column mapping.
    Returns:
        The (n_documents, n_terms) term frequency matrix.
    """
    tf = np.zeros((len(corpus), len(terms)))
    for i, document in enumerate(corpus):
        for term in document:
            column = terms.get(term)
            if column is not None:
                tf[i, column] += 1
    return tf


def compute_df(tf: np.ndarray) -> np.ndarray:
    """Counts the documents in which each term appears."""
    return np.count_nonzero(tf > 0, axis=0).astype(float)


def compute_idf(df: np.ndarray, n_documents: int) -> np.ndarray:
    """Computes the inverse document frequency `ln(n / df) + 1` of each term.
    
    The offset keeps a small weight for terms found in every
    document instead of zeroing them.
    
    Args:
        df: The document frequency of each term.
        n_documents: The number of documents of the corpus.
    Returns:
        The inverse document frequency of each term.
    """
    return np.log(n_documents / df) + 1


def compute_tfidf(tf: np.ndarray, idf: np.ndarray) -> np.ndarray:
    return tf * idf


def tfidf_matrix(corpus: Corpus) -> np.ndarray:
    """Computes the TF-IDF matrix of corpus.
    
    Args:
        corpus: The documents, as lists of terms.
    Returns:
        The (n_documents, n_terms) TF-IDF matrix.
    """
    terms = get_terms(corpus)
    tf = compute_tf(corpus, terms)
    idf = compute_idf(compute_df(tf), len(corpus))
    return compute_tfidf(tf, idf)


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine of the angle between a and b, 0 if either has null magnitude."""
    magnitude = np.linalg.norm(a) * np.linalg.norm(b)
    if magnitude == 0:
        return 0.
    return float(np.dot(a, b) / magnitude)


def cosine_similarity_matrix(a: np.ndarray, b: Optional[np.ndarray] = None) -> np.ndarray:
    """Computes the pairwise cosine similarity between the rows of a and b.
    
    Args:
        a: The first matrix, one vector per row.
        b: The second matrix, `a` itself when omitted; in that
            case the diagonal is set to 1.
    Returns:
        The (len(a), len(b)) similarity matrix.
    """
    other = a if b is None else b
    similarity = np.zeros((len(a), len(other)))
    for i, row in enumerate(a):
        for j, column in enumerate(other):
            if b is None and i == j:
                similarity[i, j] = 1.
            else:
                similarity[i, j] = cosine_similarity(row, column)
    return similarity
