"""Module implementing string distances between phrases.

Distances refine the TF-IDF similarity of an extracted term
and an annotated keyword, penalizing pairs whose surface forms
differ even when they share their words.
"""

from typing import List

import numpy as np


def edit_distance(a: str, b: str) -> int:
    """Computes the Levenshtein distance between a and b.

    Wagner-Fischer dynamic programming, every insertion, deletion
    and change costing 1.

    Args:
        a: The starting phrase.
        b: The target phrase.
    Returns:
        The smallest number of edits turning a into b.
    """
    d = np.zeros((len(a) + 1, len(b) + 1), dtype=int)
    d[:, 0] = np.arange(len(a) + 1)
    d[0, :] = np.arange(len(b) + 1)
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            change = d[i - 1, j - 1] + int(a[i - 1] != b[j - 1])
            d[i, j] = min(change, d[i - 1, j] + 1, d[i, j - 1] + 1)
    return int(d[len(a), len(b)])


def normalized_edit_distance(a: str, b: str) -> float:
    """The edit distance divided by the summed lengths, 0 for two empty phrases."""
    total = len(a) + len(b)
    if total == 0:
        return 0.
    return edit_distance(a, b) / total


def intersection_weight(a: List[str], b: List[str]) -> float:
    """Shares the distinct words of a and b over the length of the shorter one.

    Args:
        a: The words of the first phrase.
        b: The words of the second phrase.
    Returns:
        The intersection weight, 0 if either phrase is empty.
    """
    shortest = min(len(a), len(b))
    if shortest == 0:
        return 0.
    return len(set(a) & set(b)) / shortest
