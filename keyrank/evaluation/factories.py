"""Module implementing factory methods of scorers.

The functions in this module return the default instance of
the scorer objects used to compare rankings with annotations.
"""

from typing import List, Union

from keyrank.evaluation.scorers import AnnotationEvaluator, KEYWORD_MATCH_BONUS, KeywordRougeScorer


def get_keyword_rouge_scorer(
        rouge_types: Union[str, List[str]], metric: str = 'fmeasure', use_stemmer: bool = True
) -> KeywordRougeScorer:
    """Factory method for generating a KeywordRougeScorer.

    Args:
        rouge_types: The types of rouge to be evaluated.
        metric: The metric of which the average is taken.
        use_stemmer: Whether or not words are stemmed before comparison.
    Returns:
        The corresponding KeywordRougeScorer.
    """
    if isinstance(rouge_types, str):
        rouge_types = [rouge_types]
    return KeywordRougeScorer(rouge_types, metric, use_stemmer)


def default_keyword_scorer() -> KeywordRougeScorer:
    """Factory method returning the default KeywordRougeScorer, unigram and longest sequence fmeasure."""
    return get_keyword_rouge_scorer(['rouge1', 'rougeL'])


def default_annotation_evaluator(threshold: float = 0., bonus: float = KEYWORD_MATCH_BONUS) -> AnnotationEvaluator:
    """Factory method returning the default AnnotationEvaluator.

    Args:
        threshold: The smallest score of a retained match.
        bonus: The score added to every keyword and term pair.
    Returns:
        The corresponding AnnotationEvaluator.
    """
    return AnnotationEvaluator(default_keyword_scorer(), threshold, bonus)
