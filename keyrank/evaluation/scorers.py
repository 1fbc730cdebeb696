"""Callable objects comparing ranked terms with annotated keywords.

The KeywordRougeScorer evaluates the similarity of two keyword
phrases, the AnnotationEvaluator pairs each annotated keyword
with the extracted term closest to it, as measured by the TF-IDF
cosine similarity of their words refined by their edit distance.
"""

import statistics as st
from dataclasses import asdict, dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from rouge_score.rouge_scorer import RougeScorer

from keyrank.data.types import BaseScorer, Data, Keyword, ScoredResult
from keyrank.evaluation.distances import intersection_weight, normalized_edit_distance
from keyrank.evaluation.tfidf import cosine_similarity_matrix, tfidf_matrix

KEYWORD_MATCH_BONUS = .2


def normalize(phrase: str) -> str:
    """Lowercases phrase and collapses its whitespace."""
    return ' '.join(phrase.lower().split())


@dataclass
class KeywordRougeScorer:
    rouge_types: List[str]
    metric: str = 'fmeasure'
    use_stemmer: bool = True
    scorer: RougeScorer = field(init=False, repr=False)

    """Rouge similarity between two keyword phrases.

    Both phrases are normalized before scoring, so that case and
    spacing never count as a difference; an empty phrase matches
    nothing.

    Attributes:
        rouge_types: The rouge types from which the average is taken.
        metric: The rouge measure averaged, one of precision, recall, fmeasure.
        use_stemmer: Whether or not words are stemmed before comparison.
        scorer: The rouge evaluator, built from the above.
    """

    def __post_init__(self):
        self.scorer = RougeScorer(self.rouge_types, use_stemmer=self.use_stemmer)

    def score(self, target: Keyword, prediction: str) -> float:
        """Evaluates the average rouge similarity between target and prediction.

        Args:
            target: The annotated keyword.
            prediction: The extracted term.
        Returns:
            The mean of the metric over the rouge types, 0 if
            either phrase is empty once normalized.
        """
        target, prediction = normalize(target), normalize(prediction)
        if not target or not prediction:
            return 0.
        scores = self.scorer.score(target, prediction)
        return st.mean(getattr(scores[rouge_type], self.metric) for rouge_type in self.rouge_types)

    def __call__(self, target: Keyword, prediction: str) -> float:
        return self.score(target, prediction)


@dataclass
class KeywordMatch:
    keyword: Keyword
    term: str
    score: float
    similarity: float
    distance: float
    overlap: float
    rouge: float

    """The extracted term best matching an annotated keyword.

    Attributes:
        keyword: The annotated keyword, as written.
        term: The extracted term, as displayed.
        score: The TF-IDF similarity plus the match bonus, minus the distance.
        similarity: The TF-IDF cosine similarity of the two phrases.
        distance: The normalized edit distance of the two phrases.
        overlap: The intersection weight of the words of the two phrases.
        rouge: The rouge similarity of the two phrases.
    """

    def as_data(self) -> Data:
        return asdict(self)


@dataclass
class AnnotationEvaluator:
    scorer: BaseScorer
    threshold: float = 0.
    bonus: float = KEYWORD_MATCH_BONUS

    """Pairs annotated keywords with the extracted terms.

    The extracted terms and the keywords form a single corpus;
    a keyword is only matched with terms sharing at least one of
    its words. Among those, the term with the highest cosine
    similarity plus bonus minus normalized edit distance is kept.

    Attributes:
        scorer: The phrase level evaluator reported alongside each match.
        threshold: The smallest score of a retained match.
        bonus: The score added to every cross-source pair.
    """

    @staticmethod
    def similarities(terms: List[str], keywords: List[str]) -> np.ndarray:
        """Computes the (n_terms, n_keywords) TF-IDF cosine similarity matrix.

        Args:
            terms: The normalized extracted terms.
            keywords: The normalized annotated keywords.
        Returns:
            The similarity of every term with every keyword.
        """
        tfidf = tfidf_matrix([phrase.split() for phrase in terms + keywords])
        return cosine_similarity_matrix(tfidf[:len(terms)], tfidf[len(terms):])

    def best(self, keyword: str, terms: List[str], similarities: np.ndarray) -> Optional[Tuple[int, float]]:
        """Finds the index and score of the term closest to keyword, None if no term shares its words."""
        found = None
        for i, term in enumerate(terms):
            if similarities[i] <= 0:
                continue
            score = float(similarities[i]) + self.bonus - normalized_edit_distance(keyword, term)
            if found is None or score > found[1]:
                found = (i, score)
        return found

    def evaluate(self, results: ScoredResult, keywords: List[Keyword]) -> List[KeywordMatch]:
        """Finds the best extracted term of each annotated keyword.

        Args:
            results: The ranked (text, score) pairs.
            keywords: The annotated keywords.
        Returns:
            The matches with a positive score not under the threshold,
            by descending score; ties keep the annotation order.
        """
        if not results or not keywords:
            return []
        terms = [normalize(text) for text, _ in results]
        normals = [normalize(keyword) for keyword in keywords]
        similarities = self.similarities(terms, normals)
        matches = []
        for j, keyword in enumerate(keywords):
            found = self.best(normals[j], terms, similarities[:, j])
            if found is None:
                continue
            i, score = found
            if score <= 0 or score < self.threshold:
                continue
            text = results[i][0]
            matches.append(KeywordMatch(
                keyword=keyword,
                term=text,
                score=score,
                similarity=float(similarities[i, j]),
                distance=normalized_edit_distance(normals[j], terms[i]),
                overlap=intersection_weight(normals[j].split(), terms[i].split()),
                rouge=self.scorer(keyword, text)
            ))
        return sorted(matches, key=lambda match: -match.score)

    def __call__(self, results: ScoredResult, keywords: List[Keyword]) -> List[KeywordMatch]:
        return self.evaluate(results, keywords)
