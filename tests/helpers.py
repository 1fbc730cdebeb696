from typing import List

from keyrank.data.terms import Term
from keyrank.data.types import Document
from keyrank.data.utils import index_document


def split_document(text: str) -> Document:
    sentences = [sentence.split() for sentence in text.split('.') if sentence.strip()]
    return index_document(sentences)


def spans(*phrases: str) -> List[List[Term]]:
    return [[Term(word, word.lower()) for word in phrase.split()] for phrase in phrases]
