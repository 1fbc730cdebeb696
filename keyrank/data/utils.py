"""Module implementing utility functions used by parsers and the app."""

import json
from typing import List

from keyrank.data.terms import Term
from keyrank.data.types import Data, Document, FilePath


def load_json(filepath: FilePath, encoding: str = 'utf-8') -> Data:
    """Loads a `json` file and returns a `Data` object.
    
    Args:
        filepath: The location of the file.
        encoding: The encoding of the file.
        
    Returns:
        The content of the file as a dictionary with `str` keys.
    """
    with open(filepath, 'r', encoding=encoding) as fp:
        data = json.load(fp)
    return data


def dump_json(data: Data, filepath: FilePath, encoding: str = 'utf-8'):
    """Writes a `Data` object to a `json` file.

    Args:
        data: The data to write.
        filepath: The location of the file.
        encoding: The encoding of the file.
    """
    with open(filepath, 'w', encoding=encoding) as fp:
        json.dump(data, fp)
        fp.flush()


def index_document(sentences: List[List[str]]) -> Document:
    """Builds a tagless document from pre-tokenized sentences.

    Every term is lower-cased for its normal form and carries
    its (sentence, term) position.

    Args:
        sentences: The tokens of each sentence.
    Returns:
        The document as lists of terms.
    """
    return [
        [Term(token, token.lower(), index=(i, j)) for j, token in enumerate(sentence)]
        for i, sentence in enumerate(sentences)
    ]
