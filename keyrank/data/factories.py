"""Module implementing factory methods for default parsers.

Functions in this module return the default instance
of the object they create.
"""

from keyrank.data.parsers import KeywordsParser, SentenceParser


def default_sentence_parser(sentences_field: str = 'sentences') -> SentenceParser:
    """Creates a `SentenceParser` parsing the tagged sentences.
    
    Args:
        sentences_field: The name of the sentences field within the expected data.
        
    Returns:
        A SentenceParser parsing the tagged document.
    """
    return SentenceParser(sentences_field)


def default_keywords_parser(keywords_field: str = 'keywords') -> KeywordsParser:
    """Creates a `KeywordsParser` parsing the annotated keywords.
    
    Args:
        keywords_field: The name of the keywords field within the expected data.
        
    Returns:
        A KeywordsParser parsing the annotations.
    """
    return KeywordsParser(keywords_field)
