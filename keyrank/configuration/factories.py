"""Module implementing default configuration factories."""

from keyrank.configuration.config import Config


def default_keywords_config() -> Config:
    """Creates the default configuration for ranking single words.

    Returns:
        The default configuration of the keywords mode.
    """
    return Config(mode='keywords', limit=25)


def default_ngrams_config() -> Config:
    """Creates the default configuration for ranking keyphrases.

    Returns:
        The default configuration of the ngrams mode.
    """
    return Config(mode='ngrams', min_size=2, max_size=5, limit=25)
