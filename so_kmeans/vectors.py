"""vectors.py

Turns scored questions into (language code, score) points
"""

from typing import Optional, Sequence

from .config import KMeansConfig
from .errors import UnknownLanguage
from .postings import Posting


def firstLangInTag(tag : Optional[str], langs : Sequence[str]) -> Optional[int]:
    """Finds the index of the first language matching a tag

    :param tag: The question's tag, possibly None
    :param langs: The known languages
    :return: The index into langs, or None if the tag is missing or unknown
    """

    if tag is None:
        return None
    for index, lang in enumerate(langs):
        if tag == lang:
            return index
    return None


def vectorize(question : Posting, highScore : int, config : KMeansConfig) -> tuple:
    """Computes the point of one scored question

    :raises UnknownLanguage: If the tag is missing or not a known language
    """

    if (index := firstLangInTag(question.tags, config.langs)) is None:
        raise UnknownLanguage(question.tags)
    return (index * config.langSpread, highScore)


def vectorPostings(scored, config : KMeansConfig):
    """Computes the vectors for the kmeans

    :param scored: A Dataset of (question, high score)
    :param config: The k-means parameters
    :return: A Dataset of (language code, score) points
    """

    return scored.map(lambda qs : vectorize(qs[0], qs[1], config))


def langLabel(code : int, config : KMeansConfig) -> str:
    """Recovers the language name from a point's first coordinate"""

    return config.langs[code // config.langSpread]
