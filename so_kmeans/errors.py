"""errors.py

Exceptions and warnings raised by the clustering pipeline
"""


class ClusteringError(Exception):
    """Base class for every fatal pipeline error"""


class InvalidConfiguration(ClusteringError, ValueError):
    """The k-means parameters cannot produce a valid run"""


class MalformedRecord(ClusteringError, ValueError):
    """An input line could not be parsed into a posting"""

    def __init__(self, line : str, reason : str) -> None:
        super().__init__(f'{reason}: {line!r}')
        self.line = line
        self.reason = reason


class UnknownLanguage(ClusteringError, LookupError):
    """A question's tag is missing or not one of the known languages"""

    def __init__(self, tag) -> None:
        super().__init__(f'unknown language tag: {tag!r}')
        self.tag = tag


class InsufficientSamplePool(ClusteringError):
    """A language partition holds fewer points than its seeding quota"""

    def __init__(self, lang, available : int, required : int) -> None:
        pool = 'the point set' if lang is None else f'language code {lang}'
        super().__init__(f'{pool} has {available} points, {required} required')
        self.lang = lang
        self.available = available
        self.required = required


class EmptyClusterWarning(UserWarning):
    """A center had no points assigned during a refinement iteration"""
