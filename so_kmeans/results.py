"""results.py

Summarizes the final clusters and prints them as a table
"""

import sys
from typing import Iterable, List, NamedTuple, Sequence, TextIO

from .config import KMeansConfig
from .kmeans import findClosest, truncDiv
from .vectors import langLabel


class ClusterStat(NamedTuple):
    """Statistics of one non-empty cluster"""

    langLabel: str
    langPercent: float
    clusterSize: int
    medianScore: int


def medianScore(scores : Iterable[int]) -> int:
    """Computes the median score, truncating the mean of the middle pair

    :param scores: The scores of a cluster, in any order
    :return: The median score
    """

    ordered = sorted(scores)
    if not ordered:
        raise ValueError('median of an empty cluster')
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return truncDiv(ordered[mid - 1] + ordered[mid], 2)


def dominantLanguage(points : Sequence[tuple]) -> tuple:
    """Finds the most common language code of a cluster

    Ties go to the lowest language code.

    :param points: The (language code, score) points of a cluster
    :return: The language code and how many points carry it
    """

    counts = {}
    for lang, _ in points:
        counts[lang] = counts.get(lang, 0) + 1
    return min(counts.items(), key=lambda langCount : (-langCount[1], langCount[0]))


def clusterStat(points : Sequence[tuple], config : KMeansConfig) -> ClusterStat:
    """Computes the statistics of one cluster"""

    lang, langCount = dominantLanguage(points)
    return ClusterStat(
        langLabel=langLabel(lang, config),
        langPercent=100.0 * langCount / len(points),
        clusterSize=len(points),
        medianScore=medianScore(score for _, score in points))


def clusterResults(means : Sequence[tuple], vectors, config : KMeansConfig) -> List[ClusterStat]:
    """Summarizes every non-empty cluster

    :param means: The final centers
    :param vectors: A Dataset of (language code, score) points
    :param config: The k-means parameters
    :return: One ClusterStat per non-empty cluster, ascending by median score
    """

    means = list(means)
    stats = vectors \
        .map(lambda point : (findClosest(point, means), point)) \
        .groupByKey() \
        .map(lambda cluster : clusterStat(cluster[1], config)) \
        .collect()
    return sorted(stats, key=lambda stat : stat.medianScore)


def formatResults(results : Iterable[ClusterStat]) -> List[str]:
    """Renders the cluster statistics as fixed-width table lines"""

    lines = [
        'Resulting clusters:',
        '  Score  Dominant language (%percent)  Questions',
        '================================================']
    for lang, percent, size, score in results:
        lines.append(f'{score:7d}  {lang:<17s} ({percent:<5.1f}%)      {size:7d}')
    return lines


def printResults(results : Iterable[ClusterStat], out : TextIO = sys.stdout) -> None:
    for line in formatResults(results):
        print(line, file=out)
