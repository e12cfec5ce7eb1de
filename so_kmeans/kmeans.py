"""kmeans.py

Refines the cluster centers of (language code, score) points with K-means
"""

import logging
from typing import List, NamedTuple, Optional, Sequence
import warnings

from .config import KMeansConfig
from .errors import EmptyClusterWarning

logger = logging.getLogger(__name__)


class KMeansResult(NamedTuple):
    """Outcome of the refinement loop

    converged is False when the loop stopped on the iteration budget.
    emptyClusters lists the centers that had no points in the last iteration.
    costs holds the total assignment cost seen by each iteration, if tracked.
    """

    means: List[tuple]
    iterations: int
    converged: bool
    emptyClusters: List[int]
    costs: Optional[List[int]] = None


def squaredDist(p1 : tuple, p2 : tuple) -> int:
    """Computes the squared distance between two points

    :param p1: The first point
    :param p2: The second point
    :return: The squared distance between p1 and p2
    """

    langDist = p1[0] - p2[0]
    scoreDist = p1[1] - p2[1]
    return langDist ** 2 + scoreDist ** 2


def euclideanDistance(a1 : Sequence[tuple], a2 : Sequence[tuple]) -> int:
    """Computes the total squared distance between two center arrays"""

    if len(a1) != len(a2):
        raise ValueError(f'center arrays differ in length: {len(a1)} != {len(a2)}')
    return sum(squaredDist(c1, c2) for c1, c2 in zip(a1, a2))


def findClosest(point : tuple, centers : Sequence[tuple]) -> int:
    """Calculates the index of the closest center to a point

    Ties go to the lowest index.

    :param point: A data point
    :param centers: A list containing center points
    :return: The index of the closest center
    """

    bestIndex = 0
    shortestDist = float('inf')
    for index, center in enumerate(centers):
        if (dist := squaredDist(point, center)) < shortestDist:
            shortestDist = dist
            bestIndex = index
    return bestIndex


def truncDiv(a : int, b : int) -> int:
    """Integer division rounding toward zero"""

    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def computeCoordinateSums(v1 : tuple, v2 : tuple) -> tuple:
    """Computes the sum of each coordinate

    Example:
        ((langSum1, scoreSum1), numPoints1)
      + ((langSum2, scoreSum2), numPoints2)
      = ((langSum1 + langSum2, scoreSum1 + scoreSum2), numPoints1 + numPoints2)

    :param v1: The first value containing coordinate sums
    :param v2: The second value containing coordinate sums
    :return: Sum of languages, sum of scores, and total number of points
    """

    langSum = v1[0][0] + v2[0][0]
    scoreSum = v1[0][1] + v2[0][1]
    numPoints = v1[1] + v2[1]
    return ((langSum, scoreSum), numPoints)


def computeNewCenter(coordSums : tuple) -> tuple:
    """Computes the new centerpoint of a cluster

    :param coordSums: Sums of languages, scores, and num points
    :return: The new center of the cluster, truncated to integers
    """

    (langSum, scoreSum), numPoints = coordSums
    return (truncDiv(langSum, numPoints), truncDiv(scoreSum, numPoints))

def converged(distance : float, eta : float) -> bool:
    """Decides whether the kmeans clustering converged"""

    return distance < eta


def assignmentCost(vectors, means : Sequence[tuple]) -> int:
    """Sums the distance of every point to its closest center

    :param vectors: A Dataset of points
    :param means: The current centers
    :return: The total squared distance
    """

    return vectors \
        .map(lambda point : squaredDist(point, means[findClosest(point, means)])) \
        .reduce(lambda v1, v2 : v1 + v2)


def kmeans(means : Sequence[tuple], vectors, config : KMeansConfig,
           trackCost : bool = False) -> KMeansResult:
    """Runs the K-means refinement loop

    The points are scanned once per iteration; the caller owns caching them
    for the duration of the loop (see pipeline.run). Only the per-center sums (at most K rows) are
    collected back to the caller.

    :param means: The initial centers; the list is copied, never mutated
    :param vectors: A Dataset of (language code, score) points
    :param config: The k-means parameters
    :param trackCost: Whether to record the total assignment cost per iteration
    :return: A KMeansResult with the final centers and how the loop ended
    """

    means = list(means)
    k = len(means)
    costs = [] if trackCost else None

    iteration = 1
    while True:
        if trackCost:
            costs.append(assignmentCost(vectors, means))

        # 1. Find the closest center of every point and sum each cluster
        closest = vectors \
            .map(lambda point : (findClosest(point, means), (point, 1))) \
            .reduceByKey(computeCoordinateSums) \
            .collect()

        # 2. Move every non-empty center to the mean of its points
        newMeans = list(means)
        for index, coordSums in closest:
            newMeans[index] = computeNewCenter(coordSums)

        emptyClusters = sorted(set(range(k)) - {index for index, _ in closest})
        for index in emptyClusters:
            warnings.warn(
                f'center {index} at {means[index]} has no points in iteration {iteration}',
                EmptyClusterWarning)

        # 3. Compare total squared distance to convergence distance
        distance = euclideanDistance(means, newMeans)

        logger.debug('Iteration: %d\n  * current distance: %s\n  * desired distance: %s',
                     iteration, distance, config.kmeansEta)
        for index in range(k):
            logger.debug('   %20s ==> %20s    distance: %8.0f', means[index],
                         newMeans[index], squaredDist(means[index], newMeans[index]))

        means = newMeans
        if converged(distance, config.kmeansEta):
            logger.info('Converged after %d iterations', iteration)
            return KMeansResult(means, iteration, True, emptyClusters, costs)
        if iteration >= config.kmeansMaxIterations:
            logger.warning('Reached max iterations (%d) without converging', iteration)
            return KMeansResult(means, iteration, False, emptyClusters, costs)
        iteration += 1
