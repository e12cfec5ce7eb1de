"""pipeline.py

Chains parsing, scoring, vectorizing, seeding, refining and summarizing
"""

import logging
from typing import List, Tuple

from .config import KMeansConfig
from .kmeans import KMeansResult, kmeans
from .postings import rawPostings
from .results import ClusterStat, clusterResults
from .sampling import sampleVectors
from .scoring import groupedPostings, scoredPostings
from .vectors import vectorPostings

logger = logging.getLogger(__name__)


def run(lines, config : KMeansConfig = KMeansConfig(),
        trackCost : bool = False) -> Tuple[List[ClusterStat], KMeansResult]:
    """Clusters the postings of a Dataset of lines

    :param lines: A Dataset of raw posting lines
    :param config: The k-means parameters
    :param trackCost: Whether to record the assignment cost of each iteration
    :return: The cluster statistics and the outcome of the refinement loop
    """

    raw = rawPostings(lines, config.strict)
    grouped = groupedPostings(raw)
    scored = scoredPostings(grouped)
    vectors = vectorPostings(scored, config).cache()

    try:
        logger.info('Sampling %d initial centers', config.kmeansKernels)
        means = sampleVectors(vectors, config)
        result = kmeans(means, vectors, config, trackCost)
        if result.emptyClusters:
            logger.info('%d of %d clusters are empty', len(result.emptyClusters),
                        config.kmeansKernels)
        results = clusterResults(result.means, vectors, config)
    finally:
        vectors.unpersist()
    return results, result
