"""__main__.py

Clusters a StackOverflow postings file on Spark and prints the clusters

Usage: python -m so_kmeans <input> [<output>]

The Spark master comes from spark-submit, or from SO_KMEANS_MASTER (e.g. local[4])
when run directly.
"""

import logging
import os
import sys

from .config import KMeansConfig
from .pipeline import run
from .results import formatResults, printResults
from .spark import SparkDataset, createContext


def main() -> None:
    """Runs the clustering pipeline over the input file"""

    if len(sys.argv) not in (2, 3):
        print('Usage: so_kmeans <input> [<output>]', file=sys.stderr)
        exit(-1)

    logging.basicConfig(
        level=os.environ.get('SO_KMEANS_LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    sc = createContext(os.environ.get('SO_KMEANS_MASTER'))
    try:
        lines = SparkDataset.textFile(sc, sys.argv[1])
        results, outcome = run(lines, KMeansConfig())
        if not outcome.converged:
            print(f'Reached max iterations ({outcome.iterations})!', file=sys.stderr)
        printResults(results)
        if len(sys.argv) == 3:
            sc.parallelize(formatResults(results), 1).saveAsTextFile(sys.argv[2])
    finally:
        sc.stop()


if __name__ == '__main__':
    main()
