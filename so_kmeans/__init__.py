"""Clusters StackOverflow postings by (language, score) with K-means on Spark"""

from .config import LANGS, KMeansConfig
from .dataset import Dataset, LocalDataset
from .errors import (ClusteringError, EmptyClusterWarning, InsufficientSamplePool,
                     InvalidConfiguration, MalformedRecord, UnknownLanguage)
from .kmeans import KMeansResult, kmeans
from .pipeline import run
from .postings import Posting, formatPosting, parsePosting
from .results import ClusterStat, clusterResults, printResults

__version__ = '0.1.0'
