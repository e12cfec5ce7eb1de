"""Shared fixtures for the clustering tests."""

import pytest

from so_kmeans.config import KMeansConfig
from so_kmeans.dataset import LocalDataset


@pytest.fixture
def toyConfig() -> KMeansConfig:
    return KMeansConfig(langs=('Java', 'Python'), langSpread=50000,
                        kmeansKernels=2, kmeansEta=20.0, kmeansMaxIterations=10)


@pytest.fixture
def toyLines() -> LocalDataset:
    return LocalDataset([
        '1,1,,,10,Java',
        '1,2,,,3,Python',
        '2,3,,1,7,',
        '2,4,,2,12,',
    ])


@pytest.fixture(scope='session')
def sparkContext():
    pyspark = pytest.importorskip('pyspark')
    try:
        conf = pyspark.SparkConf().setMaster('local[2]').setAppName('so_kmeans-tests')
        sc = pyspark.SparkContext.getOrCreate(conf)
    except Exception as e:
        pytest.skip(f'Spark is not available: {e}')
    yield sc
    sc.stop()
