"""spark.py

Dataset backed by a Spark RDD
"""

from typing import Callable, Optional

from pyspark import RDD, SparkConf, SparkContext

from .dataset import Dataset


def createContext(master : Optional[str] = None,
                  appName : str = 'StackOverflow') -> SparkContext:
    """Creates (or reuses) the SparkContext of a run

    :param master: The Spark master URL, e.g. local[4]; None leaves it to spark-submit
    :param appName: The application name shown in the Spark UI
    :return: A SparkContext object
    """

    conf = SparkConf().setAppName(appName)
    if master is not None:
        conf = conf.setMaster(master)
    return SparkContext.getOrCreate(conf)


class SparkDataset(Dataset):
    """Wraps an RDD, delegating every transformation to Spark"""

    def __init__(self, rdd : RDD) -> None:
        self.rdd = rdd

    @classmethod
    def textFile(cls, sc : SparkContext, path : str,
                 minPartitions : Optional[int] = None) -> 'SparkDataset':
        return cls(sc.textFile(path, minPartitions))

    @classmethod
    def parallelize(cls, sc : SparkContext, items, numSlices : Optional[int] = None) -> 'SparkDataset':
        return cls(sc.parallelize(list(items), numSlices))

    def __repr__(self) -> str:
        return f'SparkDataset({self.rdd!r})'

    def map(self, fn : Callable) -> 'SparkDataset':
        return SparkDataset(self.rdd.map(fn))

    def flatMap(self, fn : Callable) -> 'SparkDataset':
        return SparkDataset(self.rdd.flatMap(fn))

    def filter(self, predicate : Callable) -> 'SparkDataset':
        return SparkDataset(self.rdd.filter(predicate))

    def join(self, other : 'SparkDataset') -> 'SparkDataset':
        return SparkDataset(self.rdd.join(other.rdd))

    def groupByKey(self) -> 'SparkDataset':
        return SparkDataset(self.rdd.groupByKey().mapValues(list))

    def reduceByKey(self, fn : Callable) -> 'SparkDataset':
        return SparkDataset(self.rdd.reduceByKey(fn))

    def reduce(self, fn : Callable):
        return self.rdd.reduce(fn)

    def collect(self) -> list:
        return self.rdd.collect()

    def count(self) -> int:
        return self.rdd.count()

    def sampleUniform(self, totalCount : int, seed : int) -> list:
        return self.rdd.takeSample(False, totalCount, seed)

    def cache(self) -> 'SparkDataset':
        self.rdd.persist()
        return self

    def unpersist(self) -> 'SparkDataset':
        self.rdd.unpersist()
        return self
